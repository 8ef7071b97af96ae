"""Tests for configuration resolution."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from quiverdata import config


@pytest.fixture
def reloaded_config(monkeypatch, tmp_path):
    """Reload quiverdata.config against an isolated config file and env."""

    def _reload(env_folder: str | None = None, file_content: str | None = None):
        config_path = tmp_path / "config.toml"
        if file_content is not None:
            config_path.write_text(file_content, encoding="utf-8")
        monkeypatch.setenv("QUIVERDATA_CONFIG", str(config_path))
        if env_folder is None:
            monkeypatch.delenv("QUIVERDATA_DATA_FOLDER", raising=False)
        else:
            monkeypatch.setenv("QUIVERDATA_DATA_FOLDER", env_folder)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)


def test_default_data_folder(reloaded_config):
    cfg = reloaded_config()

    assert cfg.get_data_folder() == cfg.DEFAULT_DATA_FOLDER
    assert cfg.DEFAULT_DATA_FOLDER == Path.home() / "data"


def test_env_var_wins_over_config_file(reloaded_config, tmp_path):
    cfg = reloaded_config(
        env_folder=str(tmp_path / "from_env"),
        file_content='data_folder = "/from/file"\n',
    )

    assert cfg.get_data_folder() == tmp_path / "from_env"


def test_config_file_used_without_env(reloaded_config):
    cfg = reloaded_config(file_content='data_folder = "/from/file"\n')

    assert cfg.get_data_folder() == Path("/from/file")
    assert cfg.get_config_data_folder() == "/from/file"


def test_invalid_config_file_warns_and_falls_back(reloaded_config):
    with pytest.warns(UserWarning, match="Failed to parse quiverdata config"):
        cfg = reloaded_config(file_content="data_folder = [unterminated\n")

    assert cfg.get_data_folder() == cfg.DEFAULT_DATA_FOLDER


def test_set_config_data_folder_updates_existing_line(reloaded_config, tmp_path):
    cfg = reloaded_config(file_content='other = 1\ndata_folder = "/old"\n')

    resolved = cfg.set_config_data_folder(tmp_path / "new")

    assert resolved == tmp_path / "new"
    assert cfg.get_config_data_folder() == str(tmp_path / "new")
    assert cfg.load_config()["other"] == 1


def test_set_config_data_folder_creates_file(reloaded_config, tmp_path):
    cfg = reloaded_config()

    cfg.set_config_data_folder(tmp_path / "created")

    assert cfg.CONFIG_PATH.exists()
    assert cfg.get_config_data_folder() == str(tmp_path / "created")


def test_set_config_data_folder_stays_above_tables(reloaded_config, tmp_path):
    cfg = reloaded_config(file_content='[vendors]\ndata_folder = "/nested"\n')

    cfg.set_config_data_folder(tmp_path / "top")

    loaded = cfg.load_config()
    assert loaded["data_folder"] == str(tmp_path / "top")
    assert loaded["vendors"] == {"data_folder": "/nested"}


@pytest.mark.parametrize(
    ("env_folder", "file_content", "origin"),
    [
        ("/from/env", 'data_folder = "/from/file"\n', "env"),
        (None, 'data_folder = "/from/file"\n', "file"),
        (None, 'data_folder = "  "\n', "default"),
        (None, None, "default"),
    ],
)
def test_resolve_data_folder_origin(reloaded_config, env_folder, file_content, origin):
    cfg = reloaded_config(env_folder=env_folder, file_content=file_content)

    setting = cfg.resolve_data_folder()

    assert setting.origin == origin
    assert setting.path == cfg.get_data_folder()
