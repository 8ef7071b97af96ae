"""Configuration for quiverdata.

Only one setting exists: the data folder every source path is built under.
It resolves, first match wins, from

1. the ``QUIVERDATA_DATA_FOLDER`` environment variable,
2. ``data_folder`` at the top level of the TOML config file
   (``QUIVERDATA_CONFIG``, default ``~/.config/quiverdata/config.toml``),
3. ``~/data``.
"""

from __future__ import annotations

import logging
import os
import re
import warnings
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib

DATA_FOLDER_ENV = "QUIVERDATA_DATA_FOLDER"
DATA_FOLDER_KEY = "data_folder"
DEFAULT_DATA_FOLDER = Path.home() / "data"
CONFIG_PATH = Path(
    os.getenv("QUIVERDATA_CONFIG", str(Path.home() / ".config" / "quiverdata" / "config.toml"))
).expanduser()

_KEY_LINE_RE = re.compile(rf"^\s*{DATA_FOLDER_KEY}\s*=")
_TABLE_HEADER_RE = re.compile(r"^\s*\[")


@dataclass(frozen=True)
class DataFolderSetting:
    """Resolved data folder and where it came from ("env", "file" or "default")."""

    path: Path
    origin: str


def load_config() -> dict:
    """Return parsed config content from CONFIG_PATH ({} when absent or unparsable)."""
    if not CONFIG_PATH.exists():
        return {}
    try:
        return tomllib.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        warnings.warn(f"Failed to parse quiverdata config at {CONFIG_PATH}: {exc}", stacklevel=2)
        return {}


def get_config_data_folder() -> str | None:
    """Return data_folder from the config file, if set to a non-empty string."""
    value = load_config().get(DATA_FOLDER_KEY)
    return value if isinstance(value, str) and value.strip() else None


def resolve_data_folder() -> DataFolderSetting:
    env_value = os.getenv(DATA_FOLDER_ENV)
    if env_value:
        return DataFolderSetting(Path(env_value).expanduser(), "env")

    file_value = get_config_data_folder()
    if file_value is not None:
        return DataFolderSetting(Path(file_value).expanduser(), "file")

    return DataFolderSetting(DEFAULT_DATA_FOLDER, "default")


DATA_FOLDER = resolve_data_folder().path


def get_data_folder() -> Path:
    """Return the data folder resolved at import time."""
    return DATA_FOLDER


def set_config_data_folder(value: str | Path) -> Path:
    """Persist data_folder as a top-level key, keeping the rest of the file intact.

    An existing top-level assignment is replaced in place. Otherwise the key is
    inserted before the first ``[table]`` header so it stays top-level.
    """
    resolved = Path(value).expanduser()
    escaped = str(resolved).replace("\\", "\\\\").replace('"', '\\"')
    new_line = f'{DATA_FOLDER_KEY} = "{escaped}"'

    lines = CONFIG_PATH.read_text(encoding="utf-8").splitlines() if CONFIG_PATH.exists() else []
    first_table = next(
        (idx for idx, line in enumerate(lines) if _TABLE_HEADER_RE.match(line)), len(lines)
    )
    existing = next(
        (idx for idx in range(first_table) if _KEY_LINE_RE.match(lines[idx])), None
    )

    if existing is not None:
        lines[existing] = new_line
    else:
        lines.insert(first_table, new_line)
        if first_table < len(lines) - 1:
            lines.insert(first_table + 1, "")

    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info(f"data_folder set to {resolved} in {CONFIG_PATH}")
    return resolved
