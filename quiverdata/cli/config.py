"""``quiverdata config``: show and persist the data folder setting."""

from __future__ import annotations

import argparse
import sys


def register(subparsers: argparse._SubParsersAction) -> None:
    config_parser = subparsers.add_parser("config", help="Show or update configuration")
    sub = config_parser.add_subparsers(dest="config_command")

    show_p = sub.add_parser("show", help="Show the resolved data folder and config file")
    show_p.set_defaults(handler=_handle_show)

    set_p = sub.add_parser("set", help="Persist the data folder to the config file")
    set_p.add_argument("--data-folder", default=None, help="Base data folder to persist")
    set_p.set_defaults(handler=_handle_set)


def _handle_show(args: argparse.Namespace) -> int:
    from quiverdata import config

    setting = config.resolve_data_folder()
    print(f"config file: {config.CONFIG_PATH} ({'present' if config.CONFIG_PATH.exists() else 'absent'})")
    print(f"data folder: {config.get_data_folder()}")
    if setting.path != config.get_data_folder():
        # The env or file changed after import; new processes pick up the new value.
        print(f"  next session: {setting.path} (from {setting.origin})")
    else:
        print(f"  from: {setting.origin}")

    file_settings = config.load_config()
    if file_settings:
        print("file settings:")
        for key in sorted(file_settings):
            print(f"  {key} = {file_settings[key]!r}")
    return 0


def _handle_set(args: argparse.Namespace) -> int:
    from quiverdata import config

    if args.data_folder is None:
        print("error: config set: --data-folder is required", file=sys.stderr)
        return 1

    resolved = config.set_config_data_folder(args.data_folder)
    print(f"data_folder = {resolved} written to {config.CONFIG_PATH}")
    if config.resolve_data_folder().origin == "env":
        print(f"Note: {config.DATA_FOLDER_ENV} is set and takes precedence over the file.")
    return 0
