"""``quiverdata source``: print where a subscription's raw file lives."""

from __future__ import annotations

import argparse

from quiverdata.cli._context import add_context_arguments, resolve_context, resolve_data_type


def register(subparsers: argparse._SubParsersAction) -> None:
    source_parser = subparsers.add_parser("source", help="Resolve a data source location")
    add_context_arguments(source_parser)
    source_parser.set_defaults(handler=_handle_source)


def _handle_source(args: argparse.Namespace) -> int:
    data_type = resolve_data_type(args.data_type)
    source = data_type.get_source(resolve_context(args))
    print(source.source)
    return 0
