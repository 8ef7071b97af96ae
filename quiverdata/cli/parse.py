"""``quiverdata parse``: parse a vendor file and print its records."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from quiverdata.cli._context import add_context_arguments, resolve_context, resolve_data_type


def register(subparsers: argparse._SubParsersAction) -> None:
    parse_parser = subparsers.add_parser("parse", help="Parse a vendor file into records")
    add_context_arguments(parse_parser)
    parse_parser.add_argument(
        "--file",
        default=None,
        help="File to parse (default: the resolved source for --symbol)",
    )
    parse_parser.add_argument(
        "--format",
        choices=["table", "csv", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parse_parser.add_argument("--output", default=None, help="Write to this file instead of stdout")
    parse_parser.add_argument("--limit", type=int, default=None, help="Maximum rows to print")
    parse_parser.set_defaults(handler=_handle_parse)


def _handle_parse(args: argparse.Namespace) -> int:
    from quiverdata.cli._output import write_frame
    from quiverdata.data.reader import read_file, read_source, to_frame

    data_type = resolve_data_type(args.data_type)
    context = resolve_context(args)

    if args.file is not None:
        path = Path(args.file)
        if not path.exists():
            print(f"error: file not found: {path}", file=sys.stderr)
            return 1
        records = read_file(data_type, context, path)
    else:
        records = read_source(data_type, context)

    if not records:
        print(f"No {data_type.__name__} records for {context.symbol}", file=sys.stderr)
        return 0

    write_frame(to_frame(records), fmt=args.format, output=args.output, limit=args.limit)
    return 0
