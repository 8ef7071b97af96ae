"""``quiverdata types``: list registered data types and their metadata."""

from __future__ import annotations

import argparse
import json


def register(subparsers: argparse._SubParsersAction) -> None:
    types_parser = subparsers.add_parser("types", help="List registered data types")
    types_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    types_parser.set_defaults(handler=_handle_types)


def _handle_types(args: argparse.Namespace) -> int:
    import quiverdata.vendors  # noqa: F401
    from quiverdata.data.registry import get_data_type, list_data_types

    rows = []
    for name in list_data_types():
        data_type = get_data_type(name)
        rows.append(
            {
                "name": name,
                "default_resolution": data_type.default_resolution().value,
                "supported_resolutions": ",".join(
                    r.value for r in data_type.supported_resolutions()
                ),
                "sparse": data_type.is_sparse_data(),
                "requires_mapping": data_type.requires_mapping(),
                "time_zone": str(data_type.data_time_zone()),
            }
        )

    if args.format == "json":
        print(json.dumps(rows, indent=2))
        return 0

    from quiverdata.cli._output import print_rows

    print_rows(rows)
    return 0
