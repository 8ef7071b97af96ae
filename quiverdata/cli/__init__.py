"""quiverdata CLI: inspect data types, resolve sources and parse vendor files.

Entry point: ``quiverdata`` console script via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiverdata",
        description="Quiver alternative data CLI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    from quiverdata.cli import config, parse, source, types

    types.register(sub)
    source.register(sub)
    parse.register(sub)
    config.register(sub)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns exit code (0=ok, 1=user error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 1

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1


def cli() -> None:  # pragma: no cover
    """Console-script wrapper that calls ``sys.exit``."""
    sys.exit(main())
