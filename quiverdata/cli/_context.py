"""Argument resolution shared by commands that build a subscription context."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime

from quiverdata.data.base import BaseData, SubscriptionContext


def add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type",
        dest="data_type",
        default="QuiverCNBC",
        help="Registered data type name (default: QuiverCNBC)",
    )
    parser.add_argument("--symbol", required=True, help="Ticker symbol (e.g., AAPL)")
    parser.add_argument(
        "--date",
        default=None,
        help="Subscription date YYYY-MM-DD (default: today)",
    )
    parser.add_argument("--live", action="store_true", help="Resolve in live mode")


def resolve_data_type(name: str) -> type[BaseData]:
    """Look up a data type, exiting with the registry's message when unknown."""
    import quiverdata.vendors  # noqa: F401
    from quiverdata.data.registry import get_data_type

    try:
        return get_data_type(name)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        raise SystemExit(1) from exc


def resolve_context(args: argparse.Namespace) -> SubscriptionContext:
    if args.date is None:
        subscription_date = date.today()
    else:
        try:
            subscription_date = datetime.strptime(args.date, "%Y-%m-%d").date()
        except ValueError as exc:
            print(f"error: invalid --date {args.date!r} (expected YYYY-MM-DD)", file=sys.stderr)
            raise SystemExit(1) from exc
    return SubscriptionContext(symbol=args.symbol, date=subscription_date, live_mode=args.live)
