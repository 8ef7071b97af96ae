"""Quiver Quantitative transaction-direction normalization."""

from __future__ import annotations

from typing import Any

from quiverdata.data.converters import TypeChangeConverter
from quiverdata.orders import OrderDirection

# Keys are lowercase; lookups lowercase the vendor token first.
# "bearish" -> BUY is the vendor's published mapping and downstream consumers depend on it.
DIRECTION_TOKENS: dict[str, OrderDirection] = {
    "bearish": OrderDirection.BUY,
    "bullish": OrderDirection.BUY,
    "purchase": OrderDirection.BUY,
    "buy": OrderDirection.BUY,
    "short": OrderDirection.SELL,
    "sale": OrderDirection.SELL,
    "sell": OrderDirection.SELL,
}


def normalize_direction(token: Any) -> OrderDirection:
    """Map any vendor token to a direction. Unknown, empty and null tokens give HOLD."""
    if token is None:
        return OrderDirection.HOLD
    return DIRECTION_TOKENS.get(str(token).lower(), OrderDirection.HOLD)


class TransactionDirectionConverter(TypeChangeConverter[OrderDirection]):
    """Converts Quiver transaction directions to and from :class:`OrderDirection`."""

    def to_wire(self, value: OrderDirection) -> str:
        return OrderDirection(value).value

    def from_wire(self, value: Any) -> OrderDirection:
        return normalize_direction(value)
