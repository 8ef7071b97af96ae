"""Quiver Quantitative vendor package.

Importing this package registers its data types.
"""

from quiverdata.data.registry import register_data_type
from quiverdata.vendors.quiver.cnbc import QuiverCNBC
from quiverdata.vendors.quiver.converters import (
    DIRECTION_TOKENS,
    TransactionDirectionConverter,
    normalize_direction,
)

register_data_type(QuiverCNBC)

__all__ = [
    # Data types
    "QuiverCNBC",
    # Converters
    "DIRECTION_TOKENS",
    "TransactionDirectionConverter",
    "normalize_direction",
]
