"""Custom data type framework: base interface, registry, serialization, reading."""

from quiverdata.data.base import (
    BaseData,
    FormatError,
    Resolution,
    SubscriptionContext,
    SubscriptionDataSource,
    TransportMedium,
)
from quiverdata.data.converters import (
    FieldSpec,
    TextConverter,
    TypeChangeConverter,
    UtcDatetimeConverter,
)
from quiverdata.data.registry import (
    get_data_type,
    is_data_type_registered,
    list_data_types,
    register_data_type,
)

__all__ = [
    # Interface
    "BaseData",
    "FormatError",
    "Resolution",
    "SubscriptionContext",
    "SubscriptionDataSource",
    "TransportMedium",
    # Converters
    "FieldSpec",
    "TextConverter",
    "TypeChangeConverter",
    "UtcDatetimeConverter",
    # Registry
    "register_data_type",
    "get_data_type",
    "list_data_types",
    "is_data_type_registered",
]
