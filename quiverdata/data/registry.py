"""Data type registry.

Data types register themselves when their vendor package is imported.
Lookups are case-insensitive on the class name.
"""

from __future__ import annotations

from quiverdata._error_messages import data_type_not_found_error
from quiverdata.data.base import BaseData

# Global data type registry (lowercased class name -> class)
_DATA_TYPE_REGISTRY: dict[str, type[BaseData]] = {}


def register_data_type(data_type: type[BaseData]) -> type[BaseData]:
    """Register a data type class.

    Args:
        data_type: BaseData subclass

    Returns:
        The same class, so this can be used as a decorator

    Raises:
        ValueError: If a data type with the same name is already registered
    """
    key = data_type.__name__.lower()
    if key in _DATA_TYPE_REGISTRY:
        raise ValueError(f"Data type '{data_type.__name__}' is already registered")
    _DATA_TYPE_REGISTRY[key] = data_type
    return data_type


def get_data_type(name: str) -> type[BaseData]:
    """Get a registered data type by name (e.g., "QuiverCNBC", "quivercnbc").

    Raises:
        KeyError: If the data type is not registered
    """
    key = name.lower()
    if key not in _DATA_TYPE_REGISTRY:
        raise KeyError(data_type_not_found_error(name, list_data_types()))
    return _DATA_TYPE_REGISTRY[key]


def list_data_types() -> list[str]:
    """List all registered data type names, sorted."""
    return sorted(data_type.__name__ for data_type in _DATA_TYPE_REGISTRY.values())


def is_data_type_registered(name: str) -> bool:
    return name.lower() in _DATA_TYPE_REGISTRY
