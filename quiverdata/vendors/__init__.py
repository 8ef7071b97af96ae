"""Vendor data types.

Each vendor is a self-contained package with its data types and value
converters. Importing this package imports every vendor, which registers
their data types.

Usage:
    from quiverdata.data.registry import get_data_type, list_data_types
    import quiverdata.vendors  # noqa: F401

    cnbc = get_data_type("QuiverCNBC")
"""

from quiverdata.vendors.quiver import QuiverCNBC

__all__ = [
    "QuiverCNBC",
]
