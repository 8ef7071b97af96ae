"""quiverdata: Quiver Quantitative alternative data types for trading hosts."""

from __future__ import annotations

from typing import Any


def get_data_type(*args: Any, **kwargs: Any) -> Any:
    import quiverdata.vendors  # noqa: F401
    from quiverdata.data.registry import get_data_type as _get_data_type

    return _get_data_type(*args, **kwargs)


def list_data_types(*args: Any, **kwargs: Any) -> Any:
    import quiverdata.vendors  # noqa: F401
    from quiverdata.data.registry import list_data_types as _list_data_types

    return _list_data_types(*args, **kwargs)


__all__ = ["get_data_type", "list_data_types"]
