"""Trade direction shared by all data types that carry one."""

from __future__ import annotations

from enum import Enum


class OrderDirection(str, Enum):
    """Direction of a reported trade. The value is the canonical wire name."""

    BUY = "Buy"
    SELL = "Sell"
    HOLD = "Hold"
