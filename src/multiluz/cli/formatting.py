"""Plain-text rendering helpers shared by commands."""

from datetime import date
from decimal import Decimal
from typing import Optional


def money(value: Decimal) -> str:
    return f"{value:,.2f}"


def percent(fraction: Decimal) -> str:
    return f"{fraction * 100:.1f}%"


def optional_date(value: Optional[date]) -> str:
    return value.isoformat() if value is not None else "-"
