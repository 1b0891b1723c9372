"""Utility functions for payroll calculations."""

from __future__ import annotations

from datetime import time
from decimal import Decimal, InvalidOperation


def to_decimal(value: object) -> Decimal:
    """Convert an int, float or string to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None


def parse_clock(val: str | time | float | Decimal) -> Decimal:
    """Parse a clock reading into fractional hours.

    Accepts '17:30', '17.5', a datetime.time or a number. 17:30 -> 17.5.
    """
    if isinstance(val, time):
        return Decimal(val.hour) + Decimal(val.minute) / Decimal(60)

    if isinstance(val, str) and ":" in val:
        parts = val.strip().split(":")
        hour, minute = int(parts[0]), int(parts[1])
        return Decimal(hour) + Decimal(minute) / Decimal(60)

    return to_decimal(val)


# Mon-Fri (clock_in, clock_out) pairs used for the demonstration week
DEMO_WEEK: list[tuple[Decimal, Decimal]] = [
    (Decimal("8.0"), Decimal("17.0")),
    (Decimal("8.0"), Decimal("17.5")),
    (Decimal("8.5"), Decimal("17.0")),
    (Decimal("8.0"), Decimal("18.0")),
    (Decimal("8.0"), Decimal("17.0")),
]
