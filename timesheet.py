"""Convert daily clock-in/out readings into worked hours."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from models import DAY_NAMES, Config, TimesheetEntry
from utils import parse_clock, to_decimal

_DEFAULT_CONFIG = Config()


def compute_daily_hours(clock_in, clock_out, config: Config | None = None) -> Decimal:
    """Hours worked in one day.

    Days longer than the lunch threshold lose a flat lunch break. No floor is
    applied, so clock_out < clock_in gives a negative result.
    """
    config = config or _DEFAULT_CONFIG
    worked = to_decimal(clock_out) - to_decimal(clock_in)
    if worked > config.lunch_threshold_hours:
        worked -= config.lunch_break_hours
    return worked


def compute_weekly_total(daily_hours: Iterable[Decimal]) -> Decimal:
    """Sum of the daily values, negatives included."""
    return sum((to_decimal(h) for h in daily_hours), Decimal("0"))


def build_week(pairs: Sequence[tuple]) -> list[TimesheetEntry]:
    """Build Mon-Fri entries from five (clock_in, clock_out) pairs.

    Readings may be fractional hours or "HH:MM" strings.
    """
    if len(pairs) != len(DAY_NAMES):
        raise ValueError(f"Expected {len(DAY_NAMES)} days, got {len(pairs)}")

    return [
        TimesheetEntry(day_index=i, clock_in=parse_clock(clock_in), clock_out=parse_clock(clock_out))
        for i, (clock_in, clock_out) in enumerate(pairs)
    ]


def daily_hours_for(entries: Iterable[TimesheetEntry], config: Config | None = None) -> tuple[Decimal, ...]:
    """Per-day worked hours, in day order."""
    ordered = sorted(entries, key=lambda e: e.day_index)
    return tuple(compute_daily_hours(e.clock_in, e.clock_out, config) for e in ordered)
