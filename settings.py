"""Load calculation settings from a JSON file."""

from __future__ import annotations

import json
import logging
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from models import Config, PayrollError

logger = logging.getLogger("payroll.settings")

DECIMAL_KEYS = (
    "standard_weekly_hours",
    "standard_monthly_hours",
    "overtime_multiplier",
    "weeks_per_month",
    "lunch_threshold_hours",
    "lunch_break_hours",
)
TEXT_KEYS = ("currency", "currency_symbol")
# Divisors in the pay calculation
POSITIVE_KEYS = ("standard_monthly_hours", "weeks_per_month")


class ConfigError(PayrollError):
    """The settings file could not be read or holds a bad value."""


def _get_config_path() -> Path | None:
    """Get settings path from environment variable, if set."""
    if env_path := os.environ.get("PAYROLL_CONFIG"):
        return Path(env_path)
    return None


def config_from_dict(data: dict) -> Config:
    """Apply known keys from data over the default Config."""
    config = Config()
    for key, value in data.items():
        if key in DECIMAL_KEYS:
            try:
                number = Decimal(str(value))
            except InvalidOperation:
                raise ConfigError(f"{key} must be a number, got {value!r}") from None
            if not number.is_finite():
                raise ConfigError(f"{key} must be a finite number, got {value!r}")
            if key in POSITIVE_KEYS and number <= 0:
                raise ConfigError(f"{key} must be greater than zero, got {value!r}")
            setattr(config, key, number)
        elif key in TEXT_KEYS:
            setattr(config, key, str(value))
        else:
            logger.warning("Ignoring unknown setting %r", key)
            continue
        logger.debug("Setting %s = %s", key, value)
    return config


def load_config(path: Path | str | None = None) -> Config:
    """Load settings from path or PAYROLL_CONFIG; defaults when neither is set."""
    path = Path(path) if path else _get_config_path()
    if path is None:
        return Config()

    try:
        with open(path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must hold a JSON object")
    return config_from_dict(data)
