"""Summation entry points wired from application settings."""

from __future__ import annotations

from stringcalc.calculator.summer import NumberStringSummer, add
from stringcalc.core.config import AppSettings


def create_summer(settings: AppSettings | None = None) -> NumberStringSummer:
    """Create a NumberStringSummer from application settings."""
    if settings is None:
        settings = AppSettings()

    return NumberStringSummer(settings.calculator.numeric, config=settings.calculator)


__all__ = ["NumberStringSummer", "add", "create_summer"]
