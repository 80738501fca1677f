"""Formatting of computed times into board display slots."""

from .slots import (
    PARSHA_FALLBACK,
    SHABBOS_FALLBACK,
    WEEKDAY_FALLBACK,
    format_clock,
    shabbos_fallback,
    shabbos_slots,
    weekday_fallback,
    weekday_slots,
)

__all__ = [
    "PARSHA_FALLBACK",
    "SHABBOS_FALLBACK",
    "WEEKDAY_FALLBACK",
    "format_clock",
    "shabbos_fallback",
    "shabbos_slots",
    "weekday_fallback",
    "weekday_slots",
]
