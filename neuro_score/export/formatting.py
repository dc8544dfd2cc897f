"""Locale-independent number and date formatting for reports."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from neuro_score.config import get_settings
from neuro_score.numeric import round_half_up

EMPTY = "-"


def format_number(value: Optional[Union[int, float, str]]) -> str:
    """Integers bare, other numbers with two decimals and a decimal comma.

    Strings (percentile range codes) are printed as given.
    """
    if value is None:
        return EMPTY
    if isinstance(value, str):
        return value
    if float(value).is_integer():
        return str(int(value))
    return f"{round_half_up(value, 2):.2f}".replace(".", ",")


def format_date(value: datetime, tz: Optional[str] = None) -> str:
    """dd/mm/yyyy in the report timezone; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    zone = ZoneInfo(tz or get_settings().report_timezone)
    return value.astimezone(zone).strftime("%d/%m/%Y")
