"""Lenient parsing of raw values typed by clinicians."""

from __future__ import annotations

import math
import re
from typing import Union

from neuro_score.models.results import RawValue

_NUMBER = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)$")


def is_blank(value: RawValue) -> bool:
    """True when nothing has been entered yet."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_numeric(value: RawValue) -> float | None:
    """Parse a raw value into a finite float.

    Strings are stripped and may use a single decimal comma ("12,5").
    Booleans, NaN, infinities and anything else unparseable return None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = value.strip()
        if not _NUMBER.match(text):
            return None
        number = float(text.replace(",", "."))
    if not math.isfinite(number):
        return None
    return number


def normalize_number(value: float) -> Union[int, float]:
    """Return integral floats as ints so stored raw scores read naturally."""
    if float(value).is_integer():
        return int(value)
    return value
