"""Deterministic numeric helpers shared by tables and calculators."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from statistics import NormalDist
from typing import Optional

_STANDARD_NORMAL = NormalDist()


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from zero on the decimal representation.

    ``round()`` uses banker's rounding on the binary value, which turns
    1.005 into 1.0; clinical records expect the schoolbook result.

    Raises:
        ValueError: If ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot round non-finite value {value!r}")
    exact = Decimal(repr(float(value)))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Enough digits for every integer digit plus the kept decimals.
        ctx.prec = max(28, exact.adjusted() + places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if places <= 0:
        return float(int(rounded))
    return float(rounded)


def finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def z_score(raw: float, mean: float, sd: float) -> float | None:
    """Return ``(raw - mean) / sd`` rounded to two places.

    None when sd is 0 or the quotient overflows.
    """
    if sd == 0 or not math.isfinite(sd):
        return None
    z = finite_or_none((raw - mean) / sd)
    if z is None:
        return None
    return round_half_up(z, 2)


def ratio(numerator: float, denominator: float) -> float | None:
    """``numerator / denominator``, or None when the denominator is 0."""
    if denominator == 0:
        return None
    return finite_or_none(numerator / denominator)


def z_to_percentile(
    z: float,
    invert: bool = False,
    clamp: tuple[int, int] | None = None,
) -> int:
    """Convert a Z-score to a whole percentile through the normal CDF.

    ``invert`` flips the sign first, for measures where a lower raw value is
    the better performance (times, errors).
    """
    if invert:
        z = -z
    percentile = int(round_half_up(_STANDARD_NORMAL.cdf(z) * 100, 0))
    if clamp is not None:
        low, high = clamp
        percentile = max(low, min(high, percentile))
    return percentile
