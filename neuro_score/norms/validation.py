"""Load-time validation of normative tables.

Lookups assume well-formed tables and never repair them, so every table is
checked once when the registry is built. A failure is a data-authoring
defect and raises :class:`NormativeDataError`.
"""

import logging
from typing import Optional

from neuro_score.exceptions import NormativeDataError
from neuro_score.models.definitions import AgeRange, Direction
from neuro_score.norms.tables import (
    AnyNormativeTable,
    MeanSdTable,
    NormativeTable,
    PercentileAnchorTable,
    PercentileCutTable,
    StandardScoreTable,
)

logger = logging.getLogger(__name__)


def _check_bands(table: NormativeTable, age_range: Optional[AgeRange]) -> list[str]:
    problems: list[str] = []
    if not table.bands:
        return ["table has no age bands"]

    for band in table.bands:
        if band.min_age > band.max_age:
            problems.append(f"age band {band.min_age}-{band.max_age} is inverted")

    for previous, current in zip(table.bands, table.bands[1:]):
        if current.min_age <= previous.max_age:
            problems.append(
                f"age bands {previous.label} and {current.label} overlap or are out of order"
            )
        elif current.min_age != previous.max_age + 1:
            problems.append(f"gap between age bands {previous.label} and {current.label}")

    if age_range is not None:
        if table.bands[0].min_age > age_range.min_age or table.bands[-1].max_age < age_range.max_age:
            problems.append(
                f"age bands {table.bands[0].min_age}-{table.bands[-1].max_age} do not cover "
                f"the valid range {age_range.min_age}-{age_range.max_age}"
            )

    if table.by_education and table.groups:
        problems.append("table cannot split bands by both education and group")

    if len(table.strata) != table.expected_strata:
        problems.append(
            f"expected {table.expected_strata} strata, found {len(table.strata)}"
        )
    return problems


def _present(table: NormativeTable) -> list[tuple[str, object]]:
    """Strata that hold norms; None marks a stratum with no published norms."""
    return [(label, stratum) for label, stratum in table.iter_strata() if stratum is not None]


def _check_standard_scores(table: StandardScoreTable) -> list[str]:
    problems: list[str] = []
    for label, intervals in _present(table):
        if not intervals:
            problems.append(f"{label}: empty stratum")
            continue
        for interval in intervals:
            if interval.raw_min > interval.raw_max:
                problems.append(f"{label}: inverted raw interval {interval.raw_min}-{interval.raw_max}")
        for previous, current in zip(intervals, intervals[1:]):
            if current.raw_min <= previous.raw_max:
                problems.append(
                    f"{label}: raw intervals starting at {previous.raw_min} and "
                    f"{current.raw_min} overlap or are out of order"
                )
            if not table.monotonic:
                continue
            if table.direction == Direction.HIGHER_IS_BETTER and current.score < previous.score:
                problems.append(f"{label}: standard score decreases at raw {current.raw_min}")
            if table.direction == Direction.LOWER_IS_BETTER and current.score > previous.score:
                problems.append(f"{label}: standard score increases at raw {current.raw_min}")
    return problems


def _check_mean_sd(table: MeanSdTable) -> list[str]:
    return [
        f"{label}: standard deviation must be positive, got {norms.sd}"
        for label, norms in _present(table)
        if norms.sd <= 0
    ]


def _check_cuts(table: PercentileCutTable) -> list[str]:
    problems: list[str] = []
    for label, cuts in _present(table):
        if len(cuts) != 7:
            problems.append(f"{label}: expected 7 cut-points, found {len(cuts)}")
            continue
        pairs = list(zip(cuts, cuts[1:]))
        if table.direction == Direction.LOWER_IS_BETTER and any(b < a for a, b in pairs):
            problems.append(f"{label}: cut-points must not decrease from P95 to P5")
        if table.direction == Direction.HIGHER_IS_BETTER and any(b > a for a, b in pairs):
            problems.append(f"{label}: cut-points must not increase from P95 to P5")
    return problems


def _check_anchors(table: PercentileAnchorTable) -> list[str]:
    problems: list[str] = []
    for label, anchors in _present(table):
        if not anchors:
            problems.append(f"{label}: empty stratum")
            continue
        for anchor in anchors:
            if not 0 <= anchor.percentile <= 100:
                problems.append(f"{label}: percentile {anchor.percentile} outside 0-100")
        for previous, current in zip(anchors, anchors[1:]):
            if table.direction == Direction.HIGHER_IS_BETTER and current.raw < previous.raw:
                problems.append(f"{label}: raw anchors decrease at P{current.percentile}")
            if table.direction == Direction.LOWER_IS_BETTER and current.raw > previous.raw:
                problems.append(f"{label}: raw anchors increase at P{current.percentile}")
            if table.monotonic and current.percentile <= previous.percentile:
                problems.append(f"{label}: percentiles out of order at P{current.percentile}")
    return problems


def table_problems(table: AnyNormativeTable, age_range: Optional[AgeRange] = None) -> list[str]:
    """Return every structural problem found in ``table``."""
    problems = _check_bands(table, age_range)
    if problems:
        return problems
    if not _present(table):
        return ["table has no normed strata"]

    if isinstance(table, StandardScoreTable):
        problems.extend(_check_standard_scores(table))
    elif isinstance(table, MeanSdTable):
        problems.extend(_check_mean_sd(table))
    elif isinstance(table, PercentileCutTable):
        problems.extend(_check_cuts(table))
    elif isinstance(table, PercentileAnchorTable):
        problems.extend(_check_anchors(table))
    else:
        problems.append(f"unsupported table type {type(table).__name__}")
    return problems


def validate_table(table: AnyNormativeTable, age_range: Optional[AgeRange] = None) -> None:
    """Raise NormativeDataError if ``table`` is malformed."""
    problems = table_problems(table, age_range)
    if problems:
        logger.error("Normative table %s failed validation: %s", table.name, problems)
        raise NormativeDataError(table.name, problems)
    logger.debug("Normative table %s validated (%d strata)", table.name, len(table.strata))
