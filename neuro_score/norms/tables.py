"""Normative table shapes.

Tables are immutable arenas: strata are tuples indexed by age band (and
education level or norm group when the table is stratified), so a lookup is
one bisect over the band starts plus one search inside the stratum. Data
modules build them once at import time and the registry validates them
before use.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from functools import cached_property
from typing import Generic, Iterator, Optional, TypeVar, Union

from neuro_score.models.definitions import Direction, EducationLevel
from neuro_score.numeric import finite_or_none, round_half_up, z_to_percentile

EDUCATION_ORDER: tuple[EducationLevel, ...] = (
    EducationLevel.FUNDAMENTAL,
    EducationLevel.MEDIO,
    EducationLevel.SUPERIOR,
)

# Percentile range codes produced by cut-point tables, best band first.
CUT_CODES: tuple[str, ...] = (">95", "90-95", "75-90", "50-75", "25-50", "10-25", "5-10")
BELOW_LAST_CUT = "<5"

StratumT = TypeVar("StratumT")


@dataclass(frozen=True)
class AgeBand:
    """Closed age interval in whole years."""

    min_age: int
    max_age: int

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age

    @property
    def label(self) -> str:
        if self.min_age == self.max_age:
            return f"{self.min_age} anos"
        return f"{self.min_age} a {self.max_age} anos"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a normative lookup.

    ``score`` holds a standard score or Z-score; ``percentile`` holds a whole
    percentile or a range code. Either may be None when the table does not
    produce it.
    """

    score: Optional[float] = None
    percentile: Optional[Union[int, float, str]] = None


@dataclass(frozen=True)
class ScoreInterval:
    """Raw values in ``[raw_min, raw_max]`` convert to ``score``."""

    raw_min: float
    raw_max: float
    score: int


@dataclass(frozen=True)
class NormPair:
    mean: float
    sd: float


@dataclass(frozen=True)
class Anchor:
    """Raw value observed at ``percentile`` in the normative sample."""

    percentile: int
    raw: float


@dataclass(frozen=True)
class NormativeTable(Generic[StratumT]):
    """Common stratum resolution for every table shape.

    Within an age band, strata are split by education level when
    ``by_education`` is set, or by the named ``groups`` (school type,
    schooling) otherwise. A None stratum marks a band and group for which
    no norms were published.
    """

    name: str
    bands: tuple[AgeBand, ...]
    strata: tuple[Optional[StratumT], ...]
    direction: Direction = Direction.HIGHER_IS_BETTER
    by_education: bool = False
    groups: tuple[str, ...] = ()

    @cached_property
    def _band_starts(self) -> list[int]:
        return [band.min_age for band in self.bands]

    @property
    def levels(self) -> tuple[str, ...]:
        """Keys splitting each age band, empty when bands are not split."""
        if self.by_education:
            return tuple(level.value for level in EDUCATION_ORDER)
        return self.groups

    def band_index(self, age: int) -> Optional[int]:
        """Index of the age band containing ``age``, or None."""
        idx = bisect.bisect_right(self._band_starts, age) - 1
        if idx < 0 or not self.bands[idx].contains(age):
            return None
        return idx

    def band_for(self, age: int) -> Optional[AgeBand]:
        idx = self.band_index(age)
        return None if idx is None else self.bands[idx]

    def stratum(
        self,
        age: int,
        education: Optional[EducationLevel] = None,
        group: Optional[str] = None,
    ) -> Optional[StratumT]:
        idx = self.band_index(age)
        if idx is None:
            return None
        levels = self.levels
        if not levels:
            return self.strata[idx]
        key = education.value if self.by_education and education is not None else group
        if key not in levels:
            return None
        return self.strata[idx * len(levels) + levels.index(key)]

    def iter_strata(self) -> Iterator[tuple[str, Optional[StratumT]]]:
        """Yield ``(label, stratum)`` pairs for validation and reporting."""
        levels = self.levels
        if not levels:
            for band, stratum in zip(self.bands, self.strata):
                yield band.label, stratum
            return
        for i, band in enumerate(self.bands):
            for j, level in enumerate(levels):
                yield f"{band.label} / {level}", self.strata[i * len(levels) + j]

    @property
    def expected_strata(self) -> int:
        return len(self.bands) * max(1, len(self.levels))

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        raise NotImplementedError


@dataclass(frozen=True)
class StandardScoreTable(NormativeTable[tuple[ScoreInterval, ...]]):
    """Raw value (or raw interval) to standard score, mean 100 and SD 15.

    With ``extrapolation`` set to ``(low, high)``, a raw value outside the
    tabled domain continues the step between the two edge rows, one step
    per raw point, clamped to ``[low, high]``. ``monotonic`` is cleared for
    published tables whose scores dip at the floor.
    """

    extrapolation: Optional[tuple[int, int]] = None
    monotonic: bool = True

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        intervals = self.stratum(age, education, group)
        if not intervals:
            return None
        if raw < intervals[0].raw_min or raw > intervals[-1].raw_max:
            return self._extrapolate(intervals, raw)
        starts = [interval.raw_min for interval in intervals]
        interval = intervals[bisect.bisect_right(starts, raw) - 1]
        if raw > interval.raw_max:
            return None
        return LookupResult(score=interval.score)

    def _extrapolate(
        self, intervals: tuple[ScoreInterval, ...], raw: float
    ) -> Optional[LookupResult]:
        if self.extrapolation is None or len(intervals) < 2:
            return None
        low, high = self.extrapolation
        if raw < intervals[0].raw_min:
            first, second = intervals[0], intervals[1]
            score = first.score - (first.raw_min - raw) * (second.score - first.score)
        else:
            before, last = intervals[-2], intervals[-1]
            score = last.score + (raw - last.raw_max) * (last.score - before.score)
        return LookupResult(score=int(round_half_up(max(low, min(high, score)), 0)))

    def domain(
        self,
        age: int,
        education: Optional[EducationLevel] = None,
        group: Optional[str] = None,
    ) -> Optional[tuple[float, float]]:
        intervals = self.stratum(age, education, group)
        if not intervals:
            return None
        return intervals[0].raw_min, intervals[-1].raw_max


@dataclass(frozen=True)
class MeanSdTable(NormativeTable[NormPair]):
    """Normative mean and SD per stratum.

    Produces the Z-score and the percentile from the normal CDF, inverted
    for lower-is-better measures so that a better performance always maps
    to a higher percentile.
    """

    percentile_clamp: Optional[tuple[int, int]] = field(default=None)

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        norms = self.stratum(age, education, group)
        if norms is None or norms.sd == 0:
            return None
        z = finite_or_none((raw - norms.mean) / norms.sd)
        if z is None:
            return None
        percentile = z_to_percentile(
            z,
            invert=self.direction == Direction.LOWER_IS_BETTER,
            clamp=self.percentile_clamp,
        )
        return LookupResult(score=round_half_up(z, 2), percentile=percentile)


@dataclass(frozen=True)
class PercentileCutTable(NormativeTable[tuple[float, ...]]):
    """Raw cut-points at P95, P90, P75, P50, P25, P10 and P5.

    A raw value is assigned the range code of the first cut it reaches,
    searching from the best percentile down.
    """

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        cuts = self.stratum(age, education, group)
        if cuts is None:
            return None
        for code, cut in zip(CUT_CODES, cuts):
            if self.direction == Direction.LOWER_IS_BETTER and raw <= cut:
                return LookupResult(percentile=code)
            if self.direction == Direction.HIGHER_IS_BETTER and raw >= cut:
                return LookupResult(percentile=code)
        return LookupResult(percentile=BELOW_LAST_CUT)


@dataclass(frozen=True)
class PercentileAnchorTable(NormativeTable[tuple[Anchor, ...]]):
    """Raw anchors for chosen percentiles, worst performance first.

    The percentile is that of the last anchor the raw value reaches (at or
    above it for higher-is-better measures, at or below for lower-is-better).
    A value reaching no anchor gets ``floor``; one reaching the best anchor
    gets ``ceiling`` when set.

    Tables read from a manual's raw-to-percentile column can list
    percentiles out of order; ``monotonic`` is cleared for them.
    """

    floor: int = 1
    ceiling: Optional[int] = None
    monotonic: bool = True

    def reaches(self, raw: float, anchor: Anchor) -> bool:
        if self.direction == Direction.LOWER_IS_BETTER:
            return raw <= anchor.raw
        return raw >= anchor.raw

    def last_reached(self, anchors: tuple[Anchor, ...], raw: float) -> Optional[int]:
        """Index of the last anchor ``raw`` reaches, or None."""
        reached = None
        for idx, anchor in enumerate(anchors):
            if not self.reaches(raw, anchor):
                break
            reached = idx
        return reached

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        anchors = self.stratum(age, education, group)
        if not anchors:
            return None
        idx = self.last_reached(anchors, raw)
        if idx is None:
            return LookupResult(percentile=self.floor)
        if idx == len(anchors) - 1 and self.ceiling is not None:
            return LookupResult(percentile=self.ceiling)
        return LookupResult(percentile=anchors[idx].percentile)


@dataclass(frozen=True)
class PercentileRangeTable(PercentileAnchorTable):
    """Anchors reported as percentile range codes.

    Between two anchors the code is ``"25-50"``; past the best anchor it is
    ``">95"`` and short of the worst ``"<5"``. With ``exact_anchors`` a raw
    value equal to an anchor reports that anchor's percentile alone.
    """

    exact_anchors: bool = False

    def lookup(
        self,
        age: int,
        education: Optional[EducationLevel],
        raw: float,
        group: Optional[str] = None,
    ) -> Optional[LookupResult]:
        anchors = self.stratum(age, education, group)
        if not anchors:
            return None
        idx = self.last_reached(anchors, raw)
        if idx is None:
            return LookupResult(percentile=f"<{anchors[0].percentile}")
        anchor = anchors[idx]
        if self.exact_anchors and raw == anchor.raw:
            return LookupResult(percentile=str(anchor.percentile))
        if idx == len(anchors) - 1:
            return LookupResult(percentile=f">{anchor.percentile}")
        return LookupResult(percentile=f"{anchor.percentile}-{anchors[idx + 1].percentile}")


AnyNormativeTable = Union[
    StandardScoreTable, MeanSdTable, PercentileCutTable, PercentileAnchorTable, PercentileRangeTable
]
