"""Fluência Verbal Alternada (FVA), 7 a 70 anos.

Raw anchors by age band for animals, fruits and alternating pairs. Children
(7 to 10 anos) have published norms for animals only, at P10, P25, P50, P75
and P90; from 11 anos the 13-18 band is used, with anchors at P5, P25, P50,
P75 and P95. Results are percentile range codes.
"""

from neuro_score.norms.tables import AgeBand, Anchor, PercentileRangeTable

BANDS = (
    AgeBand(7, 7),
    AgeBand(8, 8),
    AgeBand(9, 9),
    AgeBand(10, 10),
    AgeBand(11, 18),
    AgeBand(19, 25),
    AgeBand(26, 40),
    AgeBand(41, 55),
    AgeBand(56, 70),
)

CHILD_PERCENTILES = (10, 25, 50, 75, 90)
ADULT_PERCENTILES = (5, 25, 50, 75, 95)


def _anchors(percentiles: tuple[int, ...], *raws: int) -> tuple[Anchor, ...]:
    return tuple(Anchor(p, raw) for p, raw in zip(percentiles, raws))


def _child(*raws: int) -> tuple[Anchor, ...]:
    return _anchors(CHILD_PERCENTILES, *raws)


def _adult(*raws: int) -> tuple[Anchor, ...]:
    return _anchors(ADULT_PERCENTILES, *raws)


def _table(name: str, *strata) -> PercentileRangeTable:
    return PercentileRangeTable(name=name, bands=BANDS, strata=tuple(strata))


ANIMAIS = _table(
    "fva.animais",
    _child(7, 10, 13, 14, 15),
    _child(9, 11, 12, 15, 18),
    _child(10, 12, 14, 16, 19),
    _child(11, 12, 14, 17, 18),
    _adult(11, 14, 17, 21, 27),
    _adult(11, 18, 22, 25, 31),
    _adult(8, 15, 20, 23, 30),
    _adult(7, 14, 19, 23, 28),
    _adult(7, 13, 17, 21, 29),
)

FRUTAS = _table(
    "fva.frutas",
    None,
    None,
    None,
    None,
    _adult(8, 12, 14, 18, 21),
    _adult(11, 14, 17, 20, 23),
    _adult(9, 13, 16, 20, 23),
    _adult(7, 13, 16, 18, 23),
    _adult(8, 12, 15, 18, 21),
)

PARES = _table(
    "fva.pares",
    None,
    None,
    None,
    None,
    _adult(5, 6, 7, 9, 11),
    _adult(6, 8, 9, 10, 12),
    _adult(4, 7, 9, 10, 11),
    _adult(3, 6, 8, 10, 12),
    _adult(3, 6, 8, 9, 12),
)

TABLES = {
    "animais": ANIMAIS,
    "frutas": FRUTAS,
    "pares": PARES,
}
