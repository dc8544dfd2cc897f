"""Rey Auditory Verbal Learning Test (RAVLT), 6 a 81 anos.

Raw anchors at P5, P25, P50, P75 and P95 by age band, from the manual's
tables 15 to 26. Higher is better. A score at or above the P95 anchor is
reported as percentile 99 and one below the P5 anchor as percentile 1.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, Anchor, PercentileAnchorTable

BANDS = (
    AgeBand(6, 8),
    AgeBand(9, 11),
    AgeBand(12, 14),
    AgeBand(15, 17),
    AgeBand(18, 20),
    AgeBand(21, 30),
    AgeBand(31, 40),
    AgeBand(41, 50),
    AgeBand(51, 60),
    AgeBand(61, 70),
    AgeBand(71, 79),
    AgeBand(80, 81),
)

PERCENTILES = (5, 25, 50, 75, 95)


def _table(name: str, *strata: tuple[int, ...]) -> PercentileAnchorTable:
    return PercentileAnchorTable(
        name=name,
        bands=BANDS,
        strata=tuple(tuple(Anchor(p, raw) for p, raw in zip(PERCENTILES, raws)) for raws in strata),
        direction=Direction.HIGHER_IS_BETTER,
        floor=1,
        ceiling=99,
    )


A1 = _table(
    "ravlt.a1",
    (2, 3, 4, 5, 8), (3, 4, 5, 6, 9), (4, 5, 6, 7, 9), (4, 6, 7, 8, 10),
    (4, 6, 7, 8, 10), (4, 6, 7, 9, 11), (4, 6, 7, 8, 11), (3, 5, 6, 8, 10),
    (3, 5, 6, 7, 9), (2, 4, 5, 6, 8), (2, 3, 4, 6, 8), (1, 3, 4, 5, 7),
)

A2 = _table(
    "ravlt.a2",
    (3, 5, 6, 7, 10), (5, 7, 8, 9, 11), (6, 8, 9, 10, 12), (7, 9, 10, 11, 13),
    (7, 9, 10, 12, 13), (7, 9, 11, 12, 14), (6, 9, 10, 12, 13), (5, 8, 10, 11, 13),
    (5, 7, 9, 10, 12), (4, 6, 8, 9, 11), (3, 5, 7, 8, 10), (2, 4, 6, 7, 9),
)

A3 = _table(
    "ravlt.a3",
    (4, 6, 8, 9, 11), (6, 8, 9, 11, 13), (7, 9, 10, 12, 13), (8, 10, 11, 12, 14),
    (8, 10, 12, 13, 14), (8, 11, 12, 13, 14), (7, 10, 11, 13, 14), (6, 9, 11, 12, 14),
    (5, 8, 10, 11, 13), (4, 7, 9, 10, 12), (3, 6, 8, 9, 11), (2, 5, 7, 8, 10),
)

A4 = _table(
    "ravlt.a4",
    (4, 7, 8, 10, 12), (6, 9, 10, 11, 13), (8, 10, 11, 12, 14), (9, 11, 12, 13, 14),
    (9, 11, 12, 13, 15), (9, 11, 13, 14, 15), (8, 11, 12, 13, 14), (7, 10, 12, 13, 14),
    (6, 9, 11, 12, 14), (5, 8, 10, 11, 13), (4, 7, 9, 10, 12), (3, 6, 7, 9, 11),
)

A5 = _table(
    "ravlt.a5",
    (5, 7, 9, 11, 13), (7, 9, 11, 12, 14), (8, 10, 12, 13, 14), (9, 11, 12, 13, 15),
    (9, 12, 13, 14, 15), (10, 12, 13, 14, 15), (9, 11, 13, 14, 15), (8, 11, 12, 13, 15),
    (7, 10, 11, 13, 14), (6, 9, 10, 12, 13), (4, 7, 9, 11, 13), (3, 6, 8, 10, 12),
)

B1 = _table(
    "ravlt.b1",
    (1, 3, 4, 5, 7), (2, 4, 5, 6, 8), (3, 5, 6, 7, 9), (3, 5, 6, 8, 10),
    (3, 5, 7, 8, 10), (3, 6, 7, 9, 11), (3, 5, 7, 8, 11), (2, 5, 6, 8, 10),
    (2, 4, 6, 7, 9), (1, 3, 5, 6, 8), (1, 3, 4, 5, 7), (0, 2, 3, 5, 7),
)

A6 = _table(
    "ravlt.a6",
    (2, 5, 7, 9, 11), (4, 7, 9, 10, 12), (5, 8, 10, 11, 13), (6, 9, 11, 12, 14),
    (6, 10, 11, 13, 14), (7, 10, 12, 13, 14), (6, 9, 11, 12, 14), (5, 8, 10, 12, 14),
    (4, 7, 9, 11, 13), (3, 6, 8, 10, 12), (2, 5, 7, 9, 11), (1, 4, 6, 7, 10),
)

A7 = _table(
    "ravlt.a7",
    (1, 4, 6, 8, 11), (3, 7, 9, 10, 12), (5, 8, 10, 11, 13), (6, 9, 11, 12, 14),
    (6, 9, 11, 12, 14), (6, 10, 12, 13, 14), (5, 9, 11, 12, 14), (4, 8, 10, 12, 14),
    (3, 7, 9, 11, 13), (2, 5, 8, 10, 12), (1, 4, 6, 8, 11), (0, 3, 5, 7, 9),
)

ESCORE_TOTAL = _table(
    "ravlt.escoreTotal",
    (20, 30, 36, 41, 51), (30, 38, 44, 49, 57), (35, 44, 49, 53, 61), (40, 48, 52, 56, 63),
    (40, 50, 54, 59, 65), (42, 51, 56, 61, 67), (38, 49, 54, 59, 66), (33, 45, 51, 56, 64),
    (29, 41, 47, 53, 61), (24, 36, 43, 49, 56), (18, 30, 38, 44, 52), (13, 25, 32, 38, 47),
)

RECONHECIMENTO = _table(
    "ravlt.reconhecimento",
    (3, 9, 11, 13, 15), (8, 11, 13, 14, 15), (9, 12, 13, 14, 15), (10, 12, 14, 14, 15),
    (10, 13, 14, 15, 15), (10, 13, 14, 15, 15), (9, 12, 14, 14, 15), (8, 12, 13, 14, 15),
    (7, 11, 13, 14, 15), (5, 10, 12, 13, 15), (3, 8, 11, 13, 14), (1, 6, 9, 11, 14),
)

TABLES = {
    "a1": A1,
    "a2": A2,
    "a3": A3,
    "a4": A4,
    "a5": A5,
    "b1": B1,
    "a6": A6,
    "a7": A7,
    "escoreTotal": ESCORE_TOTAL,
    "reconhecimento": RECONHECIMENTO,
}
