"""Teste de Trilhas: Partes A e B (6-14 anos).

Standard scores (mean 100, SD 15) for sequences in Part A, Part B and the
B-A difference, by age band. Rows are ``(raw_min, raw_max, standard score)``.

The published conversion tables were not available when this module was
written: the rows below are placeholders with the right shape and
direction and must be replaced with the manual's values before clinical use.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, ScoreInterval, StandardScoreTable

BANDS = (
    AgeBand(6, 7),
    AgeBand(8, 9),
    AgeBand(10, 11),
    AgeBand(12, 14),
)


def _rows(*rows: tuple[int, int, int]) -> tuple[ScoreInterval, ...]:
    return tuple(ScoreInterval(raw_min, raw_max, score) for raw_min, raw_max, score in rows)


def _table(name: str, *strata: tuple[ScoreInterval, ...]) -> StandardScoreTable:
    return StandardScoreTable(
        name=name,
        bands=BANDS,
        strata=strata,
        direction=Direction.HIGHER_IS_BETTER,
    )


SEQUENCIAS_A = _table(
    "trilhas.sequenciasA",
    _rows(
        (0, 1, 55), (2, 3, 62), (4, 5, 70), (6, 6, 78), (7, 7, 85), (8, 8, 92),
        (9, 9, 100), (10, 10, 106), (11, 12, 113), (13, 15, 121), (16, 19, 130), (20, 25, 140),
    ),
    _rows(
        (0, 3, 55), (4, 6, 63), (7, 8, 72), (9, 10, 80), (11, 11, 86), (12, 12, 92),
        (13, 13, 98), (14, 14, 104), (15, 16, 111), (17, 19, 120), (20, 22, 130), (23, 25, 140),
    ),
    _rows(
        (0, 5, 55), (6, 8, 62), (9, 11, 70), (12, 13, 78), (14, 14, 85), (15, 15, 91),
        (16, 16, 97), (17, 17, 103), (18, 19, 110), (20, 21, 118), (22, 23, 127), (24, 25, 136),
    ),
    _rows(
        (0, 7, 55), (8, 10, 62), (11, 13, 70), (14, 15, 78), (16, 16, 85), (17, 17, 90),
        (18, 18, 96), (19, 19, 102), (20, 20, 108), (21, 22, 115), (23, 24, 124), (25, 25, 132),
    ),
)

SEQUENCIAS_B = _table(
    "trilhas.sequenciasB",
    _rows(
        (0, 0, 65), (1, 2, 72), (3, 4, 80), (5, 5, 87), (6, 6, 94), (7, 8, 101),
        (9, 10, 109), (11, 13, 117), (14, 17, 126), (18, 24, 138),
    ),
    _rows(
        (0, 1, 60), (2, 3, 67), (4, 5, 75), (6, 7, 83), (8, 8, 90), (9, 10, 97),
        (11, 12, 104), (13, 14, 111), (15, 17, 119), (18, 20, 128), (21, 24, 138),
    ),
    _rows(
        (0, 3, 58), (4, 6, 66), (7, 9, 74), (10, 11, 82), (12, 13, 89), (14, 15, 96),
        (16, 17, 103), (18, 19, 110), (20, 21, 118), (22, 23, 127), (24, 24, 135),
    ),
    _rows(
        (0, 5, 55), (6, 8, 63), (9, 11, 71), (12, 13, 79), (14, 15, 86), (16, 17, 93),
        (18, 19, 100), (20, 20, 107), (21, 22, 114), (23, 23, 122), (24, 24, 130),
    ),
)

DIFERENCA_BA = _table(
    "trilhas.diferencaBA",
    _rows(
        (-25, -12, 60), (-11, -8, 68), (-7, -5, 76), (-4, -3, 84), (-2, -1, 92),
        (0, 0, 100), (1, 2, 107), (3, 5, 115), (6, 9, 124), (10, 24, 135),
    ),
    _rows(
        (-25, -13, 58), (-12, -9, 66), (-8, -6, 74), (-5, -4, 82), (-3, -2, 89),
        (-1, 0, 96), (1, 1, 103), (2, 3, 110), (4, 6, 118), (7, 10, 127), (11, 24, 137),
    ),
    _rows(
        (-25, -14, 58), (-13, -10, 66), (-9, -7, 74), (-6, -5, 82), (-4, -3, 89),
        (-2, -1, 96), (0, 0, 103), (1, 2, 110), (3, 5, 118), (6, 9, 127), (10, 24, 137),
    ),
    _rows(
        (-25, -15, 56), (-14, -11, 64), (-10, -8, 72), (-7, -6, 80), (-5, -4, 87),
        (-3, -2, 94), (-1, 0, 101), (1, 2, 108), (3, 4, 115), (5, 8, 124), (9, 24, 135),
    ),
)

TABLES = {
    "sequenciasA": SEQUENCIAS_A,
    "sequenciasB": SEQUENCIAS_B,
    "diferencaBA": DIFERENCA_BA,
}
