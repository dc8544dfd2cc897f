"""Hayling Test, child version (6 a 12 anos).

Raw anchors at P95, P75, P50, P25 and P5 by age and school type, from the
manual's normative tables. Times are in seconds and, like errors, lower is
better. Inhibition is part B time minus part A time.

A result worse than the P5 anchor is reported as percentile 2.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, Anchor, PercentileAnchorTable

PRIVADA = "privada"
PUBLICA = "publica"
GROUPS = (PRIVADA, PUBLICA)

BANDS = tuple(AgeBand(age, age) for age in range(6, 13))

# Published order, best performance first.
PERCENTILES = (95, 75, 50, 25, 5)


def _anchors(raws: tuple[int, ...]) -> tuple[Anchor, ...]:
    return tuple(Anchor(p, raw) for p, raw in reversed(list(zip(PERCENTILES, raws))))


def _table(name: str, privada: dict, publica: dict) -> PercentileAnchorTable:
    return PercentileAnchorTable(
        name=name,
        bands=BANDS,
        strata=tuple(
            _anchors(by_age[band.min_age]) for band in BANDS for by_age in (privada, publica)
        ),
        direction=Direction.LOWER_IS_BETTER,
        groups=GROUPS,
        floor=2,
    )


TEMPO_A = _table(
    "hayling_infantil.tempoA",
    privada={
        6: (13, 19, 22, 27, 30),
        7: (11, 13, 17, 20, 26),
        8: (8, 10, 15, 19, 27),
        9: (7, 11, 15, 18, 32),
        10: (8, 12, 14, 15, 22),
        11: (4, 8, 11, 14, 20),
        12: (5, 9, 11, 13, 17),
    },
    publica={
        6: (19, 23, 31, 36, 41),
        7: (9, 18, 21, 29, 52),
        8: (10, 16, 19, 31, 49),
        9: (9, 13, 15, 21, 34),
        10: (12, 16, 20, 28, 42),
        11: (10, 15, 17, 20, 34),
        12: (8, 11, 15, 18, 25),
    },
)

TEMPO_B = _table(
    "hayling_infantil.tempoB",
    privada={
        6: (24, 36, 40, 55, 70),
        7: (25, 35, 39, 43, 55),
        8: (19, 32, 41, 44, 51),
        9: (15, 27, 32, 42, 94),
        10: (14, 24, 32, 34, 45),
        11: (12, 20, 28, 32, 48),
        12: (10, 23, 28, 33, 39),
    },
    publica={
        6: (37, 45, 54, 64, 109),
        7: (29, 30, 36, 50, 105),
        8: (29, 43, 49, 62, 84),
        9: (17, 31, 36, 51, 82),
        10: (23, 34, 38, 48, 93),
        11: (27, 35, 38, 42, 67),
        12: (18, 30, 34, 45, 57),
    },
)

ERROS_B = _table(
    "hayling_infantil.errosB",
    privada={
        6: (1, 3, 4, 5, 8),
        7: (1, 3, 4, 5, 6),
        8: (1, 3, 5, 6, 7),
        9: (1, 2, 4, 5, 8),
        10: (1, 3, 4, 4, 7),
        11: (1, 2, 4, 4, 6),
        12: (1, 1, 3, 4, 7),
    },
    publica={
        6: (5, 6, 7, 8, 9),
        7: (1, 5, 6, 7, 8),
        8: (3, 4, 6, 7, 8),
        9: (2, 3, 5, 6, 8),
        10: (1, 3, 5, 6, 8),
        11: (1, 3, 5, 6, 8),
        12: (0, 3, 4, 5, 7),
    },
)

INIBICAO_BA = _table(
    "hayling_infantil.inibicaoBA",
    privada={
        6: (1, 12, 19, 29, 54),
        7: (13, 15, 21, 26, 36),
        8: (7, 16, 22, 30, 40),
        9: (5, 13, 21, 27, 77),
        10: (6, 12, 18, 21, 26),
        11: (2, 14, 19, 21, 28),
        12: (3, 14, 18, 21, 32),
    },
    publica={
        6: (5, 13, 20, 40, 90),
        7: (7, 12, 15, 21, 54),
        8: (9, 23, 31, 38, 57),
        9: (1, 15, 20, 33, 56),
        10: (3, 12, 20, 26, 52),
        11: (8, 17, 21, 25, 36),
        12: (5, 18, 20, 25, 53),
    },
)

TABLES = {
    "tempoA": TEMPO_A,
    "tempoB": TEMPO_B,
    "errosB": ERROS_B,
    "inibicaoBA": INIBICAO_BA,
}
