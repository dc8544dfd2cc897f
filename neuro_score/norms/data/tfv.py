"""Tarefas de Fluência Verbal (TFV), 6 a 12 anos.

Raw anchors at P5, P25, P50, P75 and P95 by age and school type for free,
phonemic (letter P) and semantic (clothing) fluency. A count equal to an
anchor reports that percentile; otherwise the range between anchors.
"""

from neuro_score.norms.tables import AgeBand, Anchor, PercentileRangeTable

PRIVADA = "privada"
PUBLICA = "publica"
GROUPS = (PRIVADA, PUBLICA)

BANDS = tuple(AgeBand(age, age) for age in range(6, 13))
PERCENTILES = (5, 25, 50, 75, 95)


def _table(name: str, privada: dict, publica: dict) -> PercentileRangeTable:
    return PercentileRangeTable(
        name=name,
        bands=BANDS,
        strata=tuple(
            tuple(Anchor(p, raw) for p, raw in zip(PERCENTILES, by_age[band.min_age]))
            for band in BANDS
            for by_age in (privada, publica)
        ),
        groups=GROUPS,
        exact_anchors=True,
    )


LIVRE = _table(
    "tfv.livre",
    privada={
        6: (7, 18, 23, 31, 46),
        7: (10, 22, 30, 40, 55),
        8: (15, 27, 41, 45, 62),
        9: (17, 28, 42, 57, 75),
        10: (22, 38, 50, 65, 79),
        11: (31, 47, 55, 68, 103),
        12: (35, 50, 60, 75, 110),
    },
    publica={
        6: (8, 14, 23, 35, 44),
        7: (7, 18, 26, 37, 55),
        8: (13, 19, 32, 39, 53),
        9: (18, 31, 41, 50, 63),
        10: (25, 38, 46, 55, 68),
        11: (14, 39, 51, 60, 86),
        12: (25, 44, 51, 62, 85),
    },
)

FONEMICA = _table(
    "tfv.fonemica",
    privada={
        6: (4, 6, 8, 10, 18),
        7: (4, 7, 10, 14, 22),
        8: (5, 8, 13, 15, 18),
        9: (8, 10, 13, 17, 26),
        10: (9, 13, 16, 20, 26),
        11: (8, 14, 17, 22, 29),
        12: (10, 15, 19, 24, 32),
    },
    publica={
        6: (3, 5, 7, 10, 17),
        7: (4, 5, 8, 11, 22),
        8: (6, 8, 12, 14, 19),
        9: (6, 10, 13, 18, 24),
        10: (7, 10, 14, 17, 23),
        11: (6, 13, 15, 20, 28),
        12: (10, 13, 17, 20, 24),
    },
)

SEMANTICA = _table(
    "tfv.semantica",
    privada={
        6: (7, 10, 11, 13, 18),
        7: (6, 9, 11, 14, 19),
        8: (7, 11, 13, 17, 21),
        9: (8, 10, 16, 20, 25),
        10: (9, 13, 18, 21, 25),
        11: (10, 15, 19, 23, 29),
        12: (11, 16, 20, 25, 32),
    },
    publica={
        6: (7, 9, 10, 13, 16),
        7: (5, 8, 10, 11, 21),
        8: (7, 11, 13, 15, 21),
        9: (4, 11, 14, 16, 23),
        10: (9, 13, 16, 19, 24),
        11: (8, 11, 16, 20, 28),
        12: (12, 18, 20, 23, 29),
    },
)

TABLES = {
    "livre": LIVRE,
    "fonemica": FONEMICA,
    "semantica": SEMANTICA,
}
