"""Bateria Psicológica para Avaliação da Atenção, 2ª edição (BPA-2), 6 a 81 anos.

Each subtest scores ``acertos - (erros + omissões)`` and Atenção Geral is
the sum of the three. The manual's percentile columns advance by a fixed
step per age group, so each stratum is generated from its first raw value
and step. Ages 13 to 17 use the 12-year norms.

A score below the first anchor is percentile 1; the last anchor is already
percentile 99.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, Anchor, PercentileAnchorTable

BANDS = (
    AgeBand(6, 6),
    AgeBand(7, 7),
    AgeBand(8, 8),
    AgeBand(9, 9),
    AgeBand(10, 10),
    AgeBand(11, 11),
    AgeBand(12, 17),
    AgeBand(18, 40),
    AgeBand(41, 60),
    AgeBand(61, 81),
)

PERCENTILES = (1, 5, 10, 25, 40, 50, 60, 75, 90, 95, 99)


def _column(start: int, step: int) -> tuple[Anchor, ...]:
    return tuple(Anchor(p, start + step * i) for i, p in enumerate(PERCENTILES))


def _table(name: str, *columns: tuple[int, int]) -> PercentileAnchorTable:
    return PercentileAnchorTable(
        name=name,
        bands=BANDS,
        strata=tuple(_column(start, step) for start, step in columns),
        direction=Direction.HIGHER_IS_BETTER,
        floor=1,
    )


# (first raw value, step) per band
CONCENTRADA = _table(
    "bpa2.ac",
    (0, 10), (5, 10), (10, 10), (15, 10), (20, 10), (25, 10), (30, 10),
    (40, 15), (35, 15), (25, 15),
)

DIVIDIDA = _table(
    "bpa2.ad",
    (0, 8), (4, 8), (8, 8), (12, 8), (16, 8), (20, 8), (24, 8),
    (32, 12), (28, 12), (20, 12),
)

ALTERNADA = _table(
    "bpa2.aa",
    (0, 12), (6, 12), (12, 12), (18, 12), (24, 12), (30, 12), (36, 12),
    (48, 18), (42, 18), (30, 18),
)

GERAL = _table(
    "bpa2.ag",
    (0, 30), (15, 30), (30, 30), (45, 30), (60, 30), (75, 30), (90, 30),
    (120, 45), (105, 45), (75, 45),
)

TABLES = {
    "ac": CONCENTRADA,
    "ad": DIVIDIDA,
    "aa": ALTERNADA,
    "ag": GERAL,
}
