"""Five Digit Test (FDT), 6 anos em diante.

Raw times at P95, P75, P50, P25 and P5 by age band, from the manual's
tables 6.3 to 6.11. Times are in seconds and lower is better. Inhibition is
choice minus reading time and flexibility is alternation minus reading time.

A time at or under the P95 anchor is reported as percentile 99 and one over
the P5 anchor as percentile 1.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, Anchor, PercentileAnchorTable

BANDS = (
    AgeBand(6, 8),
    AgeBand(9, 10),
    AgeBand(11, 12),
    AgeBand(13, 15),
    AgeBand(16, 18),
    AgeBand(19, 34),
    AgeBand(35, 59),
    AgeBand(60, 75),
    AgeBand(76, 99),
)

# Published order, best performance first.
PERCENTILES = (95, 75, 50, 25, 5)


def _anchors(*raws: float) -> tuple[Anchor, ...]:
    return tuple(Anchor(p, raw) for p, raw in reversed(list(zip(PERCENTILES, raws))))


def _table(name: str, *strata: tuple[float, ...]) -> PercentileAnchorTable:
    return PercentileAnchorTable(
        name=name,
        bands=BANDS,
        strata=tuple(_anchors(*raws) for raws in strata),
        direction=Direction.LOWER_IS_BETTER,
        floor=1,
        ceiling=99,
    )


LEITURA = _table(
    "fdt.leitura",
    (25, 29, 34, 39, 48),
    (22, 26, 29, 32, 38),
    (20, 24, 27, 32, 47),
    (17, 20, 23, 26, 34),
    (16, 17, 20, 23, 29),
    (16, 19, 21, 25, 31),
    (17, 20, 23, 26, 37),
    (18, 22, 25, 30, 37),
    (20, 25, 29, 34, 38),
)

CONTAGEM = _table(
    "fdt.contagem",
    (32, 40, 48, 56, 83),
    (28, 34, 39, 43, 52),
    (25, 32, 36, 44, 54),
    (21, 24, 28, 35, 44),
    (19, 21, 24, 26, 30),
    (19, 22, 24, 27, 34),
    (19, 22, 26, 30, 40),
    (21, 25, 28, 33, 41),
    (21, 26, 31, 36, 46),
)

ESCOLHA = _table(
    "fdt.escolha",
    (41, 66, 79, 94, 109),
    (46, 56, 63, 73, 88),
    (38, 48, 56, 62, 93),
    (33, 40, 45, 53, 68),
    (25, 29, 33, 39, 44),
    (27, 31, 35, 40, 52),
    (28, 32, 39, 46, 65),
    (30, 39, 46, 53, 68),
    (33, 44, 49, 62, 96),
)

ALTERNANCIA = _table(
    "fdt.alternancia",
    (58, 75, 91, 113, 133),
    (54, 67, 75, 87, 101),
    (46, 55, 66, 73, 96),
    (36, 46, 53, 67, 81),
    (34, 38, 42, 51, 63),
    (33, 38, 44, 50, 64),
    (34, 43, 48, 60, 89),
    (41, 52, 62, 78, 93),
    (48, 61, 74, 89, 108),
)

INIBICAO = _table(
    "fdt.inibicao",
    (17, 31, 43, 55, 76),
    (19, 28, 35, 42, 57),
    (12, 20, 28, 35, 51),
    (8, 19, 23.5, 29, 42),
    (6, 10.5, 13, 16.5, 22),
    (5, 11, 14, 18, 28),
    (5, 11, 15, 21, 38),
    (9, 15, 19.5, 26, 39),
    (7, 16, 21, 29, 63),
)

FLEXIBILIDADE = _table(
    "fdt.flexibilidade",
    (26, 41, 55, 75, 92),
    (28, 39, 46, 57, 73),
    (16, 30, 39, 44, 68),
    (14, 25, 32, 41, 53),
    (16, 19, 22, 27, 44),
    (10, 17, 22, 29, 42),
    (14, 20, 26, 34, 55),
    (18, 28, 35, 49, 63),
    (22, 35, 43, 56, 71),
)

TABLES = {
    "leitura": LEITURA,
    "contagem": CONTAGEM,
    "escolha": ESCOLHA,
    "alternancia": ALTERNANCIA,
    "inibicao": INIBICAO,
    "flexibilidade": FLEXIBILIDADE,
}
