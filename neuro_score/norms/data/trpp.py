"""Teste de Repetição de Palavras e Pseudopalavras (TRPP), 3 a 14 anos.

Standard scores (mean 100, SD 15) for the total of repeated words and
pseudowords (1 to 20), by age, from table 9.2 of the manual. Ages 7 and 14
have no score for a total of 1.
"""

from typing import Optional

from neuro_score.norms.tables import AgeBand, ScoreInterval, StandardScoreTable

AGES = tuple(range(3, 15))
BANDS = tuple(AgeBand(age, age) for age in AGES)

# Total -> scores for ages 3 to 14.
_ROWS: dict[int, tuple[Optional[int], ...]] = {
    1: (83, 76, 70, 69, None, 65, 60, 58, 55, 44, 38, None),
    2: (92, 84, 79, 76, 72, 71, 71, 67, 64, 61, 52, 46),
    3: (102, 93, 88, 84, 81, 78, 78, 73, 71, 67, 59, 54),
    4: (111, 102, 96, 92, 89, 86, 84, 80, 77, 73, 67, 62),
    5: (120, 111, 105, 100, 98, 94, 90, 86, 84, 80, 74, 70),
    6: (129, 119, 114, 108, 107, 101, 97, 93, 91, 86, 82, 77),
    7: (138, 128, 123, 116, 116, 109, 103, 99, 97, 92, 89, 85),
    8: (148, 137, 132, 123, 124, 116, 110, 106, 104, 98, 97, 93),
    9: (157, 146, 140, 131, 133, 124, 116, 112, 110, 104, 104, 101),
    10: (166, 154, 149, 139, 142, 132, 123, 119, 117, 110, 112, 109),
    11: (175, 163, 158, 147, 150, 139, 129, 125, 123, 117, 119, 116),
    12: (184, 172, 167, 155, 159, 147, 135, 132, 130, 123, 127, 124),
    13: (194, 180, 175, 162, 168, 155, 142, 138, 136, 129, 134, 132),
    14: (203, 189, 184, 170, 177, 162, 148, 145, 143, 135, 142, 140),
    15: (212, 198, 193, 178, 185, 170, 155, 151, 149, 141, 149, 148),
    16: (221, 207, 202, 186, 194, 178, 161, 158, 156, 147, 157, 155),
    17: (231, 215, 210, 194, 203, 185, 168, 164, 163, 154, 164, 163),
    18: (240, 224, 219, 202, 212, 193, 174, 171, 169, 160, 172, 171),
    19: (249, 233, 228, 209, 220, 200, 180, 177, 176, 166, 179, 179),
    20: (258, 242, 237, 217, 229, 208, 187, 184, 182, 172, 187, 187),
}


def _column(index: int) -> tuple[ScoreInterval, ...]:
    return tuple(
        ScoreInterval(raw, raw, scores[index])
        for raw, scores in sorted(_ROWS.items())
        if scores[index] is not None
    )


TOTAL = StandardScoreTable(
    name="trpp.total",
    bands=BANDS,
    strata=tuple(_column(i) for i in range(len(AGES))),
)

TABLES = {"total": TOTAL}
