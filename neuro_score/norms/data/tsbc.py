"""Tarefa Span de Blocos - Corsi (TSBC), 4 a 10 anos.

Standard scores (mean 100, SD 15) for forward and backward span totals by
age and school type, from chapter 8 of the manual. A total outside the
tabled points continues the edge step, clamped to 40-160.

The public-school forward table dips at raw 3 for age 8, so scores are not
checked for monotonicity.
"""

from neuro_score.norms.tables import AgeBand, ScoreInterval, StandardScoreTable

PUBLICA = "publica"
PRIVADA = "privada"
GROUPS = (PUBLICA, PRIVADA)

BANDS = tuple(AgeBand(age, age) for age in range(4, 11))


def _column(first_raw: int, *scores: int) -> tuple[ScoreInterval, ...]:
    return tuple(
        ScoreInterval(raw, raw, score) for raw, score in enumerate(scores, start=first_raw)
    )


def _table(name: str, publica: dict, privada: dict) -> StandardScoreTable:
    return StandardScoreTable(
        name=name,
        bands=BANDS,
        strata=tuple(
            by_age[band.min_age] for band in BANDS for by_age in (publica, privada)
        ),
        groups=GROUPS,
        extrapolation=(40, 160),
        monotonic=False,
    )


ORDEM_DIRETA = _table(
    "tsbc.ordemDireta",
    publica={
        4: _column(1, 77, 86, 95, 104, 113, 122, 132, 141, 150, 159, 168, 177, 187, 196, 205, 214),
        5: _column(1, 65, 74, 83, 93, 102, 111, 121, 130, 139, 149, 158, 167, 177, 186, 195, 205),
        6: _column(1, 64, 67, 77, 86, 96, 106, 115, 125, 134, 144, 154, 163, 173, 182, 192, 202),
        7: _column(1, 62, 63, 72, 80, 88, 96, 104, 112, 120, 128, 137, 145, 153, 161, 169, 177),
        8: _column(1, 68, 69, 63, 75, 86, 98, 109, 120, 132, 143, 155, 166, 177, 189, 200),
        9: _column(1, 66, 66, 75, 82, 88, 94, 100, 107, 113, 119, 125, 131, 138, 144, 150),
        10: _column(1, 67, 72, 72, 79, 85, 92, 98, 104, 111, 117, 124, 130, 137, 143, 149),
    },
    privada={
        4: _column(1, 81, 89, 98, 107, 115, 124, 133, 141, 150, 159, 168, 176, 185, 194, 202, 211),
        5: _column(1, 62, 74, 85, 96, 108, 119, 131, 142, 154, 165, 176, 188, 199, 211, 222, 234),
        6: _column(1, 61, 71, 81, 90, 100, 110, 120, 130, 140, 150, 160, 170, 179, 189, 199, 209),
        7: _column(2, 70, 77, 85, 93, 101, 109, 117, 125, 133, 140, 148, 156, 164, 172, 180),
        8: _column(3, 67, 76, 85, 95, 104, 113, 123, 132, 141, 151, 160, 169, 179, 188),
        9: _column(4, 62, 71, 81, 91, 101, 110, 120, 130, 139, 149, 159, 168, 178),
        10: _column(5, 62, 75, 89, 103, 117, 131, 145, 158, 172, 186, 200, 214),
    },
)

ORDEM_INVERSA = _table(
    "tsbc.ordemInversa",
    publica={
        4: _column(1, 106, 134, 163, 192, 220, 249, 278, 306, 335, 364, 392, 421, 450, 478, 507, 536),
        5: _column(1, 91, 112, 132, 153, 173, 194, 215, 235, 256, 277, 297, 318, 338, 359, 380, 400),
        6: _column(1, 95, 107, 118, 130, 142, 153, 165, 176, 188, 199, 211, 222, 234, 246, 257, 269),
        7: _column(1, 92, 103, 113, 123, 134, 144, 154, 165, 175, 185, 196, 206, 216, 227, 237, 247),
        8: _column(1, 74, 91, 108, 124, 141, 158, 174, 191, 208, 224, 241, 258, 274, 291, 308, 324),
        9: _column(1, 70, 85, 100, 115, 130, 146, 161, 176, 191, 207, 222, 237, 252, 267, 283, 298),
        10: _column(1, 72, 84, 96, 108, 120, 132, 144, 156, 168, 180, 192, 204, 216, 228, 240, 252),
    },
    privada={
        4: _column(1, 103, 116, 129, 141, 154, 167, 179, 192, 205, 217, 230, 243, 256, 268, 281, 294),
        5: _column(1, 89, 100, 111, 122, 133, 144, 155, 166, 177, 188, 199, 210, 221, 232, 243, 254),
        6: _column(1, 83, 91, 99, 107, 114, 122, 130, 138, 146, 154, 161, 169, 177, 185, 193, 200),
        7: _column(1, 73, 84, 95, 107, 118, 129, 141, 152, 163, 175, 186, 197, 209, 220, 231, 243),
        8: _column(1, 72, 80, 88, 96, 104, 112, 120, 129, 137, 145, 153, 161, 169, 177, 185, 193),
        9: _column(2, 67, 75, 83, 91, 99, 107, 115, 123, 131, 139, 147, 155, 163, 171, 179),
        10: _column(3, 69, 78, 87, 96, 105, 114, 123, 132, 141, 150, 159, 168, 177, 186),
    },
)

TABLES = {
    "ordemDireta": ORDEM_DIRETA,
    "ordemInversa": ORDEM_INVERSA,
}
