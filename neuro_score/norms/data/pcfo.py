"""Prova de Consciência Fonológica por produção Oral (PCFO), 3 a 14 anos.

Standard scores (mean 100, SD 15) for total correct answers (1 to 40), by
age and schooling: tables 12.2 (educação infantil, 3 a 6 anos) and 12.3
(ensino fundamental, 6 a 14 anos). A six-year-old is scored on the table
for the stage the child attends. Raw 0 is not tabled.

Table 12.3 dips at raw 12 for age 12, so scores are not checked for
monotonicity.
"""

from neuro_score.norms.tables import AgeBand, ScoreInterval, StandardScoreTable

INFANTIL = "infantil"
FUNDAMENTAL = "fundamental"
GROUPS = (INFANTIL, FUNDAMENTAL)

BANDS = tuple(AgeBand(age, age) for age in range(3, 15))


def _column(first_raw: int, *scores: int) -> tuple[ScoreInterval, ...]:
    return tuple(
        ScoreInterval(raw, raw, score) for raw, score in enumerate(scores, start=first_raw)
    )


_INFANTIL = {
    3: _column(
        1, 78, 86, 93, 101, 108, 116, 123, 131, 138, 146, 153, 161, 168, 176, 183, 191, 198, 206,
        213, 221, 228, 236, 243, 251, 258, 266, 273, 281, 288, 296, 303, 311, 318, 326, 333, 341,
        348, 356, 363, 371,
    ),
    4: _column(
        1, 72, 80, 87, 94, 102, 109, 117, 124, 132, 139, 147, 154, 162, 169, 177, 184, 192, 199,
        207, 214, 222, 229, 237, 244, 252, 259, 267, 274, 282, 289, 297, 304, 312, 319, 327, 334,
        342, 349, 357, 364,
    ),
    5: _column(
        1, 72, 77, 81, 86, 91, 95, 100, 104, 109, 114, 118, 123, 127, 132, 137, 141, 146, 151,
        155, 160, 164, 169, 174, 178, 183, 187, 192, 197, 201, 206, 211, 215, 220, 224, 229, 234,
        238, 243, 247, 252,
    ),
    6: _column(
        1, 67, 71, 75, 80, 84, 88, 92, 97, 101, 105, 109, 113, 118, 122, 126, 130, 135, 139, 143,
        147, 151, 156, 160, 164, 168, 173, 177, 181, 185, 190, 194, 198, 202, 206, 211, 215, 219,
        223, 228, 232,
    ),
}

_FUNDAMENTAL = {
    6: _column(
        1, 64, 66, 68, 70, 72, 74, 76, 78, 80, 82, 84, 86, 88, 90, 92, 94, 96, 98, 100, 102, 104,
        106, 108, 110, 112, 114, 116, 118, 120, 122, 124, 126, 128, 130, 132, 134, 136, 138, 140,
        142,
    ),
    7: _column(
        1, 54, 56, 59, 61, 63, 65, 67, 69, 71, 73, 75, 78, 80, 82, 84, 86, 88, 90, 92, 94, 96, 99,
        101, 103, 105, 107, 109, 111, 113, 115, 118, 120, 122, 124, 126, 128, 130, 132, 134, 136,
    ),
    8: _column(
        1, 32, 34, 37, 39, 42, 45, 47, 50, 52, 55, 58, 60, 63, 66, 68, 71, 73, 76, 79, 81, 84, 86,
        89, 92, 94, 97, 99, 102, 105, 107, 110, 113, 115, 118, 120, 123, 126, 128, 131, 133,
    ),
    9: _column(
        1, 9, 12, 15, 19, 22, 25, 28, 31, 34, 38, 41, 44, 47, 50, 54, 57, 60, 63, 66, 69, 73, 76,
        79, 82, 85, 88, 92, 95, 98, 101, 104, 107, 111, 114, 117, 120, 123, 127, 130, 133,
    ),
    10: _column(
        3, 1, 5, 8, 11, 15, 18, 21, 25, 28, 32, 35, 38, 42, 45, 48, 52, 55, 58, 62, 65, 68, 72, 75,
        78, 82, 85, 88, 92, 95, 98, 102, 105, 108, 112, 115, 118, 122, 125,
    ),
    11: _column(
        3, 3, 7, 10, 14, 17, 21, 25, 28, 32, 35, 39, 42, 46, 49, 53, 56, 60, 63, 67, 71, 74, 78,
        81, 85, 88, 92, 95, 99, 102, 106, 109, 113, 116, 120, 124, 127, 131, 134,
    ),
    12: _column(
        11, 5, 1, 5, 10, 14, 18, 23, 27, 31, 36, 40, 44, 49, 53, 57, 62, 66, 70, 75, 79, 83, 87,
        92, 96, 100, 105, 109, 113, 118, 122,
    ),
    13: _column(
        11, 4, 9, 13, 17, 21, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 68, 72, 76, 80, 84, 88,
        92, 96, 99, 103, 107, 111, 115, 119,
    ),
    14: _column(
        12, 8, 12, 16, 20, 24, 27, 31, 35, 39, 43, 47, 51, 55, 59, 63, 67, 71, 75, 79, 83, 87, 91,
        95, 99, 103, 107, 111, 115, 119,
    ),
}

ACERTOS = StandardScoreTable(
    name="pcfo.acertos",
    bands=BANDS,
    strata=tuple(
        table.get(band.min_age)
        for band in BANDS
        for table in (_INFANTIL, _FUNDAMENTAL)
    ),
    groups=GROUPS,
    monotonic=False,
)

TABLES = {"acertos": ACERTOS}
