"""Trail Making Test, adult version (19-75 anos).

Percentile cut-points in seconds, by age group and education, ordered
P95, P90, P75, P50, P25, P10, P5. A shorter time is a better performance,
so P95 holds the smallest time of each row.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, PercentileCutTable

BANDS = (
    AgeBand(19, 39),
    AgeBand(40, 59),
    AgeBand(60, 75),
)


def _table(name: str, strata: tuple[tuple[float, ...], ...]) -> PercentileCutTable:
    return PercentileCutTable(
        name=name,
        bands=BANDS,
        strata=strata,
        direction=Direction.LOWER_IS_BETTER,
        by_education=True,
    )


TEMPO_A = _table(
    "tmt_adulto.tempoA",
    (
        # 19-39
        (23.39, 27.67, 34.03, 40.58, 50.84, 61.14, 70.03),
        (20.71, 21.15, 25.65, 33.87, 42.53, 50.35, 58.48),
        (17.36, 19.09, 23.06, 29.97, 35.70, 45.75, 53.93),
        # 40-59
        (29.97, 29.97, 31.57, 37.60, 48.66, 48.66, 48.66),
        (20.04, 24.24, 32.03, 40.55, 45.98, 53.40, 60.34),
        (20.79, 23.19, 27.36, 34.83, 48.41, 65.65, 76.04),
        # 60-75
        (28.47, 28.52, 34.48, 38.05, 48.17, 61.12, 61.12),
        (29.64, 31.89, 36.16, 46.80, 55.20, 59.36, 59.36),
        (20.69, 22.00, 31.97, 39.85, 50.68, 62.70, 63.42),
    ),
)

TEMPO_B = _table(
    "tmt_adulto.tempoB",
    (
        # 19-39
        (62.31, 68.63, 85.54, 107.73, 142.01, 169.50, 182.41),
        (47.42, 48.24, 55.32, 76.12, 95.37, 120.25, 148.19),
        (33.09, 37.90, 51.19, 62.09, 77.07, 101.59, 134.03),
        # 40-59
        (82.47, 82.47, 95.12, 145.66, 168.33, 168.33, 168.33),
        (43.31, 63.21, 83.90, 100.15, 118.98, 144.48, 177.81),
        (44.10, 55.75, 65.93, 90.14, 107.20, 157.61, 177.25),
        # 60-75
        (72.93, 74.41, 90.52, 137.59, 157.70, 171.73, 171.73),
        (53.37, 64.75, 85.93, 125.03, 147.41, 162.69, 162.69),
        (44.97, 59.15, 65.56, 89.56, 114.50, 168.91, 180.36),
    ),
)

TEMPO_BA = _table(
    "tmt_adulto.tempoBA",
    (
        # 19-39
        (16.45, 25.62, 40.50, 62.88, 94.40, 119.10, 147.36),
        (14.46, 17.60, 26.67, 37.41, 58.04, 80.59, 96.56),
        (7.82, 12.62, 20.91, 32.11, 45.70, 66.86, 93.49),
        # 40-59
        (52.50, 52.50, 56.68, 108.06, 129.19, 129.19, 129.19),
        (19.01, 29.58, 47.84, 58.63, 82.66, 103.24, 137.56),
        (12.61, 14.68, 30.87, 48.13, 68.61, 98.54, 106.77),
        # 60-75
        (29.84, 32.13, 58.66, 95.77, 111.80, 137.59, 137.59),
        (7.32, 13.77, 39.13, 72.52, 98.94, 119.53, 119.53),
        (21.90, 23.02, 30.91, 44.48, 72.69, 109.13, 129.68),
    ),
)

TABLES = {
    "tempoA": TEMPO_A,
    "tempoB": TEMPO_B,
    "tempoBA": TEMPO_BA,
}
