"""Hayling Test, adult version (19-75 anos).

Means and SDs by age group and education, from Zimmermann N, Cardoso CO,
Kristensen CH, Fonseca RP. Brazilian norms and effects of age and education
on the Hayling and Trail Making Tests. Trends Psychiatry Psychother. 2017
(Table 3). Times are in seconds; every measure is lower-is-better.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, MeanSdTable, NormPair

BANDS = (
    AgeBand(19, 39),
    AgeBand(40, 59),
    AgeBand(60, 75),
)


def _table(name: str, strata: tuple[NormPair, ...]) -> MeanSdTable:
    return MeanSdTable(
        name=name,
        bands=BANDS,
        strata=strata,
        direction=Direction.LOWER_IS_BETTER,
        by_education=True,
    )


# Strata per band: 5-8, 9-11, 12+ years of education.
TEMPO_A = _table(
    "hayling_adulto.tempoA",
    (
        NormPair(18.49, 4.88), NormPair(16.83, 7.74), NormPair(14.79, 4.48),
        NormPair(16.61, 7.30), NormPair(16.36, 7.05), NormPair(14.88, 4.58),
        NormPair(16.65, 4.96), NormPair(18.14, 5.00), NormPair(16.64, 4.89),
    ),
)

TEMPO_B = _table(
    "hayling_adulto.tempoB",
    (
        NormPair(50.40, 17.86), NormPair(37.16, 18.44), NormPair(36.89, 21.11),
        NormPair(62.38, 20.18), NormPair(44.88, 21.50), NormPair(39.11, 18.22),
        NormPair(48.98, 18.85), NormPair(48.33, 15.06), NormPair(50.35, 18.07),
    ),
)

ERROS_B = _table(
    "hayling_adulto.errosB",
    (
        NormPair(13.78, 5.24), NormPair(8.82, 6.64), NormPair(9.97, 6.74),
        NormPair(17.17, 7.92), NormPair(9.60, 6.10), NormPair(10.46, 5.97),
        NormPair(16.42, 7.27), NormPair(13.58, 5.55), NormPair(12.78, 6.95),
    ),
)

INIBICAO_BA = _table(
    "hayling_adulto.inibiçãoBA",
    (
        NormPair(31.91, 17.29), NormPair(20.33, 15.50), NormPair(22.10, 20.13),
        NormPair(45.77, 21.20), NormPair(28.52, 20.48), NormPair(24.23, 17.37),
        NormPair(32.33, 17.16), NormPair(30.19, 15.24), NormPair(33.70, 17.92),
    ),
)

TABLES = {
    "tempoA": TEMPO_A,
    "tempoB": TEMPO_B,
    "errosB": ERROS_B,
    "inibiçãoBA": INIBICAO_BA,
}
