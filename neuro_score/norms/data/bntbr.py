"""Boston Naming Test, Brazilian 30-item version (BNT-BR).

Age-band means and SDs for the total of correct namings (Mioto et al., 2010;
de Paula et al., in preparation).
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, MeanSdTable, NormPair

ACERTOS = MeanSdTable(
    name="bntbr.acertos",
    bands=(
        AgeBand(6, 9),
        AgeBand(10, 14),
        AgeBand(15, 19),
        AgeBand(20, 24),
        AgeBand(25, 34),
        AgeBand(35, 44),
        AgeBand(45, 54),
        AgeBand(55, 64),
        AgeBand(65, 74),
        AgeBand(75, 99),
    ),
    strata=(
        NormPair(17.7, 6.5),
        NormPair(20.8, 7.95),
        NormPair(23.9, 6.05),
        NormPair(21.1, 10.3),
        NormPair(22.1, 9.5),
        NormPair(24.25, 7.65),
        NormPair(22.2, 9.2),
        NormPair(25.85, 4.45),
        NormPair(24.3, 5.0),
        NormPair(20.4, 6.05),
    ),
    direction=Direction.HIGHER_IS_BETTER,
    percentile_clamp=(1, 99),
)

TABLES = {"acertos": ACERTOS}
