"""Figura Complexa de Taylor, 18 a 92 anos.

Means and SDs for copy and delayed reproduction scores by age group (under 50 and 50
and over), from the NEURONORMA-Plus project.
"""

from neuro_score.norms.tables import AgeBand, MeanSdTable, NormPair

BANDS = (
    AgeBand(18, 49),
    AgeBand(50, 92),
)

COPIA = MeanSdTable(
    name="taylor.copia",
    bands=BANDS,
    strata=(NormPair(34.86, 2.03), NormPair(32.86, 3.67)),
)

REPRODUCAO = MeanSdTable(
    name="taylor.reproducaoMemoria",
    bands=BANDS,
    strata=(NormPair(23.87, 5.17), NormPair(16.96, 5.95)),
)

TABLES = {
    "copia": COPIA,
    "reproducaoMemoria": REPRODUCAO,
}
