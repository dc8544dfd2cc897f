"""Fluência verbal fonêmica F-A-S, 19 a 59 anos.

One mean and SD for the total of the three letters across the whole range.
"""

from neuro_score.norms.tables import AgeBand, MeanSdTable, NormPair

TOTAL = MeanSdTable(
    name="fas.total",
    bands=(AgeBand(19, 59),),
    strata=(NormPair(43.5, 10.9),),
)

TABLES = {"total": TOTAL}
