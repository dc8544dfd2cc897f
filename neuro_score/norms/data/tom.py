"""Tarefa de Teoria da Mente (TOM), 3 a 5 anos: means and SDs per age."""

from neuro_score.norms.tables import AgeBand, MeanSdTable, NormPair

TOTAL = MeanSdTable(
    name="tom.total",
    bands=(AgeBand(3, 3), AgeBand(4, 4), AgeBand(5, 5)),
    strata=(NormPair(7.24, 2.803), NormPair(9.28, 2.772), NormPair(13.85, 4.234)),
)

TABLES = {"total": TOTAL}
