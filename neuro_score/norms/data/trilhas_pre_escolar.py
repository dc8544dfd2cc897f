"""Teste de Trilhas Pré-Escolares (TT-P), 4-6 anos.

Standard scores (mean 100, SD 15) for the number of correct sequences,
from tables 11.2 (Part A) and 11.4 (Part B) of the test manual. Each age is
its own band. Zero sequences has no tabled standard score.
"""

from neuro_score.models.definitions import Direction
from neuro_score.norms.tables import AgeBand, ScoreInterval, StandardScoreTable

BANDS = (AgeBand(4, 4), AgeBand(5, 5), AgeBand(6, 6))


def _column(scores: tuple[int, ...]) -> tuple[ScoreInterval, ...]:
    """Exact raw values 1..n mapped to the given standard scores."""
    return tuple(ScoreInterval(raw, raw, score) for raw, score in enumerate(scores, start=1))


SEQUENCIAS_A = StandardScoreTable(
    name="trilhas_pre_escolar.sequenciasA",
    bands=BANDS,
    strata=(
        _column((92, 101, 109, 117, 125)),
        _column((78, 86, 95, 103, 112)),
        _column((74, 84, 93, 102, 111)),
    ),
    direction=Direction.HIGHER_IS_BETTER,
)

SEQUENCIAS_B = StandardScoreTable(
    name="trilhas_pre_escolar.sequenciasB",
    bands=BANDS,
    strata=(
        _column((86, 97, 108, 118, 129, 140, 150, 161, 172, 183)),
        _column((84, 90, 95, 101, 107, 113, 119, 124, 130, 136)),
        _column((83, 89, 94, 100, 106, 112, 118, 124, 130, 136)),
    ),
    direction=Direction.HIGHER_IS_BETTER,
)

TABLES = {
    "sequenciasA": SEQUENCIAS_A,
    "sequenciasB": SEQUENCIAS_B,
}
