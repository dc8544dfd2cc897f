"""Qualitative classification of percentiles, Z-scores and standard scores.

Bands (boundaries inclusive where shown):

  Percentile       <=5 Inferior, <=25 Média Inferior, <=75 Média,
                   <95 Média Superior, >=95 Superior
  Z-score (2 dp)   <=-1.32 Inferior, <=-0.70 Médio Inferior, <=0.65 Médio,
                   <=1.36 Médio Superior, >=1.37 Superior
  Standard score   <70 Muito Baixa, 70-84 Baixa, 85-114 Média,
                   115-129 Alta, >=130 Muito Alta
"""

from __future__ import annotations

from typing import Optional, Union

from neuro_score.models.definitions import ScoringModel
from neuro_score.models.results import NOT_CLASSIFIED
from neuro_score.numeric import round_half_up
from neuro_score.scoring.coercion import parse_numeric

# Percentile categories
INFERIOR = "Inferior"
MEDIA_INFERIOR = "Média Inferior"
MEDIA = "Média"
MEDIA_SUPERIOR = "Média Superior"
SUPERIOR = "Superior"

# Z-score categories
MEDIO_INFERIOR = "Médio Inferior"
MEDIO = "Médio"
MEDIO_SUPERIOR = "Médio Superior"

# Standard score categories
MUITO_BAIXA = "Muito Baixa"
BAIXA = "Baixa"
ALTA = "Alta"
MUITO_ALTA = "Muito Alta"

# Range codes are mapped explicitly; a code is never re-derived from its bounds.
PERCENTILE_CODES: dict[str, str] = {
    "<5": INFERIOR,
    "<10": INFERIOR,
    "≤5": INFERIOR,
    "5-10": MEDIA_INFERIOR,
    "5-25": MEDIA_INFERIOR,
    "10-25": MEDIA_INFERIOR,
    "25-50": MEDIA,
    "50-75": MEDIA,
    "75-90": MEDIA_SUPERIOR,
    "75-95": MEDIA_SUPERIOR,
    "90-95": MEDIA_SUPERIOR,
    ">90": SUPERIOR,
    ">95": SUPERIOR,
}

# Ordinal rank, 0 is the most severe impairment.
_SEVERITY: dict[str, int] = {
    INFERIOR: 0,
    MEDIA_INFERIOR: 1,
    MEDIA: 2,
    MEDIA_SUPERIOR: 3,
    SUPERIOR: 4,
    MEDIO_INFERIOR: 1,
    MEDIO: 2,
    MEDIO_SUPERIOR: 3,
    MUITO_BAIXA: 0,
    BAIXA: 1,
    ALTA: 3,
    MUITO_ALTA: 4,
}


def classify_percentile(value: Optional[Union[int, float, str]]) -> str:
    """Classify a numeric percentile or a percentile range code.

    A string that parses as a plain number is banded numerically; any other
    string must be a known range code.
    """
    if value is None:
        return NOT_CLASSIFIED
    if isinstance(value, str):
        code = value.strip()
        number = parse_numeric(code)
        if number is None:
            return PERCENTILE_CODES.get(code, NOT_CLASSIFIED)
        value = number
    if isinstance(value, bool):
        return NOT_CLASSIFIED
    if value <= 5:
        return INFERIOR
    if value <= 25:
        return MEDIA_INFERIOR
    if value <= 75:
        return MEDIA
    if value < 95:
        return MEDIA_SUPERIOR
    return SUPERIOR


def classify_zscore(z: Optional[float]) -> str:
    if z is None:
        return NOT_CLASSIFIED
    z = round_half_up(z, 2)
    if z <= -1.32:
        return INFERIOR
    if z <= -0.70:
        return MEDIO_INFERIOR
    if z <= 0.65:
        return MEDIO
    if z <= 1.36:
        return MEDIO_SUPERIOR
    return SUPERIOR


def classify_standard_score(score: Optional[float]) -> str:
    if score is None:
        return NOT_CLASSIFIED
    if score < 70:
        return MUITO_BAIXA
    if score < 85:
        return BAIXA
    if score < 115:
        return MEDIA
    if score < 130:
        return ALTA
    return MUITO_ALTA


def classify(model: ScoringModel, value: Optional[Union[int, float, str]]) -> str:
    """Classify a score under the given scoring model."""
    if value is None:
        return NOT_CLASSIFIED
    if model == ScoringModel.PERCENTILE:
        return classify_percentile(value)
    number = parse_numeric(value)
    if model == ScoringModel.ZSCORE:
        return classify_zscore(number)
    return classify_standard_score(number)


def severity_rank(label: str) -> Optional[int]:
    """Ordinal rank of a category (0 = most impaired), None if unclassified."""
    return _SEVERITY.get(label)
