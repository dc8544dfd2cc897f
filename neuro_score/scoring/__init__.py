"""Eligibility, lookup, calculation and classification."""

from neuro_score.models.results import NOT_CLASSIFIED
from neuro_score.scoring.calculator import calculate, is_complete
from neuro_score.scoring.classification import (
    classify,
    classify_percentile,
    classify_standard_score,
    classify_zscore,
    severity_rank,
)
from neuro_score.scoring.eligibility import age_band_name, check_eligibility, is_eligible
from neuro_score.scoring.lookup import lookup

__all__ = [
    "NOT_CLASSIFIED",
    "age_band_name",
    "calculate",
    "check_eligibility",
    "classify",
    "classify_percentile",
    "classify_standard_score",
    "classify_zscore",
    "is_complete",
    "is_eligible",
    "lookup",
    "severity_rank",
]
