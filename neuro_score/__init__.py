"""Normative scoring engine for neuropsychological test batteries."""

__version__ = "0.1.0"

from neuro_score.scoring import (
    NOT_CLASSIFIED,
    calculate,
    check_eligibility,
    classify,
    is_eligible,
    lookup,
)
from neuro_score.scoring.aggregator import build_persisted_result
from neuro_score.export import to_canonical_text

__all__ = [
    "__version__",
    "NOT_CLASSIFIED",
    "build_persisted_result",
    "calculate",
    "check_eligibility",
    "classify",
    "is_eligible",
    "lookup",
    "to_canonical_text",
]
