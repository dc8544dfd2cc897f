"""Normative tables and their load-time validation."""

from neuro_score.norms.tables import (
    AgeBand,
    Anchor,
    LookupResult,
    MeanSdTable,
    NormPair,
    PercentileAnchorTable,
    PercentileCutTable,
    PercentileRangeTable,
    ScoreInterval,
    StandardScoreTable,
)
from neuro_score.norms.validation import table_problems, validate_table

__all__ = [
    "AgeBand",
    "Anchor",
    "LookupResult",
    "MeanSdTable",
    "NormPair",
    "PercentileAnchorTable",
    "PercentileCutTable",
    "PercentileRangeTable",
    "ScoreInterval",
    "StandardScoreTable",
    "table_problems",
    "validate_table",
]
