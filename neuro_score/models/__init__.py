"""Data models for the scoring engine."""

from neuro_score.models.definitions import (
    AgeRange,
    DerivedScore,
    Direction,
    EducationLevel,
    ScoringModel,
    SubscoreDefinition,
    TestDefinition,
)
from neuro_score.models.results import (
    NOT_CLASSIFIED,
    CalculatedResult,
    EligibilityStatus,
    PersistedTestResult,
    RawScoreInput,
)

__all__ = [
    "AgeRange",
    "DerivedScore",
    "Direction",
    "EducationLevel",
    "ScoringModel",
    "SubscoreDefinition",
    "TestDefinition",
    "NOT_CLASSIFIED",
    "CalculatedResult",
    "EligibilityStatus",
    "PersistedTestResult",
    "RawScoreInput",
]
