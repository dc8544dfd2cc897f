"""Scoring input and result models."""

import math
import uuid
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from neuro_score.models.definitions import EducationLevel, ScoringModel

NOT_CLASSIFIED = "Não classificado"

RawValue = Union[int, float, str, None]
PercentileValue = Union[int, float, str]


class RawScoreInput(BaseModel):
    """Raw measurements captured for one test administration.

    Values may be incomplete or hold unparsed strings while the clinician is
    still typing; the calculator decides what is scoreable.
    """

    model_config = ConfigDict(frozen=True)

    subject_age: float = Field(..., ge=0, le=150, description="Age in years at testing")
    education_level: Optional[EducationLevel] = None
    values: dict[str, RawValue] = Field(default_factory=dict)
    notes: Optional[str] = None

    @property
    def age_years(self) -> int:
        """Whole years used for eligibility and age-band selection."""
        return math.floor(self.subject_age)


class EligibilityStatus(BaseModel):
    """Outcome of an age eligibility check."""

    model_config = ConfigDict(frozen=True)

    test_code: str
    subject_age: int
    eligible: bool
    message: Optional[str] = None


class CalculatedResult(BaseModel):
    """Scores, percentiles and classifications for one test administration."""

    model_config = ConfigDict(frozen=True)

    test_code: str
    scoring_model: ScoringModel
    raw_scores: dict[str, Optional[PercentileValue]] = Field(default_factory=dict)
    calculated_scores: dict[str, Optional[float]] = Field(default_factory=dict)
    percentiles: dict[str, Optional[PercentileValue]] = Field(default_factory=dict)
    classifications: dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = None

    @property
    def unscored(self) -> list[str]:
        """Subscores that could not be classified."""
        return [name for name, label in self.classifications.items() if label == NOT_CLASSIFIED]

    @property
    def is_fully_scored(self) -> bool:
        return not self.unscored


class PersistedTestResult(BaseModel):
    """A stored test administration; immutable once created."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    client_id: uuid.UUID
    schedule_id: Optional[uuid.UUID] = None
    test_code: str
    test_name: str
    patient_age: int = Field(..., ge=0, le=150)
    raw_scores: dict[str, Optional[PercentileValue]] = Field(default_factory=dict)
    calculated_scores: dict[str, Optional[float]] = Field(default_factory=dict)
    percentiles: dict[str, Optional[PercentileValue]] = Field(default_factory=dict)
    classifications: dict[str, str] = Field(default_factory=dict)
    applied_by: Optional[str] = None
    applied_at: datetime
    notes: Optional[str] = None
    supersedes_id: Optional[uuid.UUID] = Field(
        None, description="Earlier result this record corrects"
    )

    @field_validator("notes")
    @classmethod
    def _blank_notes_are_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def is_correction(self) -> bool:
        return self.supersedes_id is not None
