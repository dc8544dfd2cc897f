"""Pydantic schemas for the neuro test API I/O."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from neuro_score.models.definitions import EducationLevel, ScoringModel, TestDefinition
from neuro_score.models.results import CalculatedResult, PersistedTestResult, RawScoreInput, RawValue


# --- Definitions ---

class SubscoreRead(BaseModel):
    name: str
    label: str
    derived: bool = False
    normed: bool = True


class TestDefinitionRead(BaseModel):
    code: str
    name: str
    full_name: str
    description: str
    min_age: int
    max_age: int
    scoring_model: ScoringModel
    requires_education: bool
    input_fields: list[str]
    subscores: list[SubscoreRead]
    main_subscore: Optional[str] = None
    group_field: Optional[str] = None
    groups: list[str] = Field(default_factory=list)
    provisional_norms: bool = False

    @classmethod
    def from_definition(cls, definition: TestDefinition) -> "TestDefinitionRead":
        return cls(
            code=definition.code,
            name=definition.name,
            full_name=definition.full_name,
            description=definition.description,
            min_age=definition.min_age,
            max_age=definition.max_age,
            scoring_model=definition.scoring_model,
            requires_education=definition.requires_education,
            input_fields=list(definition.input_fields),
            subscores=[
                SubscoreRead(name=s.name, label=s.label, derived=s.is_derived, normed=s.normed)
                for s in definition.subscores
            ],
            main_subscore=definition.main_subscore,
            group_field=definition.group_field,
            groups=list(definition.groups),
            provisional_norms=definition.provisional_norms,
        )


# --- Scoring ---

class ScoreRequest(BaseModel):
    subject_age: float = Field(..., ge=0, le=150)
    education_level: Optional[EducationLevel] = None
    values: dict[str, RawValue] = Field(default_factory=dict)
    notes: Optional[str] = None

    def to_input(self) -> RawScoreInput:
        return RawScoreInput(
            subject_age=self.subject_age,
            education_level=self.education_level,
            values=self.values,
            notes=self.notes,
        )


class CalculationResponse(BaseModel):
    complete: bool
    result: Optional[CalculatedResult] = None
    summary: Optional[str] = None


# --- Stored results ---

class TestResultCreate(ScoreRequest):
    test_code: str
    applied_by: Optional[str] = None
    applied_at: Optional[datetime] = None
    schedule_id: Optional[uuid.UUID] = None


class TestResultRead(PersistedTestResult):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    created_at: Optional[datetime] = None
