"""Test catalogue, eligibility and scoring routes."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from neuro_score.core.schemas import CalculationResponse, ScoreRequest, TestDefinitionRead
from neuro_score.models.definitions import TestDefinition
from neuro_score.models.results import EligibilityStatus
from neuro_score.registry import find_test, list_tests, tests_for_age
from neuro_score.scoring import calculate, check_eligibility
from neuro_score.scoring.aggregator import quick_copy_text

router = APIRouter(prefix="/neuro-tests", tags=["neuro-tests"])


def get_definition_or_404(test_code: str) -> TestDefinition:
    definition = find_test(test_code)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Unknown test code: {test_code}")
    return definition


@router.get("", response_model=list[TestDefinitionRead])
async def list_definitions(age: Optional[float] = Query(None, ge=0, le=150)):
    definitions = list_tests() if age is None else tests_for_age(age)
    return [TestDefinitionRead.from_definition(d) for d in definitions]


@router.get("/{test_code}", response_model=TestDefinitionRead)
async def get_definition(test_code: str):
    return TestDefinitionRead.from_definition(get_definition_or_404(test_code))


@router.get("/{test_code}/eligibility", response_model=EligibilityStatus)
async def get_eligibility(test_code: str, age: float = Query(..., ge=0, le=150)):
    definition = get_definition_or_404(test_code)
    return check_eligibility(definition.code, age)


@router.post("/{test_code}/calculate", response_model=CalculationResponse)
async def calculate_scores(test_code: str, data: ScoreRequest):
    """Score raw values without storing them.

    Returns ``complete: false`` while required inputs are still missing.
    """
    definition = get_definition_or_404(test_code)
    result = calculate(definition.code, data.to_input())
    if result is None:
        return CalculationResponse(complete=False)
    return CalculationResponse(complete=True, result=result, summary=quick_copy_text(result))
