"""Stored test results for a client: create, correct, list and export."""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from neuro_score.api.routes.neuro_tests import get_definition_or_404
from neuro_score.core.database import get_db
from neuro_score.core.repository import NeuroTestResultRepository
from neuro_score.core.schemas import TestResultCreate, TestResultRead
from neuro_score.export import to_canonical_text
from neuro_score.models.results import PersistedTestResult
from neuro_score.scoring import calculate, check_eligibility
from neuro_score.scoring.aggregator import build_persisted_result

router = APIRouter(prefix="/clients/{client_id}/neuro-tests", tags=["results"])


def _score_for_storage(client_id: uuid.UUID, data: TestResultCreate) -> PersistedTestResult:
    definition = get_definition_or_404(data.test_code)
    eligibility = check_eligibility(definition.code, data.subject_age)
    if not eligibility.eligible:
        raise HTTPException(status_code=422, detail=eligibility.message)
    result = calculate(definition.code, data.to_input())
    if result is None:
        raise HTTPException(status_code=422, detail="Preencha todos os campos obrigatórios")
    return build_persisted_result(
        result,
        client_id=client_id,
        patient_age=data.subject_age,
        applied_by=data.applied_by,
        applied_at=data.applied_at,
        schedule_id=data.schedule_id,
    )


@router.post("", response_model=TestResultRead, status_code=201)
async def create_result(
    client_id: uuid.UUID,
    data: TestResultCreate,
    db: AsyncSession = Depends(get_db),
):
    record = await NeuroTestResultRepository(db).create(_score_for_storage(client_id, data))
    return TestResultRead.model_validate(record)


@router.post("/{result_id}/corrections", response_model=TestResultRead, status_code=201)
async def create_correction(
    client_id: uuid.UUID,
    result_id: uuid.UUID,
    data: TestResultCreate,
    db: AsyncSession = Depends(get_db),
):
    corrected = _score_for_storage(client_id, data)
    record = await NeuroTestResultRepository(db).record_correction(result_id, corrected)
    if record is None:
        raise HTTPException(status_code=404, detail="Test result not found")
    return TestResultRead.model_validate(record)


@router.get("", response_model=list[TestResultRead])
async def list_results(
    client_id: uuid.UUID,
    latest_only: bool = Query(False),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    records = await NeuroTestResultRepository(db).list_by_client(
        client_id, limit=limit, latest_only=latest_only
    )
    return [TestResultRead.model_validate(r) for r in records]


@router.get("/{result_id}/export", response_class=PlainTextResponse)
async def export_result(
    client_id: uuid.UUID,
    result_id: uuid.UUID,
    subject_name: str = Query(..., min_length=1),
    applier_name: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    record = await NeuroTestResultRepository(db).get_by_id(result_id)
    if record is None or record.client_id != client_id:
        raise HTTPException(status_code=404, detail="Test result not found")
    result = PersistedTestResult.model_validate(record)
    applier_names = {result.applied_by: applier_name} if result.applied_by and applier_name else None
    return to_canonical_text(result, subject_name, applier_names)
