"""Packaging calculated results for storage and quick copy."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from neuro_score.export.formatting import format_number
from neuro_score.models.definitions import ScoringModel
from neuro_score.models.results import NOT_CLASSIFIED, CalculatedResult, PersistedTestResult
from neuro_score.registry import get_test

logger = logging.getLogger(__name__)

MANUAL_SUFFIX = " (Cálculo Manual)"


def build_persisted_result(
    result: CalculatedResult,
    client_id: uuid.UUID,
    patient_age: float,
    applied_by: Optional[str] = None,
    applied_at: Optional[datetime] = None,
    schedule_id: Optional[uuid.UUID] = None,
    notes: Optional[str] = None,
    supersedes_id: Optional[uuid.UUID] = None,
) -> PersistedTestResult:
    """Create the immutable record for a calculated result.

    ``applied_at`` defaults to now (UTC). Explicit ``notes`` take precedence
    over the notes carried by the result.
    """
    definition = get_test(result.test_code)
    record = PersistedTestResult(
        client_id=client_id,
        schedule_id=schedule_id,
        test_code=definition.code,
        test_name=definition.name,
        patient_age=int(patient_age),
        raw_scores=dict(result.raw_scores),
        calculated_scores=dict(result.calculated_scores),
        percentiles=dict(result.percentiles),
        classifications=dict(result.classifications),
        applied_by=applied_by,
        applied_at=applied_at or datetime.now(timezone.utc),
        notes=notes if notes is not None else result.notes,
        supersedes_id=supersedes_id,
    )
    logger.debug("Packaged %s result %s for client %s", record.test_code, record.id, client_id)
    return record


def quick_copy_text(result: CalculatedResult) -> str:
    """One-line summary, e.g. ``FAS: Z-Score 0,66, Classificação Médio Superior``."""
    definition = get_test(result.test_code)
    name = definition.name.removesuffix(MANUAL_SUFFIX)
    normed = [s for s in definition.subscores if s.normed]
    parts = []
    for subscore in normed:
        label = result.classifications.get(subscore.name, NOT_CLASSIFIED)
        if result.scoring_model == ScoringModel.ZSCORE:
            value = f"Z-Score {format_number(result.calculated_scores.get(subscore.name))}"
        elif result.scoring_model == ScoringModel.PERCENTILE:
            value = f"Percentil {format_number(result.percentiles.get(subscore.name))}"
        else:
            value = f"Escore Padrão {format_number(result.calculated_scores.get(subscore.name))}"
        if len(normed) > 1:
            value = f"{subscore.label} {value}"
        parts.append(f"{value}, Classificação {label}")
    return f"{name}: " + "; ".join(parts)
