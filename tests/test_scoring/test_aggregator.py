"""Tests for packaging calculated results."""

import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from neuro_score.scoring import calculate
from neuro_score.scoring.aggregator import build_persisted_result

CLIENT = uuid.uuid4()


def test_build_copies_all_maps(trilhas_input):
    result = calculate("TRILHAS", trilhas_input)
    record = build_persisted_result(result, client_id=CLIENT, patient_age=8.9)

    assert record.test_code == "TRILHAS"
    assert record.test_name == "Trilhas A e B"
    assert record.patient_age == 8
    assert record.raw_scores == result.raw_scores
    assert record.calculated_scores == result.calculated_scores
    assert record.percentiles == result.percentiles
    assert record.classifications == result.classifications
    assert record.applied_at.tzinfo is not None
    assert not record.is_correction


def test_explicit_fields(trilhas_input):
    result = calculate("TRILHAS", trilhas_input)
    applied_at = datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)
    original = uuid.uuid4()

    record = build_persisted_result(
        result,
        client_id=CLIENT,
        patient_age=8,
        applied_by="therapist-1",
        applied_at=applied_at,
        notes="  ",
        supersedes_id=original,
    )

    assert record.applied_at == applied_at
    assert record.applied_by == "therapist-1"
    assert record.notes is None
    assert record.is_correction


def test_records_are_immutable(trilhas_record):
    with pytest.raises(ValidationError):
        trilhas_record.notes = "changed"


def test_each_record_gets_its_own_id(trilhas_input):
    result = calculate("TRILHAS", trilhas_input)
    first = build_persisted_result(result, client_id=CLIENT, patient_age=8)
    second = build_persisted_result(result, client_id=CLIENT, patient_age=8)
    assert first.id != second.id
