"""Pytest configuration and fixtures."""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from neuro_score.core.models import Base
from neuro_score.models.definitions import EducationLevel
from neuro_score.models.results import PersistedTestResult, RawScoreInput
from neuro_score.scoring import calculate
from neuro_score.scoring.aggregator import build_persisted_result

CLIENT_ID = uuid.UUID("aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa")
APPLIER_ID = "bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb"


@pytest.fixture(autouse=True)
def _report_timezone(monkeypatch):
    """Pin the settings used by exports and the registry."""
    from neuro_score.config import get_settings

    monkeypatch.setenv("NEURO_SCORE_REPORT_TIMEZONE", "America/Sao_Paulo")
    monkeypatch.setenv("NEURO_SCORE_API_KEY", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def trilhas_input():
    """An 8-year-old with 10 sequences in Part A and 8 in Part B."""
    return RawScoreInput(subject_age=8.4, values={"sequenciasA": 10, "sequenciasB": 8})


@pytest.fixture
def hayling_input():
    """Adult whose Part A time sits exactly on the normative mean."""
    return RawScoreInput(
        subject_age=30,
        education_level=EducationLevel.MEDIO,
        values={"tempoA": 16.83, "tempoB": 55.6, "errosB": 8.82},
    )


@pytest.fixture
def trilhas_record(trilhas_input) -> PersistedTestResult:
    result = calculate("TRILHAS", trilhas_input)
    return build_persisted_result(
        result,
        client_id=CLIENT_ID,
        patient_age=trilhas_input.subject_age,
        applied_by=APPLIER_ID,
        applied_at=datetime(2025, 3, 14, 15, 0, tzinfo=timezone.utc),
        notes="Colaborativa.",
    )


@pytest.fixture
def make_record():
    """Factory for stored results of the FAS manual calculation."""

    def _make(applied_at: datetime, pontuacao: float = 40, client_id: uuid.UUID = CLIENT_ID):
        result = calculate(
            "CALC_FAS",
            RawScoreInput(
                subject_age=40,
                values={"pontuacao": pontuacao, "media": 35, "desvioPadrao": 7.5},
            ),
        )
        return build_persisted_result(
            result, client_id=client_id, patient_age=40, applied_at=applied_at
        )

    return _make


@pytest.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess
        await sess.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
