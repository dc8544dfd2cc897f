"""SQLAlchemy 2.0 models for stored neuropsychological test results."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid, event
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import JSON

from neuro_score.exceptions import ImmutableResultError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_uuid() -> uuid.UUID:
    return uuid.uuid4()


class Base(DeclarativeBase):
    pass


class NeuroTestResultRecord(Base):
    """One test administration. Rows are insert-only; corrections are new rows."""

    __tablename__ = "neuro_test_results"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=_new_uuid)
    client_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    schedule_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid)
    test_code: Mapped[str] = mapped_column(String(50), nullable=False)
    test_name: Mapped[str] = mapped_column(String(200), nullable=False)
    patient_age: Mapped[int] = mapped_column(Integer, nullable=False)
    raw_scores: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    calculated_scores: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    percentiles: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    classifications: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    applied_by: Mapped[Optional[str]] = mapped_column(String(100))
    applied_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    supersedes_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("neuro_test_results.id", ondelete="RESTRICT")
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_neuro_test_results_client_applied", "client_id", "applied_at"),
    )


@event.listens_for(NeuroTestResultRecord, "before_update")
def _reject_update(mapper, connection, target: NeuroTestResultRecord) -> None:
    raise ImmutableResultError(f"Test result {target.id} is immutable; record a correction instead")


@event.listens_for(NeuroTestResultRecord, "before_delete")
def _reject_delete(mapper, connection, target: NeuroTestResultRecord) -> None:
    raise ImmutableResultError(f"Test result {target.id} cannot be deleted")
