"""Insert-only repository for neuro test results."""

from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from neuro_score.core.models import NeuroTestResultRecord
from neuro_score.models.results import PersistedTestResult

logger = logging.getLogger(__name__)


class NeuroTestResultRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, result: PersistedTestResult) -> NeuroTestResultRecord:
        record = NeuroTestResultRecord(**result.model_dump())
        self.session.add(record)
        await self.session.flush()
        logger.info(
            "Stored %s result %s for client %s", record.test_code, record.id, record.client_id
        )
        return record

    async def record_correction(
        self, original_id: uuid.UUID, corrected: PersistedTestResult
    ) -> Optional[NeuroTestResultRecord]:
        """Store ``corrected`` as a new row superseding ``original_id``.

        Returns None when the original does not exist or belongs to another
        client. The original row is left untouched.
        """
        original = await self.get_by_id(original_id)
        if original is None or original.client_id != corrected.client_id:
            return None
        correction = corrected.model_copy(update={"supersedes_id": original.id})
        return await self.create(correction)

    async def get_by_id(self, result_id: uuid.UUID) -> Optional[NeuroTestResultRecord]:
        return await self.session.get(NeuroTestResultRecord, result_id)

    async def list_by_client(
        self,
        client_id: uuid.UUID,
        limit: int = 100,
        latest_only: bool = False,
    ) -> Sequence[NeuroTestResultRecord]:
        """Results for a client, newest administration first.

        With ``latest_only`` results that a correction supersedes are left out.
        """
        stmt = select(NeuroTestResultRecord).where(NeuroTestResultRecord.client_id == client_id)
        if latest_only:
            superseded = (
                select(NeuroTestResultRecord.supersedes_id)
                .where(NeuroTestResultRecord.supersedes_id.is_not(None))
            )
            stmt = stmt.where(NeuroTestResultRecord.id.not_in(superseded))
        stmt = stmt.order_by(
            NeuroTestResultRecord.applied_at.desc(),
            NeuroTestResultRecord.created_at.desc(),
        ).limit(limit)
        result = await self.session.execute(stmt)
        return result.scalars().all()
