from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role
from serverforge.app.infrastructure.db.models.progress import ProgressEventModel
from serverforge.app.infrastructure.provisioning.mappers import (
    create_progress_event_model,
    progress_model_to_domain,
)


class ProgressEventNotFound(LookupError):
    def __init__(self, *, event_id: str) -> None:
        super().__init__(f"Progress event not found: {event_id}")
        self.event_id = event_id


class SqlAlchemyProgressEventRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_pending(
        self,
        *,
        host_id: UUID,
        category: PackageCategory,
        direction: Role,
        milestone: str,
        step_index: int,
        total_steps: int,
        detail: dict[str, Any] | None = None,
        site_id: UUID | None = None,
    ) -> ProgressEvent:
        m = create_progress_event_model(
            host_id=host_id,
            category=category,
            direction=direction,
            milestone=milestone,
            step_index=step_index,
            total_steps=total_steps,
            detail=detail,
            site_id=site_id,
        )
        self._session.add(m)
        await self._session.flush()  # ensures m.id and timestamps before commit
        return progress_model_to_domain(m)

    async def update_status(
        self,
        *,
        event_id: UUID,
        status: ProgressStatus,
        error: str | None = None,
    ) -> ProgressEvent:
        m = await self._session.get(ProgressEventModel, event_id)
        if m is None:
            raise ProgressEventNotFound(event_id=str(event_id))
        m.status = status
        if error is not None:
            m.error = error
        await self._session.flush()
        return progress_model_to_domain(m)

    async def get_by_id(self, *, event_id: UUID) -> ProgressEvent | None:
        stmt = select(ProgressEventModel).where(ProgressEventModel.id == event_id)
        m = (await self._session.execute(stmt)).scalar_one_or_none()
        return progress_model_to_domain(m) if m else None

    async def list_for_package(
        self,
        *,
        host_id: UUID,
        category: PackageCategory,
        direction: Role | None = None,
    ) -> list[ProgressEvent]:
        stmt = (
            select(ProgressEventModel)
            .where(ProgressEventModel.host_id == host_id)
            .where(ProgressEventModel.package_category == category)
        )
        if direction is not None:
            stmt = stmt.where(ProgressEventModel.direction == direction)
        stmt = stmt.order_by(ProgressEventModel.created_at.asc(), ProgressEventModel.step_index.asc())
        rows = (await self._session.execute(stmt)).scalars().all()
        return [progress_model_to_domain(m) for m in rows]
