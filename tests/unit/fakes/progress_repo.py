from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional
from uuid import UUID

from serverforge.app.domain.common import utcnow
from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role


class FakeProgressEventRepository:
    """
    In-memory fake for ProgressEventRepository.
    ``writes`` records every create/update in order so tests can assert on
    what an observer would have seen.
    """

    def __init__(self) -> None:
        self._by_id: dict[UUID, ProgressEvent] = {}
        self.writes: list[tuple[str, ProgressEvent]] = []

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
        event = ProgressEvent(
            host_id=host_id,
            site_id=site_id,
            package_category=category,
            direction=direction,
            milestone=milestone,
            step_index=step_index,
            total_steps=total_steps,
            detail=detail,
        )
        self._by_id[event.id] = event
        self.writes.append(("create", event))
        return event

    async def update_status(
        self,
        *,
        event_id: UUID,
        status: ProgressStatus,
        error: str | None = None,
    ) -> ProgressEvent:
        current = self._by_id[event_id]
        updated = replace(
            current,
            status=status,
            error=error if error is not None else current.error,
            updated_at=utcnow(),
        )
        self._by_id[event_id] = updated
        self.writes.append(("update", updated))
        return updated

    async def get_by_id(self, *, event_id: UUID) -> Optional[ProgressEvent]:
        return self._by_id.get(event_id)

    async def list_for_package(
        self,
        *,
        host_id: UUID,
        category: PackageCategory,
        direction: Role | None = None,
    ) -> list[ProgressEvent]:
        # dict preserves insertion order, which is creation order here
        return [
            e
            for e in self._by_id.values()
            if e.host_id == host_id
            and e.package_category == category
            and (direction is None or e.direction == direction)
        ]

    # ---------- Test helpers ----------

    def all(self) -> list[ProgressEvent]:
        return list(self._by_id.values())

    def by_milestone(self, milestone: str) -> list[ProgressEvent]:
        return [e for e in self._by_id.values() if e.milestone == milestone]
