from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role


class ProgressEventRepository(Protocol):
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
        ...

    async def update_status(
            self,
            *,
            event_id: UUID,
            status: ProgressStatus,
            error: str | None = None,
    ) -> ProgressEvent:
        ...

    async def get_by_id(self, *, event_id: UUID) -> ProgressEvent | None:
        ...

    async def list_for_package(
            self,
            *,
            host_id: UUID,
            category: PackageCategory,
            direction: Role | None = None,
    ) -> list[ProgressEvent]:
        """Events for one package on one host, oldest first."""
        ...
