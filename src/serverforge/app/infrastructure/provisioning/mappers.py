from __future__ import annotations

from typing import Any
from uuid import UUID

from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role
from serverforge.app.infrastructure.db.models.progress import ProgressEventModel


def progress_model_to_domain(m: ProgressEventModel) -> ProgressEvent:
    return ProgressEvent(
        id=m.id,
        host_id=m.host_id,
        site_id=m.site_id,
        package_category=PackageCategory(m.package_category),
        direction=Role(m.direction),
        milestone=m.milestone,
        step_index=m.step_index,
        total_steps=m.total_steps,
        status=ProgressStatus(m.status),
        detail=m.detail,
        error=m.error,
        created_at=m.created_at,
        updated_at=m.updated_at,
    )


def create_progress_event_model(
        *,
        host_id: UUID,
        category: PackageCategory,
        direction: Role,
        milestone: str,
        step_index: int,
        total_steps: int,
        detail: dict[str, Any] | None,
        site_id: UUID | None,
) -> ProgressEventModel:
    return ProgressEventModel(
        host_id=host_id,
        site_id=site_id,
        package_category=category,
        direction=direction,
        milestone=milestone,
        step_index=step_index,
        total_steps=total_steps,
        status=ProgressStatus.PENDING,
        detail=detail,
        error=None,
    )
