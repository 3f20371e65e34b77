from __future__ import annotations

from serverforge.app.application.provisioning.dto import ProgressEventDTO
from serverforge.app.domain.provisioning.entities import ProgressEvent


def to_progress_event_dto(event: ProgressEvent) -> ProgressEventDTO:
    detail = event.detail or {}
    return ProgressEventDTO(
        id=event.id,
        host_id=event.host_id,
        site_id=event.site_id,
        package_category=event.package_category,
        direction=event.direction,
        milestone=event.milestone,
        label=str(detail.get("label", event.milestone)),
        step_index=event.step_index,
        total_steps=event.total_steps,
        progress_percentage=event.progress_percentage,
        status=event.status,
        error=event.error,
        detail=event.detail,
        created_at=event.created_at,
        updated_at=event.updated_at,
    )
