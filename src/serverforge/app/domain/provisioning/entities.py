from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from serverforge.app.domain.common import utcnow
from .enums import PackageCategory, ProgressStatus, Role


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """
    Persisted status of one milestone in an install/remove run.
    Observers read these rows while the run is still writing them.
    """
    host_id: UUID
    package_category: PackageCategory
    direction: Role
    milestone: str
    step_index: int
    total_steps: int
    status: ProgressStatus = ProgressStatus.PENDING
    detail: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    site_id: Optional[UUID] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.step_index < 1:
            raise ValueError("step_index starts at 1")
        if self.total_steps < 0:
            raise ValueError("total_steps must not be negative")

    @property
    def progress_percentage(self) -> float:
        if self.total_steps == 0:
            return 0.0
        return round(self.step_index / self.total_steps * 100, 2)

    @property
    def is_install(self) -> bool:
        return self.direction == Role.INSTALL

    @property
    def is_remove(self) -> bool:
        return self.direction == Role.REMOVE

    @property
    def is_pending(self) -> bool:
        return self.status == ProgressStatus.PENDING

    @property
    def is_success(self) -> bool:
        return self.status == ProgressStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self.status == ProgressStatus.FAILED

    @property
    def is_terminal(self) -> bool:
        return ProgressStatus(self.status).is_terminal
