from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role


@dataclass(frozen=True, slots=True)
class CommandResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True, slots=True)
class GetPackageProgressInputDTO:
    host_id: UUID
    category: PackageCategory
    direction: Role | None = None


@dataclass(frozen=True, slots=True)
class ProgressEventDTO:
    id: UUID
    host_id: UUID
    site_id: UUID | None
    package_category: PackageCategory
    direction: Role
    milestone: str
    label: str
    step_index: int
    total_steps: int
    progress_percentage: float
    status: ProgressStatus
    error: str | None
    detail: dict[str, Any] | None
    created_at: datetime
    updated_at: datetime
