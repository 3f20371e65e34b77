from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Enum as SAEnum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from serverforge.app.domain.common import utcnow
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role
from serverforge.app.infrastructure.db.base import Base, JSONType


def _enum(enum_cls, name: str) -> SAEnum:
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=True,  # PostgreSQL ENUM
        create_constraint=True,
        values_callable=lambda members: [m.value for m in members],
    )


class ProgressEventModel(Base):
    __tablename__ = "progress_events"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)

    host_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    site_id: Mapped[UUID | None] = mapped_column(nullable=True, index=True)
    package_category: Mapped[PackageCategory] = mapped_column(
        _enum(PackageCategory, "package_category_enum"),
        nullable=False,
        index=True,
    )
    direction: Mapped[Role] = mapped_column(_enum(Role, "package_role_enum"), nullable=False)

    milestone: Mapped[str] = mapped_column(String(255), nullable=False)
    step_index: Mapped[int] = mapped_column(Integer, nullable=False)
    total_steps: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[ProgressStatus] = mapped_column(
        _enum(ProgressStatus, "progress_status_enum"),
        nullable=False,
        default=ProgressStatus.PENDING,
        index=True,
    )
    detail: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    error: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("ix_progress_events_host_category_created", "host_id", "package_category", "created_at"),
    )
