from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from serverforge.app.domain.common import utcnow
from serverforge.app.infrastructure.db.base import Base


class HostCredentialModel(Base):
    __tablename__ = "host_credentials"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    host_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    user: Mapped[str] = mapped_column(String(64), nullable=False)
    private_key: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("host_id", "user", name="uq_host_credentials_host_user"),
    )
