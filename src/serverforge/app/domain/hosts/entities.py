from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from serverforge.app.domain.common import utcnow


@dataclass(frozen=True, slots=True)
class Host:
    """Target server reference; the orchestrator only needs address data."""
    name: str
    public_ip: str
    ssh_port: int = 22
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not (0 < self.ssh_port < 65536):
            raise ValueError("ssh_port must be between 1 and 65535")


@dataclass(frozen=True, slots=True)
class HostCredential:
    host_id: UUID
    user: str
    private_key: str
    created_at: datetime = field(default_factory=utcnow)
    id: UUID = field(default_factory=uuid4)

    def __repr__(self) -> str:
        # keep key material out of logs
        return f"HostCredential(host_id={self.host_id!s}, user={self.user!r})"
