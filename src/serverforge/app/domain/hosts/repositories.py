from __future__ import annotations

from typing import Protocol
from uuid import UUID

from serverforge.app.domain.hosts.entities import HostCredential


class HostCredentialRepository(Protocol):
    async def add(self, credential: HostCredential) -> HostCredential: ...

    async def get_for_user(self, *, host_id: UUID, user: str) -> HostCredential | None: ...
