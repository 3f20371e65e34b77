from __future__ import annotations

from uuid import UUID

from serverforge.app.domain.hosts.entities import HostCredential


class FakeHostCredentialRepository:
    def __init__(self) -> None:
        self._by_key: dict[tuple[UUID, str], HostCredential] = {}

    async def add(self, credential: HostCredential) -> HostCredential:
        self._by_key[(credential.host_id, credential.user)] = credential
        return credential

    async def get_for_user(self, *, host_id: UUID, user: str) -> HostCredential | None:
        return self._by_key.get((host_id, user))
