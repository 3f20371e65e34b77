from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from serverforge.app.domain.hosts.entities import HostCredential
from serverforge.app.infrastructure.db.models.host import HostCredentialModel
from serverforge.app.infrastructure.hosts.mappers import credential_domain_to_model, credential_model_to_domain


class SqlAlchemyHostCredentialRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, credential: HostCredential) -> HostCredential:
        m = credential_domain_to_model(credential)
        self._session.add(m)
        await self._session.flush()
        return credential_model_to_domain(m)

    async def get_for_user(self, *, host_id: UUID, user: str) -> HostCredential | None:
        stmt = (
            select(HostCredentialModel)
            .where(HostCredentialModel.host_id == host_id)
            .where(HostCredentialModel.user == user)
        )
        m = (await self._session.execute(stmt)).scalar_one_or_none()
        return credential_model_to_domain(m) if m else None
