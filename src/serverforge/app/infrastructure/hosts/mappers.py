from __future__ import annotations

from serverforge.app.domain.hosts.entities import HostCredential
from serverforge.app.infrastructure.db.models.host import HostCredentialModel


def credential_model_to_domain(m: HostCredentialModel) -> HostCredential:
    return HostCredential(
        id=m.id,
        host_id=m.host_id,
        user=m.user,
        private_key=m.private_key,
        created_at=m.created_at,
    )


def credential_domain_to_model(c: HostCredential) -> HostCredentialModel:
    return HostCredentialModel(
        id=c.id,
        host_id=c.host_id,
        user=c.user,
        private_key=c.private_key,
        created_at=c.created_at,
    )
