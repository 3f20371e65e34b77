from __future__ import annotations

from serverforge.app.domain.provisioning.enums import PackageCategory, PackageScope
from serverforge.app.domain.provisioning.value_objects import IdentityPolicy, RemoteIdentity


def resolve_identity(
    category: PackageCategory,
    policy: IdentityPolicy,
    override: RemoteIdentity | None = None,
) -> RemoteIdentity:
    """
    Pick the remote user that runs a package's commands.

    Server-level packages run elevated, site-level packages run as the
    constrained application user. A package-supplied override always wins.
    """
    if override is not None:
        return override
    if category.scope is PackageScope.SITE:
        return RemoteIdentity(user=policy.site_user, elevated=False)
    return RemoteIdentity(user=policy.server_user, elevated=True)
