from __future__ import annotations

from serverforge.app.application.common.progress import ProgressSink
from serverforge.app.application.provisioning.tracker import ProgressTracker
from serverforge.app.core import settings
from serverforge.app.domain.hosts.entities import Host
from serverforge.app.domain.provisioning.value_objects import IdentityPolicy
from serverforge.app.infrastructure.db.session import SessionLocal
from serverforge.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from serverforge.app.infrastructure.remote.ssh_executor import OpenSshRemoteExecutor


def build_tracker(*, sink: ProgressSink | None = None) -> ProgressTracker:
    return ProgressTracker(
        session_factory=SessionLocal,
        uow_factory=SqlAlchemyUnitOfWork,
        sink=sink,
    )


def build_executor(host: Host) -> OpenSshRemoteExecutor:
    return OpenSshRemoteExecutor(
        host=host,
        session_factory=SessionLocal,
        uow_factory=SqlAlchemyUnitOfWork,
        ssh_binary=settings.SSH_BINARY,
        connect_timeout_s=settings.SSH_CONNECT_TIMEOUT_S,
        server_alive_interval_s=settings.SSH_SERVER_ALIVE_INTERVAL_S,
        server_alive_count_max=settings.SSH_SERVER_ALIVE_COUNT_MAX,
    )


def build_identity_policy() -> IdentityPolicy:
    return IdentityPolicy(
        server_user=settings.SERVER_SSH_USER,
        site_user=settings.SITE_SSH_USER,
    )


def package_manager_kwargs(host: Host, *, sink: ProgressSink | None = None) -> dict:
    """Collaborators for a ``PackageInstaller``/``PackageRemover`` bound to ``host``."""
    return {
        "executor": build_executor(host),
        "tracker": build_tracker(sink=sink),
        "identity_policy": build_identity_policy(),
        "command_timeout_s": settings.SSH_COMMAND_TIMEOUT_S,
    }
