from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Sequence
from uuid import UUID

from serverforge.app.application.provisioning.interfaces import RemoteExecutor
from serverforge.app.application.provisioning.orchestrator import DEFAULT_COMMAND_TIMEOUT_S, Orchestrator
from serverforge.app.application.provisioning.tracker import ProgressTracker
from serverforge.app.domain.hosts.entities import Host
from serverforge.app.domain.provisioning.enums import PackageCategory, PackageScope, Role, RunState
from serverforge.app.domain.provisioning.errors import ExecutionFailure, SiteContextRequired
from serverforge.app.domain.provisioning.identity import resolve_identity
from serverforge.app.domain.provisioning.milestones import MilestoneRegistry
from serverforge.app.domain.provisioning.steps import Step
from serverforge.app.domain.provisioning.value_objects import IdentityPolicy, RemoteIdentity

logger = logging.getLogger(__name__)


class PackageManager(ABC):
    """
    Base for concrete package installers and removers.

    Subclasses declare their category and milestones and build the step
    sequence in ``execute``; running it, progress tracking and failure
    reporting are shared here.
    """

    role: ClassVar[Role]
    # set on a subclass to run as someone other than the scope default
    identity_override: ClassVar[RemoteIdentity | None] = None

    def __init__(
            self,
            host: Host,
            *,
            executor: RemoteExecutor,
            tracker: ProgressTracker,
            identity_policy: IdentityPolicy | None = None,
            site_id: UUID | None = None,
            command_timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S,
    ) -> None:
        self.host = host
        self.site_id = site_id
        self.identity_policy = identity_policy or IdentityPolicy()
        self.state = RunState.NOT_STARTED
        self._executor = executor
        self._tracker = tracker
        self._command_timeout_s = command_timeout_s

    @property
    @abstractmethod
    def category(self) -> PackageCategory: ...

    @abstractmethod
    def milestones(self) -> MilestoneRegistry: ...

    @abstractmethod
    async def execute(self, *args, **kwargs) -> None:
        """Build this package's steps and hand them to ``install``/``remove``."""

    def identity(self) -> RemoteIdentity:
        return resolve_identity(self.category, self.identity_policy, override=self.identity_override)

    async def mark_resource_as_failed(self, message: str) -> None:
        """Hook for flagging the domain resource after a failed run."""
        return None

    def _orchestrator(self) -> Orchestrator:
        if self.category.scope is PackageScope.SITE and self.site_id is None:
            raise SiteContextRequired(category=str(self.category))
        return Orchestrator(
            host=self.host,
            category=self.category,
            role=getattr(self, "role", None),
            executor=self._executor,
            tracker=self._tracker,
            site_id=self.site_id,
            command_timeout_s=self._command_timeout_s,
        )

    async def _run(self, steps: Sequence[Step]) -> None:
        orchestrator = self._orchestrator()
        self.state = RunState.RUNNING
        try:
            await orchestrator.run(steps, self.milestones(), self.identity())
        except ExecutionFailure as e:
            self.state = RunState.FAILED
            try:
                await self.mark_resource_as_failed(str(e))
            except Exception:
                logger.exception("Failure hook raised for %s on host %s", self.category, self.host.id)
            raise
        except Exception:
            self.state = RunState.FAILED
            raise
        self.state = RunState.COMPLETED


class PackageInstaller(PackageManager):
    role = Role.INSTALL

    async def install(self, steps: Sequence[Step]) -> None:
        await self._run(steps)


class PackageRemover(PackageManager):
    role = Role.REMOVE

    async def remove(self, steps: Sequence[Step]) -> None:
        await self._run(steps)
