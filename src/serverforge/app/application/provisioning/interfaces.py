from __future__ import annotations

from typing import Protocol

from serverforge.app.application.provisioning.dto import CommandResult
from serverforge.app.domain.provisioning.value_objects import RemoteIdentity


class RemoteExecutor(Protocol):
    async def execute(self, command: str, *, identity: RemoteIdentity, timeout_s: float) -> CommandResult:
        """
        Run one command on the target host as ``identity``.
        Raises ``TimeoutError`` when ``timeout_s`` elapses.
        """
        ...
