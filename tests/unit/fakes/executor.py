from __future__ import annotations

from dataclasses import dataclass

import anyio

from serverforge.app.application.provisioning.dto import CommandResult
from serverforge.app.domain.provisioning.value_objects import RemoteIdentity


@dataclass(frozen=True)
class ExecutorCall:
    command: str
    identity: RemoteIdentity
    timeout_s: float


class FakeRemoteExecutor:
    """
    Records every command. Commands not listed in ``results`` exit 0.
    """

    def __init__(
        self,
        *,
        results: dict[str, CommandResult] | None = None,
        raise_on: dict[str, Exception] | None = None,
        delay_s: float = 0.0,
    ) -> None:
        self._results = results or {}
        self._raise_on = raise_on or {}
        self._delay_s = delay_s
        self.calls: list[ExecutorCall] = []

    async def execute(self, command: str, *, identity: RemoteIdentity, timeout_s: float) -> CommandResult:
        self.calls.append(ExecutorCall(command=command, identity=identity, timeout_s=timeout_s))
        if command in self._raise_on:
            raise self._raise_on[command]
        if self._delay_s:
            await anyio.sleep(self._delay_s)
        return self._results.get(command, CommandResult(exit_code=0, stdout="ok"))

    @property
    def commands(self) -> list[str]:
        return [c.command for c in self.calls]
