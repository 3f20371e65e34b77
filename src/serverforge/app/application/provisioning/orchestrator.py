from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence
from uuid import UUID

import anyio

from serverforge.app.application.provisioning.interfaces import RemoteExecutor
from serverforge.app.application.provisioning.tracker import ProgressTracker
from serverforge.app.domain.common import utcnow
from serverforge.app.domain.hosts.entities import Host
from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, Role
from serverforge.app.domain.provisioning.errors import (
    ClosureFailed,
    CommandFailed,
    ExecutionFailure,
    TimeoutExceeded,
    UnknownRole,
    UnsupportedStep,
)
from serverforge.app.domain.provisioning.milestones import MilestoneRegistry
from serverforge.app.domain.provisioning.steps import Command, Effect, Marker, Step
from serverforge.app.domain.provisioning.value_objects import RemoteIdentity

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT_S = 300.0


@dataclass(slots=True)
class ExecutionContext:
    """Per-run bookkeeping; never shared between two calls to ``run``."""
    identity: RemoteIdentity
    step_counter: int = 0
    current_event: ProgressEvent | None = None
    events: list[ProgressEvent] = field(default_factory=list)

    def remember(self, event: ProgressEvent) -> ProgressEvent:
        for i, known in enumerate(self.events):
            if known.id == event.id:
                self.events[i] = event
                break
        else:
            self.events.append(event)
        if self.current_event is not None and self.current_event.id == event.id:
            self.current_event = event
        return event


def describe_failure(failure: ExecutionFailure) -> str:
    if isinstance(failure, CommandFailed):
        text = f"Failed to execute command: {failure.command}"
        if failure.exit_code is not None:
            text += f"\nExit code: {failure.exit_code}"
        if failure.stderr:
            text += f"\nError Output: {failure.stderr}"
        return text
    return str(failure)


class Orchestrator:
    """
    Runs an ordered step sequence against one host.

    Markers bucket the commands that follow them into a persisted progress
    event; the first failing command or effect stops the run and surfaces as
    a single ``ExecutionFailure``.
    """

    def __init__(
            self,
            *,
            host: Host,
            category: PackageCategory,
            role: Role,
            executor: RemoteExecutor,
            tracker: ProgressTracker,
            site_id: UUID | None = None,
            command_timeout_s: float = DEFAULT_COMMAND_TIMEOUT_S,
    ) -> None:
        if not isinstance(role, Role):
            raise UnknownRole(role)
        if command_timeout_s <= 0:
            raise ValueError("command_timeout_s must be positive")
        self.host = host
        self.category = category
        self.role = role
        self.site_id = site_id
        self._executor = executor
        self._tracker = tracker
        self._timeout_s = command_timeout_s

    async def run(self, steps: Sequence[Step], registry: MilestoneRegistry, identity: RemoteIdentity) -> None:
        ctx = ExecutionContext(identity=identity)
        try:
            for position, step in enumerate(steps):
                await self._dispatch(ctx, position, step, registry)
        except ExecutionFailure as failure:
            await self._handle_failure(ctx, failure)
            raise

        if ctx.current_event is not None:
            ctx.remember(await self._tracker.succeed(ctx.current_event))

    async def _dispatch(self, ctx: ExecutionContext, position: int, step: Step, registry: MilestoneRegistry) -> None:
        if isinstance(step, Marker):
            await self._open_milestone(ctx, step.key, registry)
        elif isinstance(step, Command):
            await self._send(ctx, step.text)
        elif isinstance(step, Effect):
            output = await self._call_effect(position, step)
            if isinstance(output, Command):
                output = output.text
            elif isinstance(output, bytes):
                output = output.decode("utf-8", errors="replace")
            if isinstance(output, str):
                logger.debug("Found effect-based command at position %d: %s", position, output)
                await self._send(ctx, output)
            else:
                logger.debug("Skipping non-command effect output at position %d (%s)",
                             position, type(output).__name__)
        else:
            raise UnsupportedStep(position=position, step=step)

    async def _open_milestone(self, ctx: ExecutionContext, key: str, registry: MilestoneRegistry) -> None:
        if ctx.current_event is not None:
            ctx.remember(await self._tracker.succeed(ctx.current_event))

        if key in registry:
            label = registry.label(key)
        else:
            logger.warning("Milestone %r is not declared for %s; using the key as label", key, self.category)
            label = key

        ctx.step_counter += 1
        total = registry.count()
        logger.info(
            "%s milestone: %s (step %d/%d) for %s on host %s",
            self.role.action_label.capitalize(),
            label,
            ctx.step_counter,
            total,
            self.category,
            self.host.id,
        )

        event = await self._tracker.open(
            host_id=self.host.id,
            site_id=self.site_id,
            category=self.category,
            direction=self.role,
            milestone=key,
            step_index=ctx.step_counter,
            total_steps=total,
            detail=self._detail(label),
        )
        ctx.current_event = event
        ctx.remember(event)

    def _detail(self, label: str) -> dict[str, Any]:
        detail: dict[str, Any] = {
            "label": label,
            "action": self.role.action_label,
            "host_name": self.host.name,
            "host_ip": self.host.public_ip,
            "timestamp": utcnow().isoformat(),
        }
        if self.site_id is not None:
            detail["site_id"] = str(self.site_id)
        return detail

    async def _call_effect(self, position: int, step: Effect) -> Any:
        try:
            output = step.thunk()
            if inspect.isawaitable(output):
                output = await output
        except Exception as e:
            logger.warning("Effect step raised at position %d: %s", position, e)
            raise ClosureFailed(position=position, reason=str(e)) from e
        return output

    async def _send(self, ctx: ExecutionContext, command: str) -> None:
        user = ctx.identity.user
        logger.debug("SSH command as %s@%s: %s", user, self.host.public_ip, command)
        try:
            with anyio.fail_after(self._timeout_s):
                result = await self._executor.execute(command, identity=ctx.identity, timeout_s=self._timeout_s)
        except TimeoutError as e:
            logger.error("SSH command timed out after %ss on host %s as %s: %s",
                         self._timeout_s, self.host.id, user, command)
            raise TimeoutExceeded(command=command, timeout_s=self._timeout_s) from e
        except Exception as e:
            logger.error("SSH command could not run on host %s as %s: %s", self.host.id, user, e)
            raise CommandFailed(command=command, stderr=str(e)) from e

        if not result.ok:
            stderr = result.stderr.strip()
            logger.error("Failed to execute command: %s\nError Output: %s", command, stderr,
                         extra={"host_id": str(self.host.id), "user": user})
            raise CommandFailed(command=command, stderr=stderr, exit_code=result.exit_code)

    async def _handle_failure(self, ctx: ExecutionContext, failure: ExecutionFailure) -> None:
        message = describe_failure(failure)
        failed = ctx.current_event
        if failed is not None:
            ctx.remember(await self._tracker.fail(failed, error=message))

        # Sequential runs close every earlier milestone on the next marker, so
        # anything still pending here completed before the failing step.
        for event in list(ctx.events):
            if failed is not None and event.id == failed.id:
                continue
            if event.is_pending:
                ctx.remember(await self._tracker.succeed(event))

        logger.error(
            "%s %s on host %s failed: %s",
            self.role.action_label.capitalize(),
            self.category,
            self.host.id,
            message,
        )
