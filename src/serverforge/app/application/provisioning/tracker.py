from __future__ import annotations

import logging
from typing import Any, AsyncContextManager, Awaitable, Callable
from uuid import UUID

from serverforge.app.application.common.progress import ProgressSink
from serverforge.app.domain.common.uow import UnitOfWork
from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.enums import PackageCategory, ProgressStatus, Role

logger = logging.getLogger(__name__)

UowFn = Callable[[UnitOfWork], Awaitable[Any]]


class ProgressTracker:
    """
    Writes milestone progress rows for an orchestrator run.

    Every write is its own short transaction so observers polling the
    table see the run advance while it is still executing.
    """

    def __init__(
            self,
            *,
            session_factory: Callable[[], AsyncContextManager[Any]],
            uow_factory: Callable[[Any], UnitOfWork],
            sink: ProgressSink | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._uow_factory = uow_factory
        self._sink = sink

    async def _with_uow(self, fn: UowFn) -> Any:
        async with self._session_factory() as session:
            uow = self._uow_factory(session)
            async with uow:
                return await fn(uow)

    async def _emit(self, event: ProgressEvent) -> ProgressEvent:
        if self._sink is not None:
            await self._sink.emit(event)
        return event

    async def open(
            self,
            *,
            host_id: UUID,
            category: PackageCategory,
            direction: Role,
            milestone: str,
            step_index: int,
            total_steps: int,
            detail: dict[str, Any] | None = None,
            site_id: UUID | None = None,
    ) -> ProgressEvent:
        event = await self._with_uow(
            lambda uow: uow.progress_repo.create_pending(
                host_id=host_id,
                category=category,
                direction=direction,
                milestone=milestone,
                step_index=step_index,
                total_steps=total_steps,
                detail=detail,
                site_id=site_id,
            )
        )
        return await self._emit(event)

    async def succeed(self, event: ProgressEvent) -> ProgressEvent:
        updated = await self._with_uow(
            lambda uow: uow.progress_repo.update_status(event_id=event.id, status=ProgressStatus.SUCCESS)
        )
        return await self._emit(updated)

    async def fail(self, event: ProgressEvent, *, error: str) -> ProgressEvent:
        logger.debug("Marking milestone %s failed for host %s", event.milestone, event.host_id)
        updated = await self._with_uow(
            lambda uow: uow.progress_repo.update_status(
                event_id=event.id,
                status=ProgressStatus.FAILED,
                error=error,
            )
        )
        return await self._emit(updated)
