from __future__ import annotations

from serverforge.app.application.provisioning.dto import GetPackageProgressInputDTO, ProgressEventDTO
from serverforge.app.application.provisioning.mappers import to_progress_event_dto
from serverforge.app.domain.common.uow import UnitOfWork
from serverforge.app.domain.provisioning.entities import ProgressEvent
from serverforge.app.domain.provisioning.errors import NoProgressForPackage


def latest_run(events: list[ProgressEvent]) -> list[ProgressEvent]:
    """
    Slice the events of the most recent run out of a package's history.
    A run starts with the event whose ``step_index`` is 1.
    """
    start = 0
    for i, event in enumerate(events):
        if event.step_index == 1:
            start = i
    return sorted(events[start:], key=lambda e: e.step_index)


class GetPackageProgressUseCase:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, dto: GetPackageProgressInputDTO) -> list[ProgressEventDTO]:
        async with self._uow:
            events = await self._uow.progress_repo.list_for_package(
                host_id=dto.host_id,
                category=dto.category,
                direction=dto.direction,
            )

        if not events:
            raise NoProgressForPackage(host_id=str(dto.host_id), category=str(dto.category))

        return [to_progress_event_dto(e) for e in latest_run(events)]
