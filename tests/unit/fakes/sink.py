from __future__ import annotations

from serverforge.app.domain.provisioning.entities import ProgressEvent


class FakeProgressSink:
    def __init__(self, *, raise_exc: Exception | None = None) -> None:
        self.events: list[ProgressEvent] = []
        self._exc = raise_exc

    async def emit(self, event: ProgressEvent) -> None:
        if self._exc:
            raise self._exc
        self.events.append(event)
