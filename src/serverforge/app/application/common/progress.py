# app/application/common/progress.py
from __future__ import annotations

from typing import Protocol

from serverforge.app.domain.provisioning.entities import ProgressEvent


class ProgressSink(Protocol):
    """Receives every progress event after it has been committed."""

    async def emit(self, event: ProgressEvent) -> None: ...
