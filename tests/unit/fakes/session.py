from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncContextManager


@dataclass
class FakeSession:
    opened: int = 0


class FakeSessionContext(AsyncContextManager[FakeSession]):
    def __init__(self, session: FakeSession) -> None:
        self._session = session

    async def __aenter__(self) -> FakeSession:
        self._session.opened += 1
        return self._session

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None
