from types import TracebackType
from typing import Protocol, Optional

from serverforge.app.domain.hosts.repositories import HostCredentialRepository
from serverforge.app.domain.provisioning.repositories import ProgressEventRepository


class UnitOfWork(Protocol):
    progress_repo: ProgressEventRepository
    credential_repo: HostCredentialRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork": ...

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None: ...
