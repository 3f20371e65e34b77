from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from typing import Any, AsyncContextManager, Callable, Iterator

import anyio

from serverforge.app.application.provisioning.dto import CommandResult
from serverforge.app.domain.common.uow import UnitOfWork
from serverforge.app.domain.hosts.entities import Host, HostCredential
from serverforge.app.domain.hosts.errors import CredentialNotFound
from serverforge.app.domain.provisioning.value_objects import RemoteIdentity

logger = logging.getLogger(__name__)


def build_ssh_argv(
        *,
        ssh_binary: str,
        host: Host,
        user: str,
        key_path: str,
        command: str,
        connect_timeout_s: int,
        server_alive_interval_s: int,
        server_alive_count_max: int,
) -> list[str]:
    return [
        ssh_binary,
        "-i", key_path,
        "-p", str(host.ssh_port),
        "-o", "StrictHostKeyChecking=no",
        "-o", "UserKnownHostsFile=/dev/null",
        "-o", "BatchMode=yes",
        "-o", f"ConnectTimeout={connect_timeout_s}",
        "-o", f"ServerAliveInterval={server_alive_interval_s}",
        "-o", f"ServerAliveCountMax={server_alive_count_max}",
        "-q",
        f"{user}@{host.public_ip}",
        command,
    ]


@contextmanager
def temporary_key_file(credential: HostCredential) -> Iterator[str]:
    """Write the private key to a 0600 file that is removed on exit."""
    fd, path = tempfile.mkstemp(prefix=f"ssh_key_{credential.host_id}_{credential.user}_")
    try:
        with os.fdopen(fd, "w") as fh:
            fh.write(credential.private_key)
            if not credential.private_key.endswith("\n"):
                fh.write("\n")
        os.chmod(path, 0o600)
        yield path
    finally:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass


class OpenSshRemoteExecutor:
    """
    Runs commands through the local OpenSSH client.

    The private key for ``(host, user)`` is loaded from the credential
    store and exists on disk only for the duration of one command.
    """

    def __init__(
            self,
            *,
            host: Host,
            session_factory: Callable[[], AsyncContextManager[Any]],
            uow_factory: Callable[[Any], UnitOfWork],
            ssh_binary: str = "ssh",
            connect_timeout_s: int = 60,
            server_alive_interval_s: int = 15,
            server_alive_count_max: int = 3,
    ) -> None:
        self.host = host
        self._session_factory = session_factory
        self._uow_factory = uow_factory
        self._ssh_binary = ssh_binary
        self._connect_timeout_s = connect_timeout_s
        self._server_alive_interval_s = server_alive_interval_s
        self._server_alive_count_max = server_alive_count_max

    async def _credential(self, user: str) -> HostCredential:
        async with self._session_factory() as session:
            uow = self._uow_factory(session)
            async with uow:
                credential = await uow.credential_repo.get_for_user(host_id=self.host.id, user=user)
        if credential is None:
            raise CredentialNotFound(host_id=str(self.host.id), user=user)
        return credential

    async def execute(self, command: str, *, identity: RemoteIdentity, timeout_s: float) -> CommandResult:
        credential = await self._credential(identity.user)

        with temporary_key_file(credential) as key_path:
            argv = build_ssh_argv(
                ssh_binary=self._ssh_binary,
                host=self.host,
                user=identity.user,
                key_path=key_path,
                command=command,
                connect_timeout_s=self._connect_timeout_s,
                server_alive_interval_s=self._server_alive_interval_s,
                server_alive_count_max=self._server_alive_count_max,
            )
            logger.debug("Running %s on %s as %s", command, self.host.public_ip, identity.user)
            with anyio.fail_after(timeout_s):
                completed = await anyio.run_process(argv, check=False)

        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
        )
