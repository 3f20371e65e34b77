from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RemoteIdentity:
    user: str
    elevated: bool = False

    def __post_init__(self) -> None:
        if not self.user or not self.user.strip():
            raise ValueError("remote identity needs a user name")


@dataclass(frozen=True, slots=True)
class IdentityPolicy:
    server_user: str = "root"
    site_user: str = "forge"
