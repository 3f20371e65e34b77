from .entities import Host, HostCredential
from .errors import CredentialNotFound
from .repositories import HostCredentialRepository

__all__ = [
    "CredentialNotFound",
    "Host",
    "HostCredential",
    "HostCredentialRepository",
]
