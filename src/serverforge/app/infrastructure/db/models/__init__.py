from serverforge.app.infrastructure.db.models.host import HostCredentialModel
from serverforge.app.infrastructure.db.models.progress import ProgressEventModel

__all__ = ["HostCredentialModel", "ProgressEventModel"]
