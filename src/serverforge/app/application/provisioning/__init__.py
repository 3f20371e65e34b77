from .orchestrator import ExecutionContext, Orchestrator
from .roles import PackageInstaller, PackageManager, PackageRemover
from .tracker import ProgressTracker

__all__ = [
    "ExecutionContext",
    "Orchestrator",
    "PackageInstaller",
    "PackageManager",
    "PackageRemover",
    "ProgressTracker",
]
