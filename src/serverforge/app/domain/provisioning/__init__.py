from .entities import ProgressEvent
from .enums import PackageCategory, PackageScope, ProgressStatus, Role, RunState
from .milestones import MilestoneRegistry
from .steps import Command, Effect, Marker, Step, effect, steps, track
from .value_objects import IdentityPolicy, RemoteIdentity

__all__ = [
    "Command",
    "Effect",
    "IdentityPolicy",
    "Marker",
    "MilestoneRegistry",
    "PackageCategory",
    "PackageScope",
    "ProgressEvent",
    "ProgressStatus",
    "RemoteIdentity",
    "Role",
    "RunState",
    "Step",
    "effect",
    "steps",
    "track",
]
