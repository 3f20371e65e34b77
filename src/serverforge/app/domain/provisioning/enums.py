from __future__ import annotations

from enum import StrEnum


class ProgressStatus(StrEnum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in {ProgressStatus.SUCCESS, ProgressStatus.FAILED}


class Role(StrEnum):
    INSTALL = "install"
    REMOVE = "remove"

    @property
    def action_label(self) -> str:
        return "removing" if self is Role.REMOVE else "installing"


class PackageScope(StrEnum):
    SERVER = "server"
    SITE = "site"


class PackageCategory(StrEnum):
    DATABASE = "database"
    CACHE = "cache"
    WEB_SERVER = "webserver"
    RUNTIME = "runtime"
    SCHEDULER = "scheduler"
    SUPERVISOR = "supervisor"
    FIREWALL = "firewall"
    MONITORING = "monitoring"
    SITE = "site"
    GIT_REPOSITORY = "git_repository"
    DEPLOYMENT = "deployment"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def scope(self) -> PackageScope:
        if self in _SITE_CATEGORIES:
            return PackageScope.SITE
        return PackageScope.SERVER


_CATEGORY_LABELS: dict[PackageCategory, str] = {
    PackageCategory.DATABASE: "Database Server",
    PackageCategory.CACHE: "Cache Server",
    PackageCategory.WEB_SERVER: "Web Server",
    PackageCategory.RUNTIME: "Language Runtime",
    PackageCategory.SCHEDULER: "Task Scheduler",
    PackageCategory.SUPERVISOR: "Process Supervisor",
    PackageCategory.FIREWALL: "Firewall",
    PackageCategory.MONITORING: "Monitoring",
    PackageCategory.SITE: "Site",
    PackageCategory.GIT_REPOSITORY: "Git Repository",
    PackageCategory.DEPLOYMENT: "Deployment",
}

_SITE_CATEGORIES = frozenset(
    {
        PackageCategory.SITE,
        PackageCategory.GIT_REPOSITORY,
        PackageCategory.DEPLOYMENT,
    }
)


class RunState(StrEnum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
