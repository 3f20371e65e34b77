from __future__ import annotations


class ExecutionFailure(Exception):
    """Raised by the orchestrator when a run stops before its last step."""


class CommandFailed(ExecutionFailure):
    def __init__(self, *, command: str, stderr: str = "", exit_code: int | None = None) -> None:
        detail = f"{command} - {stderr}" if stderr else command
        super().__init__(f"Command failed: {detail}")
        self.command = command
        self.stderr = stderr
        self.exit_code = exit_code


class TimeoutExceeded(ExecutionFailure):
    def __init__(self, *, command: str, timeout_s: float) -> None:
        super().__init__(f"Command timed out after {timeout_s:g} seconds: {command}")
        self.command = command
        self.timeout_s = timeout_s


class ClosureFailed(ExecutionFailure):
    def __init__(self, *, position: int, reason: str) -> None:
        super().__init__(f"Effect step at position {position} raised: {reason}")
        self.position = position
        self.reason = reason


class UnsupportedStep(ExecutionFailure):
    def __init__(self, *, position: int, step: object) -> None:
        super().__init__(f"Unsupported step at position {position}: {type(step).__name__}")
        self.position = position
        self.step = step


class SiteContextRequired(Exception):
    def __init__(self, *, category: str) -> None:
        super().__init__(f"Site context required for site package: {category}")
        self.category = category


class UnknownRole(Exception):
    def __init__(self, role: object) -> None:
        super().__init__(f"Unknown package role: {role!r}")
        self.role = role


class UnknownMilestone(KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Milestone not declared in registry: {self.key}"


class NoProgressForPackage(Exception):
    def __init__(self, *, host_id: str, category: str) -> None:
        super().__init__(f"No progress recorded for {category} on host {host_id}")
        self.host_id = host_id
        self.category = category
