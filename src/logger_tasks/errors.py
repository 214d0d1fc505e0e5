"""Error taxonomy for task orchestration.

Every error is fail-stop: the orchestrator never retries and never continues
past one. Each error carries enough identity (task name, file path, setting)
to be diagnosed from its message alone.
"""

from pathlib import Path


class OrchestrationError(Exception):
    """Base class for all orchestration errors."""


class UnknownTaskError(OrchestrationError):
    """A requested or prerequisite task is not registered."""

    def __init__(self, name: str, referenced_by: str | None = None):
        self.name = name
        self.referenced_by = referenced_by
        if referenced_by:
            message = f"Unknown task '{name}' (prerequisite of '{referenced_by}')"
        else:
            message = f"Unknown task '{name}'"
        super().__init__(message)


class DuplicateTaskError(OrchestrationError):
    """A task name was registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Task '{name}' is already registered")


class CyclicDependencyError(OrchestrationError):
    """The prerequisite graph reachable from a task contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic dependency: {' -> '.join(self.cycle)}")


class TaskFailedError(OrchestrationError):
    """A task's action failed. `cause` is the underlying error."""

    def __init__(self, task: str, cause: BaseException | str):
        self.task = task
        self.cause = cause
        super().__init__(f"Task '{task}' failed: {cause}")


class InstallationError(OrchestrationError):
    """Copying one installation target failed."""

    def __init__(self, source: Path, destination: Path, reason: str):
        self.source = source
        self.destination = destination
        self.reason = reason
        super().__init__(f"Cannot install {source} -> {destination}: {reason}")


class ConfigurationError(OrchestrationError):
    """A required configuration value is missing."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{setting}: {message}")


class CommandError(OrchestrationError):
    """An external tool exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int):
        self.command = list(command)
        self.returncode = returncode
        super().__init__(f"Command '{' '.join(self.command)}' exited with status {returncode}")
