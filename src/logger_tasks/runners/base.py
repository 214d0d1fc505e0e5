"""Base runner classes and protocols."""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class RunnerResult:
    """Result of running a task and its prerequisites."""

    success: bool
    task_name: str
    # Task names in the order they ran
    executed: list[str] = field(default_factory=list)
    # Planned tasks cancelled by a failure, in plan order
    skipped: list[str] = field(default_factory=list)
    failed_task: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def tasks_skipped(self) -> int:
        return len(self.skipped)

    @property
    def tasks_completed(self) -> int:
        return len(self.executed) - (1 if self.failed_task else 0)


@dataclass
class RunnerCallbacks:
    """
    Callbacks for runner progress reporting.

    Allows CLI to display progress without coupling runner to Rich/UI.
    All callbacks are optional - if None, no callback is made.
    """

    # Run lifecycle
    on_run_start: Callable[[str, list[str]], None] | None = None  # task name, plan
    on_run_complete: Callable[[RunnerResult], None] | None = None

    # Task lifecycle
    on_task_start: Callable[[str, str], None] | None = None  # task name, description
    on_task_complete: Callable[[str, bool], None] | None = None  # task name, success
