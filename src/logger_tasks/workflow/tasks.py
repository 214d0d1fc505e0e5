"""Task definitions and the task registry."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import DuplicateTaskError, UnknownTaskError

# Zero-argument operation; raising or returning False means failure
Action = Callable[[], Any]


class TaskStatus(Enum):
    """Status of a task within one orchestrator run."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Task:
    """
    A named unit of work.

    Tasks are data - they describe what to do and what must happen first.
    The runner decides when to call the action. A task without an action is
    a pure aggregation of its prerequisites.
    """

    name: str
    action: Action | None = None
    # Names of tasks that must complete first, in order
    prerequisites: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""


class TaskRegistry:
    """
    Name -> Task mapping, built once at process start.

    Write-once per name, read-many. There is no removal.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def register(
        self,
        name: str,
        action: Action | None = None,
        prerequisites: list[str] | tuple[str, ...] = (),
        description: str = "",
    ) -> Task:
        """Declare a task. Raises DuplicateTaskError if the name is taken."""
        return self.add(Task(name=name, action=action, prerequisites=tuple(prerequisites), description=description))

    def add(self, task: Task) -> Task:
        """Register a prebuilt task."""
        if task.name in self._tasks:
            raise DuplicateTaskError(task.name)
        self._tasks[task.name] = task
        return task

    def lookup(self, name: str) -> Task:
        """Get a task by name. Raises UnknownTaskError if it is not registered."""
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(name) from None

    def names(self) -> list[str]:
        """Task names in declaration order."""
        return list(self._tasks)

    def validate(self) -> None:
        """Check that every referenced prerequisite is registered."""
        for task in self._tasks.values():
            for prerequisite in task.prerequisites:
                if prerequisite not in self._tasks:
                    raise UnknownTaskError(prerequisite, referenced_by=task.name)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())
