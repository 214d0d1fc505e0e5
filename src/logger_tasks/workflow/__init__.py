"""
Workflow layer - Task and task graph definitions.

Task graphs are DATA STRUCTURES that define what to do.
They do NOT execute anything - that's the runner's job.
"""

from .build import create_build_registry
from .tasks import Action, Task, TaskRegistry, TaskStatus

__all__ = [
    "Action",
    "Task",
    "TaskRegistry",
    "TaskStatus",
    "create_build_registry",
]
