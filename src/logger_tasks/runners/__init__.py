"""
Runners layer - Execution engines for task graphs.

Runners resolve a task's prerequisites and execute the chain,
reporting progress through callbacks.
"""

from .base import RunnerCallbacks, RunnerResult
from .sequential import SequentialRunner

__all__ = [
    "RunnerCallbacks",
    "RunnerResult",
    "SequentialRunner",
]
