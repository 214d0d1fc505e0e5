"""Sequential runner - Executes a task's prerequisite chain one task at a time."""

import logging

from ..errors import CyclicDependencyError, TaskFailedError, UnknownTaskError
from ..workflow import TaskRegistry, TaskStatus
from .base import RunnerCallbacks, RunnerResult

logger = logging.getLogger(__name__)


class SequentialRunner:
    """
    Sequential task runner.

    Expands prerequisites depth-first, runs each task exactly once per run
    in dependency order, and stops at the first failure.
    Uses callbacks for progress reporting without coupling to UI.
    """

    def __init__(self, registry: TaskRegistry, dry_run: bool = False):
        """
        Initialize the runner.

        Args:
            registry: Tasks available to run
            dry_run: If True, report the plan without calling any action
        """
        self.registry = registry
        self.dry_run = dry_run

    def plan(self, name: str) -> list[str]:
        """
        Resolve the execution order for `name`.

        Prerequisites come before their dependents, in declared order, and
        each task appears once.

        Raises:
            UnknownTaskError: A task in the chain is not registered
            CyclicDependencyError: The chain depends on itself
        """
        order: list[str] = []
        state: dict[str, TaskStatus] = {}
        path: list[str] = []

        def visit(task_name: str, referenced_by: str | None) -> None:
            status = state.get(task_name)
            if status == TaskStatus.COMPLETED:
                return
            if status == TaskStatus.RUNNING:
                start = path.index(task_name)
                raise CyclicDependencyError(path[start:] + [task_name])

            if task_name not in self.registry:
                raise UnknownTaskError(task_name, referenced_by=referenced_by)
            task = self.registry.lookup(task_name)
            state[task_name] = TaskStatus.RUNNING
            path.append(task_name)
            for prerequisite in task.prerequisites:
                visit(prerequisite, task_name)
            path.pop()
            state[task_name] = TaskStatus.COMPLETED
            order.append(task_name)

        visit(name, None)
        return order

    def run(self, name: str, callbacks: RunnerCallbacks | None = None) -> RunnerResult:
        """
        Execute `name` after all its transitive prerequisites.

        The whole plan is resolved before anything runs, so an unknown task or
        a cycle executes zero actions.

        Args:
            name: Task to run
            callbacks: Optional callbacks for progress reporting

        Returns:
            RunnerResult with execution summary

        Raises:
            TaskFailedError: An action failed; later tasks did not run
        """
        cb = callbacks or RunnerCallbacks()
        order = self.plan(name)
        logger.info(f"Plan for {name}: {' -> '.join(order)}")

        if cb.on_run_start:
            cb.on_run_start(name, order)

        result = RunnerResult(success=True, task_name=name)
        statuses = {task_name: TaskStatus.PENDING for task_name in order}

        for task_name in order:
            task = self.registry.lookup(task_name)

            if cb.on_task_start:
                cb.on_task_start(task.name, task.description)

            statuses[task_name] = TaskStatus.RUNNING
            result.executed.append(task_name)

            try:
                self._execute_task(task)
            except Exception as e:
                statuses[task_name] = TaskStatus.FAILED
                result.success = False
                result.failed_task = task_name
                result.errors.append(f"Task {task_name}: {e}")
                # Everything not yet started is cancelled
                for pending, status in statuses.items():
                    if status == TaskStatus.PENDING:
                        statuses[pending] = TaskStatus.SKIPPED
                result.skipped = [n for n, s in statuses.items() if s == TaskStatus.SKIPPED]

                logger.error(f"Task {task_name} failed: {e}")
                if cb.on_task_complete:
                    cb.on_task_complete(task_name, False)
                if cb.on_run_complete:
                    cb.on_run_complete(result)

                if isinstance(e, TaskFailedError):
                    raise
                raise TaskFailedError(task_name, e) from e

            statuses[task_name] = TaskStatus.COMPLETED
            logger.debug(f"Task {task_name} completed")
            if cb.on_task_complete:
                cb.on_task_complete(task_name, True)

        if cb.on_run_complete:
            cb.on_run_complete(result)

        return result

    def _execute_task(self, task) -> None:
        """Call the task's action; aggregation tasks have none."""
        if self.dry_run or task.action is None:
            return

        if task.action() is False:
            raise TaskFailedError(task.name, "action reported failure")
