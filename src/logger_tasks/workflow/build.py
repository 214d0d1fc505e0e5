"""
Build task graph factory - Declares the liblogger build tasks.

Mirrors the project's rakefile:
1. default  = test:all, then release
2. coverage = gcov:all, then utils:gcov
3. publish  = release, then install library and header
4. doxygen  = generate API documentation
"""

from ..actions import command_action
from ..config import AppConfig
from ..constants import (
    CLOBBER_TASK,
    COVERAGE_TASK,
    DEFAULT_TASK,
    DOXYGEN_TASK,
    GCOV_ALL_TASK,
    GCOV_REPORT_TASK,
    PUBLISH_TASK,
    RELEASE_TASK,
    TEST_ALL_TASK,
)
from ..publisher import Publisher
from .tasks import TaskRegistry


def create_build_registry(config: AppConfig, publisher: Publisher | None = None) -> TaskRegistry:
    """
    Create the task registry for the library project.

    This is a FACTORY function that declares the task graph.
    Nothing runs until a runner executes one of the tasks.

    Args:
        config: Application configuration (project layout, tool commands, install root)
        publisher: Publisher override; built from config when omitted

    Returns:
        TaskRegistry ready for execution by a runner
    """
    root = config.project.root
    tools = config.tools
    if publisher is None:
        publisher = Publisher(
            install_root=config.install.root,
            artifact=config.project.artifact_path,
            header=config.project.header_path,
        )

    registry = TaskRegistry()

    # Toolchain tasks
    registry.register(TEST_ALL_TASK, command_action(tools.test, root), description="Run all unit tests")
    registry.register(RELEASE_TASK, command_action(tools.release, root), description="Build the release library")
    registry.register(
        GCOV_ALL_TASK,
        command_action(tools.gcov, root),
        description="Instrument and run all tests for coverage",
    )
    registry.register(
        GCOV_REPORT_TASK,
        command_action(tools.gcov_report, root),
        description="Summarize the coverage report",
    )
    registry.register(CLOBBER_TASK, command_action(tools.clobber, root), description="Remove all build output")

    # Aggregation tasks
    registry.register(
        DEFAULT_TASK,
        prerequisites=[TEST_ALL_TASK, RELEASE_TASK],
        description="Run all tests, then build the release",
    )
    registry.register(
        COVERAGE_TASK,
        prerequisites=[GCOV_ALL_TASK, GCOV_REPORT_TASK],
        description="Collect coverage, then summarize it",
    )

    registry.register(DOXYGEN_TASK, command_action(tools.doxygen, root), description="Generate API documentation")

    registry.register(
        PUBLISH_TASK,
        publisher.publish,
        prerequisites=[RELEASE_TASK],
        description="Build the release, then install library and header",
    )

    registry.validate()
    return registry
