"""Tests for the build task graph."""

from unittest.mock import MagicMock, call

import pytest

from logger_tasks.errors import TaskFailedError
from logger_tasks.runners.sequential import SequentialRunner
from logger_tasks.workflow import create_build_registry


@pytest.fixture
def registry(app_config):
    return create_build_registry(app_config)


class TestBuildRegistry:
    """Tests for create_build_registry."""

    def test_declared_tasks(self, registry):
        """Test all project tasks are declared."""
        assert registry.names() == [
            "test:all",
            "release",
            "gcov:all",
            "utils:gcov",
            "clobber",
            "default",
            "coverage",
            "doxygen",
            "publish",
        ]

    def test_prerequisites(self, registry):
        """Test the aggregation and publish prerequisites."""
        assert registry.lookup("default").prerequisites == ("test:all", "release")
        assert registry.lookup("coverage").prerequisites == ("gcov:all", "utils:gcov")
        assert registry.lookup("publish").prerequisites == ("release",)
        assert registry.lookup("doxygen").prerequisites == ()

    def test_aggregations_have_no_action(self, registry):
        """Test default and coverage are pure aggregations."""
        assert registry.lookup("default").action is None
        assert registry.lookup("coverage").action is None

    def test_every_task_described(self, registry):
        """Test every task has a description for lgt list."""
        assert all(task.description for task in registry)

    @pytest.mark.parametrize(
        ("task", "expected"),
        [
            ("default", ["test:all", "release", "default"]),
            ("coverage", ["gcov:all", "utils:gcov", "coverage"]),
            ("publish", ["release", "publish"]),
            ("doxygen", ["doxygen"]),
        ],
    )
    def test_plans(self, registry, task, expected):
        """Test each entry point's execution order."""
        assert SequentialRunner(registry).plan(task) == expected


class TestBuildRun:
    """Tests running the build graph with the toolchain mocked."""

    def test_default_runs_tests_then_release(self, registry, app_config, mock_subprocess):
        """Test default invokes Ceedling for tests, then release, in the project root."""
        SequentialRunner(registry).run("default")

        root = app_config.project.root
        assert mock_subprocess.call_args_list == [
            call(["ceedling", "test:all"], cwd=root, check=False),
            call(["ceedling", "release"], cwd=root, check=False),
        ]

    def test_failing_tests_skip_release(self, registry, mock_subprocess):
        """Test a failing test run means release is never built."""
        mock_subprocess.return_value = MagicMock(returncode=1)

        with pytest.raises(TaskFailedError) as exc_info:
            SequentialRunner(registry).run("default")

        assert exc_info.value.task == "test:all"
        assert mock_subprocess.call_count == 1

    def test_coverage_order(self, registry, mock_subprocess):
        """Test coverage instruments before summarizing."""
        SequentialRunner(registry).run("coverage")

        assert [c.args[0] for c in mock_subprocess.call_args_list] == [
            ["ceedling", "gcov:all"],
            ["ceedling", "utils:gcov"],
        ]

    def test_doxygen_command(self, registry, mock_subprocess):
        """Test doxygen runs with its fixed configuration file."""
        SequentialRunner(registry).run("doxygen")

        assert mock_subprocess.call_args.args[0] == ["doxygen", ".doxygen"]

    def test_publish_installs(self, registry, app_config, install_root, mock_subprocess):
        """Test publish builds the release, then installs library and header."""
        SequentialRunner(registry).run("publish")

        assert mock_subprocess.call_args.args[0] == ["ceedling", "release"]
        assert (install_root / "lib" / "liblogger.so.0.0.1").read_bytes() == app_config.project.artifact_path.read_bytes()
        assert (install_root / "include" / "logger.h").read_bytes() == app_config.project.header_path.read_bytes()
