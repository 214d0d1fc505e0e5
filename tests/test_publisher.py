"""Tests for the publisher and the publish task."""

from unittest.mock import patch

import pytest

from logger_tasks.errors import ConfigurationError, InstallationError, TaskFailedError
from logger_tasks.publisher import Publisher
from logger_tasks.runners.sequential import SequentialRunner
from logger_tasks.workflow import TaskRegistry


@pytest.fixture
def publisher(tmp_project, install_root):
    return Publisher(
        install_root=install_root,
        artifact=tmp_project / "build" / "release" / "liblogger.so.0.0.1",
        header=tmp_project / "src" / "logger.h",
    )


def publish_registry(publisher: Publisher, release_action) -> TaskRegistry:
    registry = TaskRegistry()
    registry.register("release", release_action)
    registry.register("publish", publisher.publish, ["release"])
    return registry


class TestTargets:
    """Tests for installation target layout."""

    def test_targets_layout(self, publisher, tmp_project, install_root):
        """Test the library goes to lib/ and the header to include/, in that order."""
        targets = publisher.targets()

        assert [t.source for t in targets] == [
            tmp_project / "build" / "release" / "liblogger.so.0.0.1",
            tmp_project / "src" / "logger.h",
        ]
        assert [t.destination for t in targets] == [
            install_root / "lib" / "liblogger.so.0.0.1",
            install_root / "include" / "logger.h",
        ]

    def test_targets_without_root(self, tmp_project):
        """Test a missing install root is a configuration error."""
        publisher = Publisher(install_root=None, artifact=tmp_project / "a.so", header=tmp_project / "a.h")

        with pytest.raises(ConfigurationError, match="install.root"):
            publisher.targets()


class TestPublish:
    """Tests for Publisher.publish."""

    def test_publish_copies_files(self, publisher, tmp_project):
        """Test files land under the install root with identical content."""
        root = publisher.install_root

        result = publisher.publish()

        assert result.files_installed == 2
        lib = root / "lib" / "liblogger.so.0.0.1"
        header = root / "include" / "logger.h"
        assert lib.read_bytes() == (tmp_project / "build" / "release" / "liblogger.so.0.0.1").read_bytes()
        assert header.read_bytes() == (tmp_project / "src" / "logger.h").read_bytes()

    def test_publish_overwrites(self, publisher):
        """Test an existing installed file is replaced."""
        stale = publisher.install_root / "include" / "logger.h"
        stale.parent.mkdir(parents=True)
        stale.write_text("old header")

        publisher.publish()

        assert stale.read_text() == publisher.header.read_text()

    def test_missing_artifact_stops(self, publisher):
        """Test a missing artifact names it and copies nothing after it."""
        publisher.artifact.unlink()

        with pytest.raises(InstallationError) as exc_info:
            publisher.publish()

        assert exc_info.value.source == publisher.artifact
        assert "liblogger.so.0.0.1" in str(exc_info.value)
        assert not (publisher.install_root / "include" / "logger.h").exists()

    def test_unwritable_destination(self, publisher):
        """Test a copy error is reported with the source/destination pair."""
        with patch("shutil.copy2", side_effect=PermissionError("read-only file system")):
            with pytest.raises(InstallationError) as exc_info:
                publisher.publish()

        assert exc_info.value.destination == publisher.install_root / "lib" / "liblogger.so.0.0.1"
        assert "read-only" in exc_info.value.reason


class TestPublishTask:
    """Tests for publish as a task after release."""

    def test_release_success_then_install(self, publisher):
        """Test the scenario: release succeeds, files appear under the install root."""
        calls = []
        registry = publish_registry(publisher, lambda: calls.append("release"))

        result = SequentialRunner(registry).run("publish")

        assert calls == ["release"]
        assert result.executed == ["release", "publish"]
        assert (publisher.install_root / "lib" / "liblogger.so.0.0.1").exists()
        assert (publisher.install_root / "include" / "logger.h").exists()

    def test_release_failure_copies_nothing(self, publisher):
        """Test a failing release performs no filesystem copy."""

        def failing_release():
            raise RuntimeError("link error")

        registry = publish_registry(publisher, failing_release)

        with patch("shutil.copy2") as mock_copy:
            with pytest.raises(TaskFailedError) as exc_info:
                SequentialRunner(registry).run("publish")

        assert exc_info.value.task == "release"
        mock_copy.assert_not_called()
        assert not publisher.install_root.exists()

    def test_missing_artifact_after_release(self, publisher):
        """Test release succeeding without producing the artifact fails the publish task."""
        publisher.artifact.unlink()
        registry = publish_registry(publisher, lambda: None)

        with patch("shutil.copy2") as mock_copy:
            with pytest.raises(TaskFailedError) as exc_info:
                SequentialRunner(registry).run("publish")

        assert exc_info.value.task == "publish"
        assert isinstance(exc_info.value.cause, InstallationError)
        assert exc_info.value.cause.source == publisher.artifact
        mock_copy.assert_not_called()
