"""Shared pytest fixtures for logger-tasks tests."""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from logger_tasks.config import AppConfig, InstallConfig, ProjectConfig


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def tmp_project(tmp_path):
    """Create a temporary library project with release output on disk."""
    project = tmp_path / "project"
    (project / "build" / "release").mkdir(parents=True)
    (project / "src").mkdir()

    (project / "build" / "release" / "liblogger.so.0.0.1").write_bytes(b"\x7fELF fake shared object")
    (project / "src" / "logger.h").write_text("#ifndef LOGGER_H\n#define LOGGER_H\n#endif\n")

    return project


@pytest.fixture
def install_root(tmp_path):
    """Install root standing in for $HOME/usr."""
    return tmp_path / "home"


@pytest.fixture
def app_config(tmp_project, install_root):
    """AppConfig pointing at the temporary project and install root."""
    return AppConfig(
        project=ProjectConfig(root=tmp_project),
        install=InstallConfig(root=install_root),
    )


@pytest.fixture
def sample_config(tmp_path, tmp_project, install_root):
    """Create a sample config file for the temporary project."""
    config_file = tmp_path / "lgt.yaml"
    config_file.write_text(
        f"""
project:
  root: "{tmp_project}"
  library: logger
  version: "0.0.1"

install:
  root: "{install_root}"

logging:
  level: WARNING
"""
    )
    return config_file


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for tests that call external tools."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


@pytest.fixture(name="_mock_shutil_which")
def mock_shutil_which():
    """Mock shutil.which to simulate available tools."""

    def which_side_effect(tool):
        available = {"ceedling", "gcc", "gcov"}
        return f"/usr/bin/{tool}" if tool in available else None

    with patch("shutil.which", side_effect=which_side_effect) as mock:
        yield mock
