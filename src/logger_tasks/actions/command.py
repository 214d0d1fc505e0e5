"""Command actions - Run external toolchain programs."""

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from ..errors import CommandError
from ..tools import resolve_command

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of a successful command."""

    command: list[str]
    returncode: int = 0
    duration: float = 0.0


def run_command(command: list[str], cwd: Path | None = None) -> CommandResult:
    """
    Run an external tool and wait for it to exit.

    The tool's own output goes straight to the terminal. A copy of the
    program vendored under `cwd` (vendor/ceedling/bin) is preferred over PATH.

    Args:
        command: Fixed command line (program and arguments)
        cwd: Working directory, usually the project root

    Returns:
        CommandResult for a zero exit status

    Raises:
        CommandError: The tool exited with a non-zero status
        FileNotFoundError: The program is not installed
    """
    command = resolve_command(command, cwd)
    logger.debug(f"Running {' '.join(command)} in {cwd or Path.cwd()}")
    start = time.monotonic()
    completed = subprocess.run(command, cwd=cwd, check=False)
    duration = time.monotonic() - start

    if completed.returncode != 0:
        raise CommandError(command, completed.returncode)

    result = CommandResult(command=command, returncode=completed.returncode, duration=duration)
    logger.info(f"{' '.join(command)} finished in {result.duration:.1f}s")
    return result


def command_action(command: list[str], cwd: Path | None = None):
    """Bind a command line into a zero-argument task action."""

    def action() -> CommandResult:
        return run_command(command, cwd)

    return action
