"""Install actions - Copy build artifacts into an install root."""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..errors import InstallationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallationTarget:
    """A source artifact and the path it is installed to."""

    source: Path
    destination: Path


@dataclass
class InstallResult:
    """Result of an install operation."""

    files_installed: int = 0
    bytes_copied: int = 0


def install_file(target: InstallationTarget) -> int:
    """
    Copy one target, overwriting the destination if it exists.

    Creates the destination directory when missing.

    Returns:
        Number of bytes copied

    Raises:
        InstallationError: Source is missing or the destination is not writable
    """
    if not target.source.is_file():
        raise InstallationError(target.source, target.destination, "source artifact not found")

    try:
        target.destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(target.source, target.destination)
    except OSError as e:
        raise InstallationError(target.source, target.destination, str(e)) from e

    size = target.destination.stat().st_size
    logger.info(f"Installed {target.source.name} -> {target.destination}")
    return size


def install_files(targets: list[InstallationTarget]) -> InstallResult:
    """
    Install targets in order, stopping at the first failure.

    Args:
        targets: Ordered installation targets

    Returns:
        InstallResult with counts
    """
    result = InstallResult()
    for target in targets:
        result.bytes_copied += install_file(target)
        result.files_installed += 1
    return result
