"""
Publisher - Installs the release artifact and public header.

The install root is passed in explicitly; the publisher never reads the
environment itself, so tests can point it at a temporary directory.
"""

import logging
from pathlib import Path

from .actions.install import InstallationTarget, InstallResult, install_files
from .constants import INSTALL_INCLUDE_DIR, INSTALL_LIB_DIR
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class Publisher:
    """
    Copies the shared library to <root>/lib and the header to <root>/include.

    Registered as the `publish` task with `release` as its prerequisite, so
    the copy only happens after a successful release build.
    """

    def __init__(self, install_root: Path | None, artifact: Path, header: Path):
        """
        Args:
            install_root: Base installation directory (None if unresolved)
            artifact: Versioned shared library produced by the release build
            header: Public header of the library
        """
        self.install_root = install_root
        self.artifact = artifact
        self.header = header

    def targets(self) -> list[InstallationTarget]:
        """Ordered installation targets for this publish."""
        if self.install_root is None:
            raise ConfigurationError("install.root", "install root not configured (is HOME set?)")

        return [
            InstallationTarget(self.artifact, self.install_root / INSTALL_LIB_DIR / self.artifact.name),
            InstallationTarget(self.header, self.install_root / INSTALL_INCLUDE_DIR / self.header.name),
        ]

    def publish(self) -> InstallResult:
        """Copy every target in order; the first failure stops the rest."""
        targets = self.targets()
        logger.info(f"Publishing {len(targets)} files to {self.install_root}")
        return install_files(targets)
