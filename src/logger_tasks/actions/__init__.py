"""
Actions layer - Plain Python functions behind task actions.

All functions are CLI-agnostic and return typed results or raise.
They can be called directly from Python code without going through the CLI.
"""

from .command import CommandResult, command_action, run_command
from .install import InstallationTarget, InstallResult, install_file, install_files

__all__ = [
    "run_command",
    "command_action",
    "CommandResult",
    "InstallationTarget",
    "install_file",
    "install_files",
    "InstallResult",
]
