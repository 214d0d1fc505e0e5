"""
Tools module - Locate the external toolchain (Ceedling, Doxygen, gcov).
"""

import shutil
from pathlib import Path

from .config import AppConfig

# Ceedling vendored into the project, as `ceedling new --local` lays it out
VENDOR_BIN_DIR = Path("vendor") / "ceedling" / "bin"

# Needed by the Ceedling gcov plugin, never invoked directly
EXTRA_TOOLS = ["gcc", "gcov"]


def get_vendored_path(tool_name: str, project_root: Path | None) -> Path | None:
    """Path of the project's vendored copy of a tool, if there is one."""
    if project_root is None:
        return None
    vendored = project_root / VENDOR_BIN_DIR / tool_name
    return vendored if vendored.is_file() else None


def get_tool_path(tool_name: str, project_root: Path | None = None) -> Path | None:
    """
    Find a tool in standard locations.

    Search order:
    1. Project-local vendor bin (<project>/vendor/ceedling/bin)
    2. System PATH
    """
    if vendored := get_vendored_path(tool_name, project_root):
        return vendored

    sys_path = shutil.which(tool_name)
    if sys_path:
        return Path(sys_path)

    return None


def resolve_command(command: list[str], project_root: Path | None) -> list[str]:
    """
    Point a command line at the vendored program when the project has one.

    Otherwise the bare program name is kept and the OS searches PATH, so a
    tool runs from the same place `get_tool_path` reports it.
    """
    if not command:
        return list(command)
    if vendored := get_vendored_path(command[0], project_root):
        return [str(vendored), *command[1:]]
    return list(command)


def check_tools_status(config: AppConfig) -> dict[str, Path | None]:
    """
    Check status of all external tools.

    Returns:
        Dict mapping tool name to path (None if not found)
    """
    programs: list[str] = []
    for command in config.tools.commands().values():
        if command and command[0] not in programs:
            programs.append(command[0])
    programs.extend(tool for tool in EXTRA_TOOLS if tool not in programs)

    return {tool: get_tool_path(tool, config.project.root) for tool in programs}
