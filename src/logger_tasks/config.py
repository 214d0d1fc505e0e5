"""
Configuration management with YAML loading and environment variable support.
"""

import os
import shlex
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from .constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_BUILD_DIR,
    DEFAULT_CLOBBER_COMMAND,
    DEFAULT_DOXYGEN_COMMAND,
    DEFAULT_GCOV_COMMAND,
    DEFAULT_GCOV_REPORT_COMMAND,
    DEFAULT_HEADER,
    DEFAULT_LIBRARY,
    DEFAULT_RELEASE_COMMAND,
    DEFAULT_TEST_COMMAND,
    DEFAULT_VERSION,
    HOME_INSTALL_SUFFIX,
)
from .errors import ConfigurationError


def _env_path(env_var: str, default: Path | None = None) -> Path | None:
    """Get path from environment variable or return default."""
    if value := os.environ.get(env_var):
        return Path(value)
    return default


def _default_install_root() -> Path | None:
    """Resolve the install root: LGT_INSTALL_ROOT, else $HOME/usr, else None."""
    if explicit := _env_path("LGT_INSTALL_ROOT"):
        return explicit
    # Path.home() falls back to the passwd database; an unset HOME must stay unset
    if home := os.environ.get("HOME"):
        return Path(home) / HOME_INSTALL_SUFFIX
    return None


@dataclass
class ProjectConfig:
    """Layout of the native library project."""

    root: Path = field(default_factory=lambda: _env_path("LGT_PROJECT_ROOT", Path.cwd()))
    library: str = DEFAULT_LIBRARY
    version: str = DEFAULT_VERSION
    build_dir: Path = Path(DEFAULT_BUILD_DIR)
    header: Path = Path(DEFAULT_HEADER)

    @property
    def artifact_name(self) -> str:
        """Versioned shared library file name, e.g. liblogger.so.0.0.1."""
        return f"lib{self.library}.so.{self.version}"

    @property
    def artifact_path(self) -> Path:
        return self.root / self.build_dir / self.artifact_name

    @property
    def header_path(self) -> Path:
        return self.root / self.header


@dataclass
class ToolsConfig:
    """Fixed command lines for the external toolchain."""

    test: list[str] = field(default_factory=lambda: list(DEFAULT_TEST_COMMAND))
    release: list[str] = field(default_factory=lambda: list(DEFAULT_RELEASE_COMMAND))
    gcov: list[str] = field(default_factory=lambda: list(DEFAULT_GCOV_COMMAND))
    gcov_report: list[str] = field(default_factory=lambda: list(DEFAULT_GCOV_REPORT_COMMAND))
    clobber: list[str] = field(default_factory=lambda: list(DEFAULT_CLOBBER_COMMAND))
    doxygen: list[str] = field(default_factory=lambda: list(DEFAULT_DOXYGEN_COMMAND))

    def commands(self) -> dict[str, list[str]]:
        return dict(vars(self))


@dataclass
class InstallConfig:
    """Where `publish` installs the library and header."""

    root: Path | None = field(default_factory=_default_install_root)

    def require_root(self) -> Path:
        """Return the install root or raise ConfigurationError if it is unset."""
        if self.root is None:
            raise ConfigurationError(
                "install.root",
                "install root not configured (set HOME, LGT_INSTALL_ROOT or install.root in the config file)",
            )
        return self.root


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console_logging: bool = True


_PATH_KEYS = {"root", "build_dir", "header"}
_SECTIONS = ["project", "tools", "install", "logging"]


@dataclass
class AppConfig:
    project: ProjectConfig = field(default_factory=ProjectConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    install: InstallConfig = field(default_factory=InstallConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(str(path), f"invalid YAML: {e}") from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "AppConfig":
        """
        Create config from dictionary. Unknown keys are ignored.

        Raises:
            ConfigurationError: A section is not a mapping or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise ConfigurationError("config", f"expected a mapping of sections, got {type(data).__name__}")

        config = cls()

        for attr in _SECTIONS:
            section = getattr(config, attr)
            values = data.get(attr)
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ConfigurationError(attr, f"expected a mapping, got {type(values).__name__}")
            settable = {f.name for f in fields(section)}
            for key, value in values.items():
                if key not in settable:
                    continue
                setattr(section, key, _convert(attr, key, value))

        # Relative install roots are taken relative to the project
        if config.install.root is not None and not config.install.root.is_absolute():
            config.install.root = config.project.root / config.install.root

        return config


def _convert(section: str, key: str, value):
    """Coerce one YAML value to the type its setting expects."""
    setting = f"{section}.{key}"
    if value is None:
        raise ConfigurationError(setting, "value is empty")

    if key in _PATH_KEYS:
        if not isinstance(value, str):
            raise ConfigurationError(setting, f"expected a path, got {value!r}")
        return Path(value).expanduser()

    if section == "tools":
        if isinstance(value, str):
            return shlex.split(value)
        if isinstance(value, list):
            return [str(part) for part in value]
        raise ConfigurationError(setting, f"expected a command line, got {value!r}")

    if section == "project":
        # YAML reads an unquoted 1.10 as the float 1.1
        if isinstance(value, float):
            raise ConfigurationError(setting, f"read as the number {value!r}; quote it in the config file")
        if isinstance(value, (dict, list, bool)):
            raise ConfigurationError(setting, f"expected a string, got {value!r}")
        return str(value)

    if key == "level":
        return str(value)
    if key == "console_logging" and not isinstance(value, bool):
        raise ConfigurationError(setting, f"expected true or false, got {value!r}")
    return value


def find_config_file(cwd: Path | None = None) -> Path | None:
    """
    Locate the config file.

    Search order:
    1. LGT_CONFIG environment variable
    2. lgt.yaml / .lgt.yaml in the working directory
    """
    if env_config := _env_path("LGT_CONFIG"):
        return env_config

    base = cwd or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load configuration.

    Args:
        config_path: Path to config file (default: searches standard locations)

    Returns:
        AppConfig, with defaults for anything the file does not set
    """
    if config_path is None:
        config_path = find_config_file()

    return AppConfig.from_yaml(config_path) if config_path else AppConfig()
