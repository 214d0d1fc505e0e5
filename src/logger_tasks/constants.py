"""
Centralized constants for logger-tasks.

Task names and default toolchain command lines live here so the task graph,
the configuration defaults and the CLI agree on them.
"""

# Task names (also the CLI command names)
DEFAULT_TASK = "default"
TEST_ALL_TASK = "test:all"
RELEASE_TASK = "release"
GCOV_ALL_TASK = "gcov:all"
GCOV_REPORT_TASK = "utils:gcov"
COVERAGE_TASK = "coverage"
CLOBBER_TASK = "clobber"
DOXYGEN_TASK = "doxygen"
PUBLISH_TASK = "publish"

# Library being built
DEFAULT_LIBRARY = "logger"
DEFAULT_VERSION = "0.0.1"
DEFAULT_BUILD_DIR = "build/release"
DEFAULT_HEADER = "src/logger.h"

# Install layout below the install root
INSTALL_LIB_DIR = "lib"
INSTALL_INCLUDE_DIR = "include"
# Appended to $HOME when no explicit install root is configured
HOME_INSTALL_SUFFIX = "usr"

# External toolchain command lines
DEFAULT_TEST_COMMAND = ["ceedling", "test:all"]
DEFAULT_RELEASE_COMMAND = ["ceedling", "release"]
DEFAULT_GCOV_COMMAND = ["ceedling", "gcov:all"]
DEFAULT_GCOV_REPORT_COMMAND = ["ceedling", "utils:gcov"]
DEFAULT_CLOBBER_COMMAND = ["ceedling", "clobber"]
DEFAULT_DOXYGEN_COMMAND = ["doxygen", ".doxygen"]

# Config file names searched in the working directory
CONFIG_FILE_NAMES = ("lgt.yaml", ".lgt.yaml")
