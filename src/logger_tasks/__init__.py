"""
logger-tasks (lgt) - Build orchestration for the liblogger C library

Sequences the native toolchain with fail-stop semantics:
- Unit tests and release builds through Ceedling
- Coverage instrumentation and report summaries
- Doxygen documentation
- Publishing the shared library and header to an install root
"""

__version__ = "0.1.0"
__package_name__ = "logger-tasks"
__short_name__ = "lgt"
