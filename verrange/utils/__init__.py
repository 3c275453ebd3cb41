"""
Utility helpers for verrange.

- Console output helpers (Rich-based)
- Logging configuration and retrieval

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from verrange.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from verrange.utils.console import (
    get_raw_console,
    print_error,
    print_plain,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_plain",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "level_for_verbosity",
    "is_logging_configured",
]
