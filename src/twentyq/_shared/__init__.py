# Area: Shared
"""
Shared utilities used by the game core and the HTTP layer.

This package contains:
- Logging configuration
"""

from .logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_service_error,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "TerminalFormatter",
    "log_service_error",
    "setup_logging",
]
