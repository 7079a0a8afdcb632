# Area: Shared
"""
twentyq.errors — Custom exception classes
=========================================

Defines the exception hierarchy raised by the game core and the
ledger. Each exception carries the HTTP status it maps to, a
player-facing message, and enough context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


QUESTION_NOT_COUNTED = "Your question count was not affected."


class TwentyQError(Exception):
    """Base exception for all twentyq errors."""

    status_code: int = 500
    error_type: str = "TWENTYQ_ERROR"

    def __init__(self, user_message: str, context: Optional[Dict[str, Any]] = None):
        self.user_message = user_message
        self.context = context or {}
        super().__init__(user_message)

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.error_type,
            status_code=self.status_code,
            message=self.user_message,
            context=self.context,
        )


class InvalidInputError(TwentyQError):
    """Raised when a request field fails validation. No state is touched."""

    status_code = 400
    error_type = "INVALID_INPUT"

    def __init__(self, field: str, message: str, received: Any = None):
        self.field = field
        self.received = received
        super().__init__(message, {"field": field, "received": received})


# ── Oracle failures: never cost the player a turn ───────────────


class OracleError(TwentyQError):
    """Base class for failures of the answer oracle."""

    error_type = "ORACLE_ERROR"

    def __init__(self, user_message: str, outcome: Any = None,
                 context: Optional[Dict[str, Any]] = None):
        self.outcome = outcome
        ctx = dict(context or {})
        if outcome is not None:
            ctx["outcome"] = getattr(outcome, "value", outcome)
        super().__init__(user_message, ctx)


class OracleUnavailableError(OracleError):
    """The oracle is not configured or its credentials were rejected."""

    status_code = 503
    error_type = "ORACLE_UNAVAILABLE"

    def __init__(self, outcome: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            "AI service is currently unavailable. Please try again later. "
            + QUESTION_NOT_COUNTED,
            outcome=outcome,
            context=context,
        )


class OracleRateLimitedError(OracleError):
    status_code = 429
    error_type = "ORACLE_RATE_LIMITED"

    def __init__(self, outcome: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            "Sorry, the AI is busy right now. Please try asking again in a moment. "
            + QUESTION_NOT_COUNTED,
            outcome=outcome,
            context=context,
        )


class OracleTransientError(OracleError):
    status_code = 500
    error_type = "ORACLE_TRANSIENT"

    def __init__(self, outcome: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            "Sorry, I encountered an internal problem answering. "
            "Please try asking again. " + QUESTION_NOT_COUNTED,
            outcome=outcome,
            context=context,
        )


class OracleContentBlockedError(OracleError):
    status_code = 400
    error_type = "ORACLE_CONTENT_BLOCKED"

    def __init__(self, outcome: Any = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            "Sorry, I cannot answer that question due to content restrictions "
            "or the nature of the question. Please ask something different. "
            + QUESTION_NOT_COUNTED,
            outcome=outcome,
            context=context,
        )


# ── Ledger failures: independent of in-memory game state ───────


class LedgerError(TwentyQError):
    """Base class for score ledger failures."""

    error_type = "LEDGER_ERROR"


class LedgerUnavailableError(LedgerError):
    status_code = 503
    error_type = "LEDGER_UNAVAILABLE"

    def __init__(self, message: str = "Database service unavailable.",
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context)


class LedgerConflictError(LedgerError):
    status_code = 409
    error_type = "LEDGER_CONFLICT"

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__("Score conflict. Perhaps already submitted?", context)


def _format_error_block(
    error_type: str,
    status_code: int,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for the terminal and log file."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SERVICE ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Status:       {status_code}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
