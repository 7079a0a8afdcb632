# Area: Services
"""
twentyq._services.oracle — Yes/No answer oracle
===============================================

The oracle is an LLM asked to answer a single yes/no question about
the secret answer. ``ask`` never raises: every failure is folded into
an ``OracleOutcome`` sentinel that the orchestrator translates into a
free-retry error.

Two implementations:
  - AnthropicOracle: Anthropic Messages API (async client)
  - BaseOracle: subclass it to plug in another provider or a test double
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import anthropic

logger = logging.getLogger("twentyq.oracle")

DEFAULT_MODEL = "claude-3-5-haiku-latest"
DEFAULT_MAX_TOKENS = 10
DEFAULT_TIMEOUT_SECONDS = 20.0

BILLING_MARKERS = ("credit balance", "billing")


class OracleOutcome(Enum):
    YES             = "yes"
    NO              = "no"
    RATE_LIMITED    = "rate_limited"
    TRANSIENT_ERROR = "transient_error"
    CONFIG_ERROR    = "config_error"
    BLOCKED         = "blocked"

    @property
    def is_verdict(self) -> bool:
        return self in (OracleOutcome.YES, OracleOutcome.NO)

    @property
    def label(self) -> str:
        """'Yes' / 'No' for verdicts."""
        return self.value.capitalize()


class BaseOracle(ABC):
    """Abstract answer oracle."""

    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    async def ask(self, prompt: str) -> OracleOutcome:
        """Return YES/NO, or a failure sentinel. Must not raise."""
        ...


class AnthropicOracle(BaseOracle):
    """Anthropic Claude oracle."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[anthropic.AsyncAnthropic] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self._client = client
        if self._client is None and api_key:
            self._client = anthropic.AsyncAnthropic(
                api_key=api_key,
                timeout=timeout_seconds,
                max_retries=0,
            )
        if self._client is None:
            logger.error("ANTHROPIC_API_KEY not configured; oracle disabled")

    def is_available(self) -> bool:
        return self._client is not None

    async def ask(self, prompt: str) -> OracleOutcome:
        if not self._client:
            logger.error("Oracle client not initialized")
            return OracleOutcome.CONFIG_ERROR

        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.RateLimitError:
            logger.warning("Oracle rate limited")
            return OracleOutcome.RATE_LIMITED
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            logger.critical(f"Critical oracle error (key/permissions): {e}")
            return OracleOutcome.CONFIG_ERROR
        except anthropic.BadRequestError as e:
            if any(marker in str(e).lower() for marker in BILLING_MARKERS):
                logger.critical(f"Critical oracle error (billing): {e}")
                return OracleOutcome.CONFIG_ERROR
            logger.error(f"Oracle rejected request: {e}")
            return OracleOutcome.TRANSIENT_ERROR
        except anthropic.APIError as e:
            # timeouts, connection failures, 5xx
            logger.error(f"Oracle API error: {e}")
            return OracleOutcome.TRANSIENT_ERROR

        return self._interpret(response)

    def _interpret(self, response) -> OracleOutcome:
        # Imported here: question_rules imports this module for OracleOutcome.
        from .._game.question_rules import classify_verdict

        if getattr(response, "stop_reason", None) == "refusal":
            logger.warning("Oracle response blocked by safety policy")
            return OracleOutcome.BLOCKED

        text = "".join(
            getattr(block, "text", "")
            for block in (response.content or [])
            if getattr(block, "type", None) == "text"
        ).strip()
        if not text:
            logger.warning("Oracle returned empty text")
            return OracleOutcome.TRANSIENT_ERROR

        return classify_verdict(text)
