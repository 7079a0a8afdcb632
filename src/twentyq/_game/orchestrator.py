# Area: Game
"""Session orchestrator — the question-answering state machine."""

from __future__ import annotations

import asyncio
import logging
from datetime import date as _date
from typing import Callable, Optional

from .prompt import build_oracle_prompt
from .question_rules import contains_guess, is_yes_no_question
from .replies import (
    NOT_A_YES_NO_QUESTION,
    AskReply,
    game_already_over,
    guessed_it,
    out_of_questions,
)
from .session import MAX_QUESTIONS, GameOutcome, GameSession, Mode
from .store import SessionStore
from .._services.enricher import NO_CONTEXT, BaseEnricher
from .._services.oracle import BaseOracle, OracleOutcome
from ..errors import (
    InvalidInputError,
    OracleContentBlockedError,
    OracleRateLimitedError,
    OracleTransientError,
    OracleUnavailableError,
)

logger = logging.getLogger("twentyq.orchestrator")

DEFAULT_ORACLE_TIMEOUT_SECONDS = 20.0

FAILURE_ERRORS = {
    OracleOutcome.RATE_LIMITED: OracleRateLimitedError,
    OracleOutcome.TRANSIENT_ERROR: OracleTransientError,
    OracleOutcome.CONFIG_ERROR: OracleUnavailableError,
    OracleOutcome.BLOCKED: OracleContentBlockedError,
}


def local_today() -> str:
    return _date.today().isoformat()


class SessionOrchestrator:
    """
    Drives one (date, mode) session per question.

    Every turn runs under the store's per-key lock, so concurrent
    questions for the same session are applied one at a time in
    arrival order. Only a Yes/No verdict from the oracle changes state.
    """

    def __init__(
        self,
        store: SessionStore,
        oracle: Optional[BaseOracle],
        enricher: Optional[BaseEnricher] = None,
        oracle_timeout_seconds: float = DEFAULT_ORACLE_TIMEOUT_SECONDS,
        today: Callable[[], str] = local_today,
    ):
        self.store = store
        self.oracle = oracle
        self.enricher = enricher
        self.oracle_timeout_seconds = oracle_timeout_seconds
        self.today = today

    def oracle_available(self) -> bool:
        return self.oracle is not None and self.oracle.is_available()

    async def submit_question(self, date: str, mode: str, question: str) -> AskReply:
        """
        Answer one question for the (date, mode) session.

        Raises:
            InvalidInputError: Unknown mode or empty question
            OracleError subclasses: Oracle failed; no turn was consumed
        """
        if mode not in Mode.values():
            raise InvalidInputError("mode", "Missing or invalid question or mode.", mode)
        if not isinstance(question, str) or not question.strip():
            raise InvalidInputError("question", "Missing or invalid question or mode.", question)
        if not self.oracle_available():
            raise OracleUnavailableError(context={"mode": mode})

        async with self.store.hold(date, mode):
            session = self.store.get_or_create(date, mode)

            if session.game_over:
                return AskReply.from_session(session, game_already_over(session))

            if session.questions_remaining <= 0:
                logger.warning(
                    f"[{session.key}] Question asked with {session.questions_remaining} "
                    "questions remaining. Force ending game."
                )
                session.force_exhausted()
                return AskReply.from_session(session, out_of_questions(session))

            trimmed = question.strip()
            if not is_yes_no_question(trimmed):
                return AskReply.from_session(session, NOT_A_YES_NO_QUESTION)

            await self._ensure_context(session)

            prompt = build_oracle_prompt(session.secret_answer, session.secret_summary, trimmed)
            outcome = await self._consult_oracle(prompt, session)
            if not outcome.is_verdict:
                raise FAILURE_ERRORS[outcome](outcome=outcome, context={"session": session.key})

            return self._apply_verdict(session, question, outcome)

    def session_status(self, date: str, mode: str) -> Optional[AskReply]:
        """Read-only view of the stored session, or None if there is none."""
        if mode not in Mode.values():
            raise InvalidInputError("mode", "Missing or invalid mode.", mode)
        session = self.store.get(date, mode)
        if session is None:
            return None
        if session.game_over:
            return AskReply.from_session(session, game_already_over(session))
        return AskReply.from_session(
            session, f"{session.questions_remaining} questions remaining."
        )

    async def _ensure_context(self, session: GameSession) -> None:
        if session.secret_summary:
            return
        summary = NO_CONTEXT
        if self.enricher is not None:
            try:
                summary = await self.enricher.fetch_summary(session.secret_answer) or NO_CONTEXT
            except Exception:
                logger.exception(f"[{session.key}] Context enricher failed")
        session.secret_summary = summary
        logger.info(f"[{session.key}] Context fetched ({len(summary)} chars)")

    async def _consult_oracle(self, prompt: str, session: GameSession) -> OracleOutcome:
        try:
            return await asyncio.wait_for(
                self.oracle.ask(prompt), timeout=self.oracle_timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"[{session.key}] Oracle timed out after {self.oracle_timeout_seconds}s"
            )
        except Exception:
            logger.exception(f"[{session.key}] Oracle raised unexpectedly")
        return OracleOutcome.TRANSIENT_ERROR

    def _apply_verdict(
        self, session: GameSession, question: str, verdict: OracleOutcome
    ) -> AskReply:
        session.record_answered_turn()

        if contains_guess(question, session.secret_answer):
            session.finish(GameOutcome.WIN)
            reply = guessed_it(session)
        elif session.questions_remaining <= 0:
            session.finish(GameOutcome.LOSE)
            reply = out_of_questions(session, verdict.label)
        else:
            reply = verdict.label

        logger.info(
            f'Q:{session.questions_used}/{MAX_QUESTIONS} | User: "{question.strip()}" | '
            f"AI: {verdict.label} | Remaining: {session.questions_remaining}"
        )
        return AskReply.from_session(session, reply)
