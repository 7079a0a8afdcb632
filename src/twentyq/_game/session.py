# Area: Game
"""
twentyq._game.session — Game session state
===========================================

One GameSession exists per (date, mode) key. It stores the secret
answer, the lazily fetched context summary, and the turn counter,
and it owns the single transition into the terminal state.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

logger = logging.getLogger("twentyq.session")

MAX_QUESTIONS = 20
DEFAULT_ANSWER = "default"


class Mode(Enum):
    """Difficulty tier; selects the catalog entry and leaderboard partition."""
    EASY       = "easy"
    MEDIUM     = "medium"
    DIFFICULT  = "difficult"
    IMPOSSIBLE = "impossible"

    @classmethod
    def values(cls) -> list:
        return [m.value for m in cls]


class GameOutcome(Enum):
    WIN  = "win"
    LOSE = "lose"


def make_session_key(date: str, mode: str) -> str:
    return f"{date}-{mode}"


@dataclass
class GameSession:
    """
    Full state of one daily game.

    ``secret_answer``, ``mode``, ``date`` and ``created_at`` never change
    after construction. ``result`` is set iff ``game_over`` is True.
    """
    secret_answer: str
    mode: str
    date: str
    created_at: float
    secret_summary: str = ""
    questions_remaining: int = MAX_QUESTIONS
    questions_used: int = 0
    game_over: bool = False
    result: Optional[GameOutcome] = None

    @property
    def key(self) -> str:
        return make_session_key(self.date, self.mode)

    def record_answered_turn(self) -> None:
        """Consume exactly one question. Never goes below zero."""
        if self.questions_remaining > 0:
            self.questions_remaining -= 1
        self.questions_used = MAX_QUESTIONS - self.questions_remaining

    def finish(self, outcome: GameOutcome) -> None:
        if self.game_over:
            raise ValueError(f"Session {self.key} is already finished ({self.result.value})")
        self.game_over = True
        self.result = outcome
        self.questions_used = MAX_QUESTIONS - self.questions_remaining
        logger.info(f"[{self.key}] Game over: {outcome.value} after {self.questions_used} questions")

    def force_exhausted(self) -> None:
        """Close a session whose counter ran out without a terminal transition."""
        self.questions_remaining = 0
        self.finish(GameOutcome.LOSE)
