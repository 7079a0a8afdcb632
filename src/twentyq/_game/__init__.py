# Area: Game
"""
Game core: session state, store, question rules and the orchestrator.

This package contains:
- GameSession and its enums
- AnswerCatalog for the daily secret words
- SessionStore with per-key locking and eviction
- SessionOrchestrator, the question-answering state machine
"""

from .session import (
    DEFAULT_ANSWER,
    MAX_QUESTIONS,
    GameOutcome,
    GameSession,
    Mode,
    make_session_key,
)
from .catalog import AnswerCatalog
from .store import SessionStore
from .question_rules import classify_verdict, contains_guess, is_yes_no_question
from .replies import AskReply
from .orchestrator import SessionOrchestrator
from .maintenance import EvictionTask

__all__ = [
    "DEFAULT_ANSWER",
    "MAX_QUESTIONS",
    "GameOutcome",
    "GameSession",
    "Mode",
    "make_session_key",
    "AnswerCatalog",
    "SessionStore",
    "classify_verdict",
    "contains_guess",
    "is_yes_no_question",
    "AskReply",
    "SessionOrchestrator",
    "EvictionTask",
]
