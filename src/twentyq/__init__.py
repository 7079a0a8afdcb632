"""
twentyq — Daily 20 Questions game server
========================================

Players ask yes/no questions about a daily secret word; an LLM
answers; a per-day, per-difficulty session counts down 20 turns;
finished games go to a leaderboard.

Quick Start:
    from twentyq import create_app, load_config
    app = create_app(load_config())

Or from the shell:
    twentyq --port 3000

Embedding the game core without HTTP:
    from twentyq import AnswerCatalog, SessionStore, SessionOrchestrator
    store = SessionStore(AnswerCatalog.load("answers.json"))
    orchestrator = SessionOrchestrator(store, oracle=MyOracle())
    reply = await orchestrator.submit_question("2025-01-01", "easy", "Is it red?")
"""

from .errors import (
    TwentyQError,
    InvalidInputError,
    OracleError,
    OracleUnavailableError,
    OracleRateLimitedError,
    OracleTransientError,
    OracleContentBlockedError,
    LedgerError,
    LedgerUnavailableError,
    LedgerConflictError,
)
from ._game import (
    AnswerCatalog,
    AskReply,
    EvictionTask,
    GameOutcome,
    GameSession,
    Mode,
    SessionOrchestrator,
    SessionStore,
)
from ._services import (
    AnthropicOracle,
    BaseEnricher,
    BaseOracle,
    OracleOutcome,
    ScoreLedger,
    WikipediaEnricher,
)
from .config import load_config
from .api import create_app

__all__ = [
    # Errors
    "TwentyQError",
    "InvalidInputError",
    "OracleError",
    "OracleUnavailableError",
    "OracleRateLimitedError",
    "OracleTransientError",
    "OracleContentBlockedError",
    "LedgerError",
    "LedgerUnavailableError",
    "LedgerConflictError",
    # Game core
    "AnswerCatalog",
    "AskReply",
    "EvictionTask",
    "GameOutcome",
    "GameSession",
    "Mode",
    "SessionOrchestrator",
    "SessionStore",
    # Collaborators
    "AnthropicOracle",
    "BaseEnricher",
    "BaseOracle",
    "OracleOutcome",
    "ScoreLedger",
    "WikipediaEnricher",
    # Server
    "load_config",
    "create_app",
]
__version__ = "1.0.0"
