# Area: Services
"""
External collaborators used by the game core and the HTTP layer.

This package contains:
- The yes/no answer oracle (Anthropic)
- The Wikipedia context enricher
- The score ledger and its database setup
"""

from .oracle import AnthropicOracle, BaseOracle, OracleOutcome
from .enricher import BaseEnricher, WikipediaEnricher
from .database import ScoreRow, get_engine, get_session_factory, init_database
from .ledger import ScoreLedger, validate_score

__all__ = [
    "AnthropicOracle",
    "BaseOracle",
    "OracleOutcome",
    "BaseEnricher",
    "WikipediaEnricher",
    "ScoreRow",
    "get_engine",
    "get_session_factory",
    "init_database",
    "ScoreLedger",
    "validate_score",
]
