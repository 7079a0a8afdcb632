# Area: Game
"""
twentyq._game.catalog — Daily answer catalog
=============================================

Static mapping of calendar date → mode → secret word, read once at
startup from a JSON file shaped like::

    {"2025-01-01": {"easy": "apple", "medium": "violin", ...}, ...}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .session import DEFAULT_ANSWER

logger = logging.getLogger("twentyq.catalog")


class AnswerCatalog:
    """Read-only lookup of secret answers."""

    def __init__(self, entries: Optional[Dict[str, Dict[str, str]]] = None):
        self._entries: Dict[str, Dict[str, str]] = dict(entries or {})

    @classmethod
    def load(cls, path: str) -> "AnswerCatalog":
        """
        Load the catalog from a JSON file.

        A missing or unreadable file is logged and yields an empty
        catalog, so every lookup falls back to the default answer.

        Args:
            path: Path to the answers JSON file

        Returns:
            AnswerCatalog instance
        """
        resolved = Path(path).resolve()
        try:
            with open(resolved, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(
                f"Could not read or parse answers file {resolved}: {e}. "
                f"Every game will use '{DEFAULT_ANSWER}'."
            )
            return cls()

        if not isinstance(data, dict):
            logger.error(f"Answers file {resolved} must contain a JSON object")
            return cls()

        entries = {
            date: modes for date, modes in data.items() if isinstance(modes, dict)
        }
        logger.info(f"Loaded {len(entries)} days of answers from {resolved}")
        return cls(entries)

    def lookup(self, date: str, mode: str) -> str:
        answer = self._entries.get(date, {}).get(mode)
        if not answer:
            logger.warning(f"No answer for {date}/{mode}, using '{DEFAULT_ANSWER}'")
            return DEFAULT_ANSWER
        return answer

    def __len__(self) -> int:
        return len(self._entries)
