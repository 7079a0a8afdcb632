# Area: Game
"""
twentyq._game.question_rules — Question shape, guesses, verdicts
================================================================

Pure text rules used by the orchestrator:

- ``is_yes_no_question``: accepts questions that open with an
  auxiliary or modal verb ("Is it blue?", "does it swim").
- ``contains_guess``: whole-word, case-insensitive match of the secret
  answer inside the raw question.
- ``classify_verdict``: normalizes the oracle's free text to Yes/No.
"""

from __future__ import annotations

import re
from typing import Optional

from .._services.oracle import OracleOutcome


YES_NO_STARTERS = (
    "is", "are", "am", "do", "does", "did", "can", "could", "should",
    "would", "will", "have", "has", "had", "may", "might", "shall", "must",
)

YES_NO_PATTERN = re.compile(
    r"^(" + "|".join(YES_NO_STARTERS) + r")\s+.*\??\s*$",
    re.IGNORECASE,
)


def is_yes_no_question(question: Optional[str]) -> bool:
    if not question:
        return False
    return YES_NO_PATTERN.match(question.strip()) is not None


def contains_guess(question: str, secret_answer: str) -> bool:
    """True if the secret appears in the question as a whole word or phrase."""
    if not secret_answer:
        return False
    pattern = r"\b" + re.escape(secret_answer) + r"\b"
    return re.search(pattern, question, re.IGNORECASE) is not None


def classify_verdict(raw_text: Optional[str]) -> OracleOutcome:
    """
    Map raw oracle text to YES or NO.

    Only text that starts with "yes" after trimming counts as YES;
    everything else, including empty text, is NO.

    >>> classify_verdict("Yes, definitely")
    <OracleOutcome.YES: 'yes'>
    >>> classify_verdict("No, not really")
    <OracleOutcome.NO: 'no'>
    """
    if raw_text and raw_text.strip().lower().startswith("yes"):
        return OracleOutcome.YES
    return OracleOutcome.NO
