"""
twentyq.types — TypedDict schemas for the JSON payloads
========================================================

Documents the exact structure of the bodies exchanged over HTTP.
The browser client and the tests should reference these shapes.

    >>> AskPayload.__annotations__
    {'reply': str, 'questionsRemaining': int, 'gameOver': bool, ...}
"""

from typing import List, Literal, Optional, TypedDict


# ============================================
# POST /ask  (request body: twentyq.schemas.AskRequest)
# ============================================

class _AskPayloadBase(TypedDict):
    reply: str
    questionsRemaining: int
    gameOver: bool


class AskPayload(_AskPayloadBase, total=False):
    """Reply to POST /ask.

    Fields
    ------
    reply : str
        "Yes", "No", a win/lose message, or guidance for a malformed question.
    questionsRemaining : int
        0–20.
    gameOver : bool
        True once the session reached a terminal state.
    result : "win" | "lose"
        Present only when gameOver is True.
    questionsUsed : int
        Present only when gameOver is True.
    """
    result: Optional[Literal["win", "lose"]]
    questionsUsed: int


class ErrorPayload(TypedDict):
    """Body of every failed /ask or /status response."""
    error: str


# ============================================
# POST /score
# ============================================

class ScoreSubmission(TypedDict):
    """Body of POST /score."""
    name: str               # 1–30 characters after trimming
    date: str               # YYYY-MM-DD
    mode: str
    questionsUsed: int      # 1–20
    result: Literal["win", "lose"]


class ScoreResponse(TypedDict):
    success: bool
    message: str


# ============================================
# GET /leaderboard
# ============================================

class LeaderboardEntry(TypedDict):
    """One ranked row; GET /leaderboard returns at most 10."""
    name: str
    questionsUsed: int
    result: Literal["win", "lose"]


Leaderboard = List[LeaderboardEntry]
