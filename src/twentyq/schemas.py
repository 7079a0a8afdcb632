"""Request bodies accepted by the HTTP API."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import ScoreSubmission


class AskRequest(BaseModel):
    """Schema for asking a question in today's game."""

    question: Optional[str] = None
    mode: Optional[str] = None


class ScoreRequest(BaseModel):
    """Schema for submitting a finished game.

    Field values are left untyped here; range and type checks happen in
    the ledger so that every rejection carries the same messages.
    """

    name: Any = None
    date: Any = None
    mode: Any = None
    questions_used: Any = Field(default=None, alias="questionsUsed")
    result: Any = None

    model_config = ConfigDict(populate_by_name=True)

    def to_submission(self) -> ScoreSubmission:
        return self.model_dump(by_alias=True)
