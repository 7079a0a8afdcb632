# Area: Game
"""
twentyq._game.replies — Reply texts and the /ask result object
==============================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .session import GameOutcome, GameSession
from ..types import AskPayload


NOT_A_YES_NO_QUESTION = (
    "That doesn't look like a standard Yes/No question (e.g., 'Is it blue?', "
    "'Does it swim?'). Please start with a verb like Is, Are, Does, Can, etc. "
    "Question not counted."
)


def game_already_over(session: GameSession) -> str:
    verdict = "You won" if session.result is GameOutcome.WIN else "You lost"
    return (
        f"The game is over for {session.mode} mode today. {verdict}; "
        f'the answer was "{session.secret_answer}". Refresh or wait until tomorrow.'
    )


def out_of_questions(session: GameSession, verdict: Optional[str] = None) -> str:
    text = (
        "You've run out of questions! Game over. "
        f'The answer was "{session.secret_answer}".'
    )
    return f"{verdict}. {text}" if verdict else text


def guessed_it(session: GameSession) -> str:
    return f'Yes! You guessed it! The answer is "{session.secret_answer}".'


@dataclass(frozen=True)
class AskReply:
    """Result of one submitted question, in any path through the orchestrator."""
    reply: str
    questions_remaining: int
    game_over: bool
    result: Optional[GameOutcome] = None
    questions_used: Optional[int] = None

    @classmethod
    def from_session(cls, session: GameSession, reply: str) -> "AskReply":
        return cls(
            reply=reply,
            questions_remaining=session.questions_remaining,
            game_over=session.game_over,
            result=session.result if session.game_over else None,
            questions_used=session.questions_used if session.game_over else None,
        )

    def to_payload(self) -> AskPayload:
        payload: AskPayload = {
            "reply": self.reply,
            "questionsRemaining": self.questions_remaining,
            "gameOver": self.game_over,
        }
        if self.game_over:
            payload["result"] = self.result.value if self.result else None
            payload["questionsUsed"] = self.questions_used
        return payload
