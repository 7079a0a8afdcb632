# Area: Ledger
"""
twentyq._services.ledger — Score ledger
=======================================

Append-only storage of finished-game results and ranked retrieval.

Ranking (total order):
    1. result: win before lose
    2. questions_used ascending
    3. earliest submission first
    4. row id
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from sqlalchemy import case, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .database import ScoreRow
from .._game.session import MAX_QUESTIONS, GameOutcome, Mode
from ..errors import InvalidInputError, LedgerConflictError, LedgerUnavailableError
from ..types import Leaderboard, ScoreSubmission

logger = logging.getLogger("twentyq.ledger")

MAX_NAME_LENGTH = 30
DEFAULT_LEADERBOARD_LIMIT = 10
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

REQUIRED_FIELDS = ["name", "date", "mode", "questionsUsed", "result"]


# ══════════════════════════════════════════════════════════════
# VALIDATION
# ══════════════════════════════════════════════════════════════

def is_valid_date(value: Any) -> bool:
    return isinstance(value, str) and DATE_PATTERN.match(value) is not None


def is_valid_mode(value: Any) -> bool:
    return value in Mode.values()


def as_question_count(value: Any) -> Optional[int]:
    """
    Integer value of a JSON number, or None.

    Whole floats such as 5.0 count; bools, fractions and strings do not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_score(payload: Dict[str, Any]) -> List[Dict[str, str]]:
    """
    Validate a score submission.

    Returns:
        List of {"field", "message"} dicts. Empty if valid.
    """
    missing = [f for f in REQUIRED_FIELDS if payload.get(f) in (None, "")]
    if missing:
        return [{"field": f, "message": "Invalid score data provided."} for f in missing]

    errors: List[Dict[str, str]] = []
    name = payload["name"]
    if not isinstance(name, str) or not name.strip() or len(name) > MAX_NAME_LENGTH:
        errors.append({
            "field": "name",
            "message": f"Name must be between 1 and {MAX_NAME_LENGTH} characters.",
        })
    if not is_valid_mode(payload["mode"]):
        errors.append({"field": "mode", "message": "Invalid game mode."})

    used = as_question_count(payload["questionsUsed"])
    if used is None or not 1 <= used <= MAX_QUESTIONS:
        errors.append({
            "field": "questionsUsed",
            "message": f"Invalid number of questions used (1-{MAX_QUESTIONS}).",
        })
    if payload["result"] not in [o.value for o in GameOutcome]:
        errors.append({"field": "result", "message": "Invalid result status."})
    if not is_valid_date(payload["date"]):
        errors.append({"field": "date", "message": "Invalid date format."})
    return errors


# ══════════════════════════════════════════════════════════════
# LEDGER
# ══════════════════════════════════════════════════════════════

class ScoreLedger:
    """
    Persistence of score records.

    Args:
        session_factory: SQLAlchemy sessionmaker, or None when the
            ledger is not configured (every call then raises
            LedgerUnavailableError)
    """

    def __init__(self, session_factory: Optional[sessionmaker]):
        self._session_factory = session_factory

    def is_available(self) -> bool:
        return self._session_factory is not None

    def _require_available(self) -> sessionmaker:
        if self._session_factory is None:
            raise LedgerUnavailableError()
        return self._session_factory

    def submit(self, payload: ScoreSubmission) -> None:
        """
        Validate and store one finished-game result.

        Raises:
            LedgerUnavailableError: Ledger not configured or unreachable
            InvalidInputError: Payload failed validation
            LedgerConflictError: Same name already recorded for date/mode
        """
        factory = self._require_available()

        errors = validate_score(payload)
        if errors:
            logger.warning(f"Score submission rejected: {errors}")
            first = errors[0]
            raise InvalidInputError(first["field"], first["message"], payload.get(first["field"]))

        row = ScoreRow(
            name=payload["name"].strip()[:MAX_NAME_LENGTH],
            date=payload["date"],
            mode=payload["mode"],
            questions_used=as_question_count(payload["questionsUsed"]),
            result=payload["result"],
        )

        logger.info(f"Inserting score: {row.name} {row.date}/{row.mode} "
                    f"{row.result} in {row.questions_used}")
        with factory() as session:
            session.add(row)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                logger.warning(f"Score conflict for {row.name} {row.date}/{row.mode}: {e.orig}")
                raise LedgerConflictError({"name": row.name, "date": row.date, "mode": row.mode}) from e
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Error saving score: {e}")
                raise LedgerUnavailableError("Error saving score data.") from e
        logger.info("Score saved successfully.")

    def top_scores(
        self, date: str, mode: str, limit: int = DEFAULT_LEADERBOARD_LIMIT
    ) -> Leaderboard:
        """
        Ranked scores for one (date, mode) partition.

        Returns:
            At most ``limit`` entries; empty list when nothing was submitted
        """
        factory = self._require_available()

        if not is_valid_date(date):
            raise InvalidInputError("date", "Invalid or missing date.", date)
        if not is_valid_mode(mode):
            raise InvalidInputError("mode", "Invalid or missing mode.", mode)

        win_first = case((ScoreRow.result == GameOutcome.WIN.value, 0), else_=1)
        stmt = (
            select(ScoreRow.name, ScoreRow.questions_used, ScoreRow.result)
            .where(ScoreRow.date == date, ScoreRow.mode == mode)
            .order_by(
                win_first,
                ScoreRow.questions_used.asc(),
                ScoreRow.created_at.asc(),
                ScoreRow.id.asc(),
            )
            .limit(limit)
        )

        logger.info(f"Fetching leaderboard for date={date}, mode={mode}")
        try:
            with factory() as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching leaderboard: {e}")
            raise LedgerUnavailableError() from e

        logger.info(f"Fetched {len(rows)} scores for leaderboard.")
        return [
            {"name": name, "questionsUsed": used, "result": result}
            for name, used, result in rows
        ]
