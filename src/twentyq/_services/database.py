# Area: Ledger
"""
twentyq._services.database — Database initialization
=====================================================

Engine and session-factory construction for the score ledger, plus
the ``scores_20q`` table. Any SQLAlchemy URL works; production uses
``postgresql+psycopg://...``, tests use SQLite files.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger("twentyq.database")

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScoreRow(Base):
    __tablename__ = "scores_20q"
    __table_args__ = (
        UniqueConstraint("name", "date", "mode", name="uq_scores_20q_name_date_mode"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)
    date = Column(String(10), nullable=False, index=True)
    mode = Column(String(16), nullable=False, index=True)
    questions_used = Column(Integer, nullable=False)
    result = Column(String(4), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


def get_engine(database_url: str) -> Engine:
    """
    Create an engine for the ledger database.

    Args:
        database_url: SQLAlchemy URL

    Returns:
        Engine with pre-ping enabled
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def get_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_database(engine: Engine) -> None:
    """Create the ledger tables if they do not exist."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialized at {engine.url.render_as_string(hide_password=True)}")
