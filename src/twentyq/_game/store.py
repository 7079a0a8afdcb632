# Area: Game
"""
twentyq._game.store — Game session store
=========================================

Keyed in-memory collection of GameSessions with one asyncio.Lock per
key. Callers run a whole turn inside ``hold(date, mode)`` so that at
most one mutation per session is in flight; ``hold`` also counts
waiters, and eviction leaves a key alone while anyone holds or waits
for its lock.
"""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, List, Optional

from .catalog import AnswerCatalog
from .session import GameSession, make_session_key

logger = logging.getLogger("twentyq.store")

DEFAULT_MAX_AGE_SECONDS = 60 * 60


class SessionStore:
    """
    Owns creation, lookup, reset-on-completion and eviction of sessions.

    Args:
        catalog: Source of secret answers
        clock: Returns the current time in seconds (defaults to time.time)
        max_age_seconds: Sessions older than this are evicted
    """

    def __init__(
        self,
        catalog: AnswerCatalog,
        clock: Callable[[], float] = time.time,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
    ):
        self.catalog = catalog
        self.clock = clock
        self.max_age_seconds = max_age_seconds
        self._sessions: Dict[str, GameSession] = {}
        self._locks: Dict[str, asyncio.Lock] = {}
        self._holders: Dict[str, int] = {}

    def lock_for(self, date: str, mode: str) -> asyncio.Lock:
        key = make_session_key(date, mode)
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def hold(self, date: str, mode: str) -> AsyncIterator[None]:
        """
        Hold the key's lock for the duration of the block.

        The caller is counted from before it starts waiting until after
        it releases, so a lock handed to a waiter that has not resumed
        yet is still seen as in use.
        """
        key = make_session_key(date, mode)
        lock = self.lock_for(date, mode)
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]

    def in_use(self, key: str) -> bool:
        lock = self._locks.get(key)
        return key in self._holders or (lock is not None and lock.locked())

    def get(self, date: str, mode: str) -> Optional[GameSession]:
        return self._sessions.get(make_session_key(date, mode))

    def get_or_create(self, date: str, mode: str) -> GameSession:
        """
        Return the live session for the key, creating a fresh one when
        none exists or the existing one is finished.
        """
        key = make_session_key(date, mode)
        session = self._sessions.get(key)
        if session is None or session.game_over:
            session = GameSession(
                secret_answer=self.catalog.lookup(date, mode),
                mode=mode,
                date=date,
                created_at=self.clock(),
            )
            self._sessions[key] = session
            logger.info(f"Initialized/Reset game state for {key}")
            logger.debug(f"[{key}] Secret answer is {session.secret_answer!r}")
        return session

    def evict(self, now: Optional[float] = None) -> List[str]:
        """
        Drop sessions older than ``max_age_seconds`` or already finished.

        Keys held or awaited by an in-flight request are skipped, session
        and lock alike, and picked up by a later sweep.

        Returns:
            Keys that were removed
        """
        now = self.clock() if now is None else now
        removed: List[str] = []

        for key, session in list(self._sessions.items()):
            if self.in_use(key):
                continue
            if now - session.created_at > self.max_age_seconds or session.game_over:
                logger.info(f"Cleaning up game state for key: {key}")
                del self._sessions[key]
                removed.append(key)

        for key in list(self._locks):
            if key not in self._sessions and not self.in_use(key):
                del self._locks[key]

        if removed:
            logger.info(f"Cleaned up {len(removed)} old or finished game states.")
        return removed

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, key: str) -> bool:
        return key in self._sessions
