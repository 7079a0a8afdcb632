# Area: Game
"""
twentyq._game.maintenance — Scheduled session eviction
=======================================================

The sweep itself is ``SessionStore.evict``; this module only decides
when it runs. ``attach`` registers it as an interval job on an
APScheduler scheduler. Tests call ``run`` directly with a fake clock
on the store, so no wall-clock waiting is involved.
"""

from __future__ import annotations

import logging
from typing import List

from apscheduler.schedulers.base import BaseScheduler

from .store import SessionStore

logger = logging.getLogger("twentyq.maintenance")

JOB_ID = "evict-game-sessions"
DEFAULT_INTERVAL_MINUTES = 15


class EvictionTask:
    """Periodic sweep of expired or finished sessions."""

    def __init__(self, store: SessionStore, interval_minutes: float = DEFAULT_INTERVAL_MINUTES):
        self.store = store
        self.interval_minutes = interval_minutes
        self.runs = 0

    def run(self) -> List[str]:
        self.runs += 1
        removed = self.store.evict()
        logger.debug(f"Eviction sweep #{self.runs}: removed {len(removed)}, kept {len(self.store)}")
        return removed

    async def run_scheduled(self) -> None:
        # Must run on the event loop that owns the session locks.
        self.run()

    def attach(self, scheduler: BaseScheduler) -> None:
        scheduler.add_job(
            self.run_scheduled,
            "interval",
            minutes=self.interval_minutes,
            id=JOB_ID,
            replace_existing=True,
        )
        logger.info(f"Session eviction scheduled every {self.interval_minutes} minutes")
