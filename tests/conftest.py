# Area: Test Support
"""Shared fakes and fixtures for the game core tests."""

import asyncio

import pytest

from twentyq._game.catalog import AnswerCatalog
from twentyq._game.orchestrator import SessionOrchestrator
from twentyq._game.store import SessionStore
from twentyq._services.enricher import BaseEnricher
from twentyq._services.oracle import BaseOracle, OracleOutcome

TODAY = "2025-01-01"


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedOracle(BaseOracle):
    """Returns queued outcomes in order, then ``default``."""

    def __init__(self, outcomes=None, default=OracleOutcome.NO, delay=0.0, available=True):
        self.outcomes = list(outcomes or [])
        self.default = default
        self.delay = delay
        self.available = available
        self.prompts = []

    def is_available(self):
        return self.available

    async def ask(self, prompt):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.outcomes:
            return self.outcomes.pop(0)
        return self.default


class CountingEnricher(BaseEnricher):
    """Records every term it is asked about."""

    def __init__(self, summary="A round fruit that grows on trees.", delay=0.0):
        self.summary = summary
        self.delay = delay
        self.calls = []

    async def fetch_summary(self, term):
        self.calls.append(term)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.summary


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog():
    return AnswerCatalog({
        TODAY: {"easy": "apple", "medium": "new york", "difficult": "c.d"},
        "2025-01-02": {"easy": "dog"},
    })


@pytest.fixture
def store(catalog, clock):
    return SessionStore(catalog, clock=clock, max_age_seconds=3600)


@pytest.fixture
def oracle():
    return ScriptedOracle()


@pytest.fixture
def enricher():
    return CountingEnricher()


@pytest.fixture
def orchestrator(store, oracle, enricher):
    return SessionOrchestrator(store, oracle, enricher, today=lambda: TODAY)
