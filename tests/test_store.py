# Area: Game Tests
"""Tests for SessionStore lifecycle and eviction."""

import asyncio

from twentyq._game.session import DEFAULT_ANSWER, GameOutcome

TODAY = "2025-01-01"


class TestGetOrCreate:
    """Tests for session creation and reset."""

    def test_creates_session_from_catalog(self, store, clock):
        session = store.get_or_create(TODAY, "easy")
        assert session.secret_answer == "apple"
        assert session.questions_remaining == 20
        assert session.created_at == clock.now
        assert len(store) == 1

    def test_missing_catalog_entry_uses_default(self, store):
        session = store.get_or_create(TODAY, "impossible")
        assert session.secret_answer == DEFAULT_ANSWER

    def test_returns_same_live_session(self, store):
        first = store.get_or_create(TODAY, "easy")
        first.record_answered_turn()
        second = store.get_or_create(TODAY, "easy")
        assert second is first
        assert second.questions_remaining == 19

    def test_keys_are_independent(self, store):
        easy = store.get_or_create(TODAY, "easy")
        medium = store.get_or_create(TODAY, "medium")
        tomorrow = store.get_or_create("2025-01-02", "easy")
        assert len({id(easy), id(medium), id(tomorrow)}) == 3
        assert tomorrow.secret_answer == "dog"

    def test_finished_session_is_replaced(self, store):
        finished = store.get_or_create(TODAY, "easy")
        finished.record_answered_turn()
        finished.finish(GameOutcome.WIN)

        fresh = store.get_or_create(TODAY, "easy")

        assert fresh is not finished
        assert fresh.game_over is False
        assert fresh.questions_remaining == 20
        # the finished object itself is left untouched
        assert finished.questions_used == 1
        assert finished.result is GameOutcome.WIN

    def test_get_does_not_create(self, store):
        assert store.get(TODAY, "easy") is None
        assert len(store) == 0


class TestLocks:
    def test_same_key_same_lock(self, store):
        assert store.lock_for(TODAY, "easy") is store.lock_for(TODAY, "easy")

    def test_different_keys_different_locks(self, store):
        assert store.lock_for(TODAY, "easy") is not store.lock_for(TODAY, "medium")


class TestEvict:
    """Tests for the eviction sweep."""

    def test_keeps_young_live_sessions(self, store, clock):
        store.get_or_create(TODAY, "easy")
        clock.advance(1800)
        assert store.evict() == []
        assert len(store) == 1

    def test_removes_sessions_older_than_max_age(self, store, clock):
        store.get_or_create(TODAY, "easy")
        clock.advance(3601)
        assert store.evict() == [f"{TODAY}-easy"]
        assert len(store) == 0

    def test_removes_finished_sessions_regardless_of_age(self, store):
        store.get_or_create(TODAY, "easy").finish(GameOutcome.LOSE)
        store.get_or_create(TODAY, "medium")
        assert store.evict() == [f"{TODAY}-easy"]
        assert f"{TODAY}-medium" in store

    def test_explicit_now_overrides_clock(self, store, clock):
        store.get_or_create(TODAY, "easy")
        assert store.evict(now=clock.now + 7200) == [f"{TODAY}-easy"]

    def test_skips_sessions_with_request_in_flight(self, store, clock):
        store.get_or_create(TODAY, "easy")
        clock.advance(7200)

        async def sweep_while_locked():
            async with store.lock_for(TODAY, "easy"):
                return store.evict()

        assert asyncio.run(sweep_while_locked()) == []
        assert f"{TODAY}-easy" in store
        assert store.evict() == [f"{TODAY}-easy"]

    def test_lock_handed_to_waiter_survives_sweep(self, store):
        """A released lock whose waiter has not resumed yet is still in use."""
        store.get_or_create(TODAY, "easy")

        async def scenario():
            lock = store.lock_for(TODAY, "easy")
            entered = []

            async def waiter():
                async with store.hold(TODAY, "easy"):
                    entered.append(True)

            async with store.hold(TODAY, "easy"):
                task = asyncio.ensure_future(waiter())
                await asyncio.sleep(0)
                store.get(TODAY, "easy").finish(GameOutcome.LOSE)

            removed = store.evict()
            same_lock = store.lock_for(TODAY, "easy") is lock
            await task
            return removed, same_lock, entered

        removed, same_lock, entered = asyncio.run(scenario())

        assert removed == []
        assert same_lock is True
        assert entered == [True]
        assert f"{TODAY}-easy" in store
        # once nobody holds the key the next sweep removes it
        assert store.evict() == [f"{TODAY}-easy"]

    def test_evicted_key_is_recreated_on_next_use(self, store, clock):
        old = store.get_or_create(TODAY, "easy")
        clock.advance(3601)
        store.evict()
        new = store.get_or_create(TODAY, "easy")
        assert new is not old
        assert new.created_at == clock.now
