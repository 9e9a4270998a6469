"""Tests for InMemorySessionRepository."""

from taskflow.application.session.use_cases.dtos import TaskSession
from taskflow.infrastructure.session.repositories import InMemorySessionRepository


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestInMemorySessionRepository:
    def test_add_and_find(self) -> None:
        repository = InMemorySessionRepository()
        session = repository.add(TaskSession.create())

        assert repository.find_by_id(session.id) is session
        assert repository.find_by_id("missing") is None

    def test_sessions_without_timeout_never_expire(self) -> None:
        clock = FakeClock()
        repository = InMemorySessionRepository(clock=clock)
        session = repository.add(TaskSession.create())

        clock.now += 10**9

        assert repository.find_by_id(session.id) is session

    def test_idle_session_expires(self) -> None:
        clock = FakeClock()
        repository = InMemorySessionRepository(idle_timeout=60, clock=clock)
        session = repository.add(TaskSession.create())

        clock.now += 61

        assert repository.find_by_id(session.id) is None
        assert len(repository) == 0

    def test_lookup_keeps_session_alive(self) -> None:
        clock = FakeClock()
        repository = InMemorySessionRepository(idle_timeout=60, clock=clock)
        session = repository.add(TaskSession.create())

        clock.now += 50
        assert repository.find_by_id(session.id) is session
        clock.now += 50

        assert repository.find_by_id(session.id) is session

    def test_add_purges_idle_sessions(self) -> None:
        clock = FakeClock()
        repository = InMemorySessionRepository(idle_timeout=60, clock=clock)
        idle = repository.add(TaskSession.create())
        clock.now += 30
        recent = repository.add(TaskSession.create())
        clock.now += 40

        repository.add(TaskSession.create())

        assert len(repository) == 2
        assert repository.find_by_id(idle.id) is None
        assert repository.find_by_id(recent.id) is recent

    def test_delete(self) -> None:
        repository = InMemorySessionRepository()
        session = repository.add(TaskSession.create())

        assert repository.delete(session.id) is True
        assert repository.delete(session.id) is False
