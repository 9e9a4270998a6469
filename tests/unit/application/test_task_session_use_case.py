"""Tests for TaskSessionUseCase."""

import pytest

from taskflow.application.session.use_cases.task_session_use_case import TaskSessionUseCase
from taskflow.application.task.use_cases.load_task_use_case import LoadTaskUseCase
from taskflow.domain.common.exceptions import InvalidTransitionError
from taskflow.domain.session.entities import Screen
from taskflow.domain.task.entities import TaskPackage
from taskflow.domain.task.services import FlowFlattener, TaskIntegrityChecker
from taskflow.exceptions import SessionNotFoundError, TaskLoadError
from taskflow.infrastructure.session.repositories import InMemorySessionRepository


class SwitchableTaskSource:
    """Task source that can be told to fail."""

    description = "switchable"

    def __init__(self, task: TaskPackage) -> None:
        self.task = task
        self.fail = False
        self.crash = False

    def load(self) -> TaskPackage:
        if self.fail:
            raise TaskLoadError("file not found", source=self.description)
        if self.crash:
            raise RuntimeError("decoder exploded")
        return self.task


@pytest.fixture
def source(sample_task: TaskPackage) -> SwitchableTaskSource:
    return SwitchableTaskSource(sample_task)


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def use_case(
    source: SwitchableTaskSource, repository: InMemorySessionRepository
) -> TaskSessionUseCase:
    flattener = FlowFlattener()
    loader = LoadTaskUseCase(source, flattener, TaskIntegrityChecker())
    return TaskSessionUseCase(repository, loader, flattener)


class TestTaskSessionUseCase:
    def test_create_session(
        self, use_case: TaskSessionUseCase, repository: InMemorySessionRepository
    ) -> None:
        session = use_case.create_session()

        assert session.controller.screen == Screen.WELCOME
        assert len(repository) == 1
        assert use_case.get_session(session.id) is session

    def test_sessions_are_independent(self, use_case: TaskSessionUseCase) -> None:
        first = use_case.create_session()
        second = use_case.create_session()
        use_case.start_session(first.id)

        assert first.id != second.id
        assert first.controller.screen == Screen.PHASE_GUIDANCE
        assert second.controller.screen == Screen.WELCOME

    def test_start_session(self, use_case: TaskSessionUseCase) -> None:
        session = use_case.create_session()

        use_case.start_session(session.id)

        assert session.controller.task.id == "task-hotel-checkin"
        assert session.controller.screen == Screen.PHASE_GUIDANCE
        assert session.controller.phase_guidance_index == 0

    def test_load_failure_returns_to_welcome(
        self, use_case: TaskSessionUseCase, source: SwitchableTaskSource
    ) -> None:
        session = use_case.create_session()
        source.fail = True

        with pytest.raises(TaskLoadError):
            use_case.start_session(session.id)

        assert session.controller.screen == Screen.WELCOME
        assert session.controller.error == "Failed to load task from switchable: file not found"
        assert session.controller.task is None

    def test_retry_after_load_failure(
        self, use_case: TaskSessionUseCase, source: SwitchableTaskSource
    ) -> None:
        session = use_case.create_session()
        source.fail = True
        with pytest.raises(TaskLoadError):
            use_case.start_session(session.id)

        source.fail = False
        use_case.start_session(session.id)

        assert session.controller.screen == Screen.PHASE_GUIDANCE
        assert session.controller.error is None

    def test_unexpected_load_error_returns_to_welcome(
        self, use_case: TaskSessionUseCase, source: SwitchableTaskSource
    ) -> None:
        session = use_case.create_session()
        source.crash = True

        with pytest.raises(RuntimeError):
            use_case.start_session(session.id)

        assert session.controller.screen == Screen.WELCOME
        assert session.controller.error == "Failed to load task: decoder exploded"

        source.crash = False
        use_case.start_session(session.id)

        assert session.controller.screen == Screen.PHASE_GUIDANCE

    def test_answer_and_continue(self, use_case: TaskSessionUseCase) -> None:
        session = use_case.create_session()
        use_case.start_session(session.id)

        use_case.continue_session(session.id)
        assert session.controller.screen == Screen.QUESTION

        use_case.record_answer(session.id)
        use_case.continue_session(session.id)

        assert session.controller.flow_index == 1

    def test_continue_unanswered_is_rejected(self, use_case: TaskSessionUseCase) -> None:
        session = use_case.create_session()
        use_case.start_session(session.id)
        use_case.continue_session(session.id)

        with pytest.raises(InvalidTransitionError):
            use_case.continue_session(session.id)

    def test_restart_requires_complete(self, use_case: TaskSessionUseCase) -> None:
        session = use_case.create_session()
        use_case.start_session(session.id)

        with pytest.raises(InvalidTransitionError):
            use_case.restart_session(session.id)

    def test_unknown_session(self, use_case: TaskSessionUseCase) -> None:
        with pytest.raises(SessionNotFoundError):
            use_case.get_session("missing")
        with pytest.raises(SessionNotFoundError):
            use_case.continue_session("missing")

    def test_delete_session(
        self, use_case: TaskSessionUseCase, repository: InMemorySessionRepository
    ) -> None:
        session = use_case.create_session()

        use_case.delete_session(session.id)

        assert len(repository) == 0
        with pytest.raises(SessionNotFoundError):
            use_case.delete_session(session.id)
