"""Use case for driving task sessions."""

import structlog

from taskflow.application.session.protocols.session_repository import (
    SessionRepositoryProtocol,
)
from taskflow.application.session.use_cases.dtos import TaskSession
from taskflow.application.task.use_cases.load_task_use_case import LoadTaskUseCase
from taskflow.domain.session.entities import NavigationController
from taskflow.domain.task.services.flow_flattener import FlowFlattener
from taskflow.exceptions import SessionNotFoundError, TaskLoadError

logger = structlog.get_logger(__name__)


class TaskSessionUseCase:
    """Use case for task session operations.

    Each session owns its controller; events for one session are applied one
    at a time under the session lock.
    """

    def __init__(
        self,
        session_repository: SessionRepositoryProtocol,
        load_task_use_case: LoadTaskUseCase,
        flattener: FlowFlattener,
    ) -> None:
        """Initialize use case with the session repository and task loader."""
        self.session_repository = session_repository
        self.load_task_use_case = load_task_use_case
        self.flattener = flattener

    def create_session(self) -> TaskSession:
        """Create a session at the Welcome screen."""
        session = self.session_repository.add(
            TaskSession.create(NavigationController(self.flattener))
        )
        logger.info("created_task_session", session_id=session.id)
        return session

    def get_session(self, session_id: str) -> TaskSession:
        """
        Get a session by ID.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        session = self.session_repository.find_by_id(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def start_session(self, session_id: str) -> TaskSession:
        """
        Load the task and move the session to its first screen.

        On a load failure the session goes back to Welcome with the error
        recorded, and the error propagates to the caller.

        Raises:
            SessionNotFoundError: If the session does not exist
            TaskLoadError: If the task could not be loaded
            InvalidTransitionError: If the session is not at Welcome
        """
        session = self.get_session(session_id)
        with session.lock:
            controller = session.controller
            controller.begin_loading()
            try:
                loaded = self.load_task_use_case.load()
                controller.start(loaded.task, loaded.flow)
            except TaskLoadError as e:
                controller.fail_loading(e.message)
                logger.error("task_load_failed", session_id=session_id, error=e.message)
                raise
            except Exception as e:
                controller.fail_loading(f"Failed to load task: {e!s}")
                logger.exception("task_load_crashed", session_id=session_id)
                raise

            logger.info(
                "started_task_session",
                session_id=session_id,
                task_id=loaded.task.id,
                screen=str(controller.screen),
            )
        return session

    def record_answer(self, session_id: str) -> TaskSession:
        """Record that the current question was answered."""
        session = self.get_session(session_id)
        with session.lock:
            session.controller.record_answer()
        return session

    def continue_session(self, session_id: str) -> TaskSession:
        """Raise the continue signal on the current screen."""
        session = self.get_session(session_id)
        with session.lock:
            session.controller.advance()
            logger.debug(
                "continued_task_session",
                session_id=session_id,
                screen=str(session.controller.screen),
                flow_index=session.controller.flow_index,
            )
        return session

    def restart_session(self, session_id: str) -> TaskSession:
        """Return a finished session to Welcome, discarding its state."""
        session = self.get_session(session_id)
        with session.lock:
            session.controller.restart()
        logger.info("restarted_task_session", session_id=session_id)
        return session

    def delete_session(self, session_id: str) -> None:
        """
        Delete a session.

        Raises:
            SessionNotFoundError: If the session does not exist
        """
        if not self.session_repository.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info("deleted_task_session", session_id=session_id)
