"""API routes for task sessions."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, status

from taskflow.application.session.use_cases.dtos import TaskSession
from taskflow.application.session.use_cases.task_session_use_case import TaskSessionUseCase
from taskflow.core import container
from taskflow.domain.common.exceptions import DomainError
from taskflow.exceptions import TaskflowError
from taskflow.infrastructure.common.di import inject_use_case
from taskflow.infrastructure.session.mappers import SessionMapper
from taskflow.infrastructure.session.schemas import SessionDeleteResponse, SessionStateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])

_mapper = SessionMapper()


def _run(
    action: str, session_id: str, operation: Callable[[], TaskSession]
) -> SessionStateResponse:
    try:
        return _mapper.to_response(operation())
    except (TaskflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to {action} session {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=SessionStateResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """Create a session at the Welcome screen."""
    return _run("create", "-", use_case.create_session)


@router.get("/{session_id}", response_model=SessionStateResponse)
def get_session(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """
    Get the current state of a session.

    Raises:
        SessionNotFoundError: If the session does not exist
    """
    return _run("get", session_id, lambda: use_case.get_session(session_id))


@router.post("/{session_id}/start", response_model=SessionStateResponse)
def start_session(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """
    Load the task and show its first screen.

    Raises:
        TaskLoadError: If the task cannot be loaded; the session returns to Welcome
        InvalidTransitionError: If the session is not at the Welcome screen
    """
    return _run("start", session_id, lambda: use_case.start_session(session_id))


@router.post("/{session_id}/answer", response_model=SessionStateResponse)
def record_answer(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """
    Record that the current question was answered.

    Raises:
        InvalidTransitionError: If no question is on screen
    """
    return _run("answer in", session_id, lambda: use_case.record_answer(session_id))


@router.post("/{session_id}/continue", response_model=SessionStateResponse)
def continue_session(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """
    Continue from the current guidance or flow item.

    Raises:
        InvalidTransitionError: If the current screen does not accept continue
    """
    return _run("continue", session_id, lambda: use_case.continue_session(session_id))


@router.post("/{session_id}/restart", response_model=SessionStateResponse)
def restart_session(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionStateResponse:
    """Return a finished session to the Welcome screen."""
    return _run("restart", session_id, lambda: use_case.restart_session(session_id))


@router.delete("/{session_id}", response_model=SessionDeleteResponse)
def delete_session(
    session_id: str,
    use_case: TaskSessionUseCase = Depends(inject_use_case(container.task_session_use_case)),
) -> SessionDeleteResponse:
    """
    Delete a session.

    Raises:
        SessionNotFoundError: If the session does not exist
    """
    use_case.delete_session(session_id)
    return SessionDeleteResponse(success=True, message="Session deleted successfully")
