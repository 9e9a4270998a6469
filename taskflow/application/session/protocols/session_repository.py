"""Protocol for the task session repository."""

from typing import Protocol

from taskflow.application.session.use_cases.dtos import TaskSession


class SessionRepositoryProtocol(Protocol):
    """Protocol for storing live task sessions."""

    def add(self, session: TaskSession) -> TaskSession:
        """Store a new session."""
        ...

    def find_by_id(self, session_id: str) -> TaskSession | None:
        """
        Find a session by ID.

        Args:
            session_id: The session ID

        Returns:
            The session if it exists, None otherwise
        """
        ...

    def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if a session was deleted
        """
        ...
