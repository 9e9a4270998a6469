"""Custom exception hierarchy for the taskflow application."""


class TaskflowError(Exception):
    """Base exception for all taskflow errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(TaskflowError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class SessionNotFoundError(NotFoundError):
    """Task session not found error."""

    def __init__(self, session_id: str) -> None:
        """Initialize with the unknown session ID."""
        self.session_id = session_id
        super().__init__(f"Session with id {session_id} not found")


class TaskLoadError(TaskflowError):
    """The task document could not be fetched, decoded or validated."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        """Initialize with reason for the failure and the source that failed."""
        self.reason = reason
        self.source = source
        if source:
            message = f"Failed to load task from {source}: {reason}"
        else:
            message = f"Failed to load task: {reason}"
        super().__init__(message, status_code=502)
