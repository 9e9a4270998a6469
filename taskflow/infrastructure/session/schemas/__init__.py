"""Session context schemas."""

from taskflow.infrastructure.session.schemas.session_schemas import (
    SessionDeleteResponse,
    SessionStateResponse,
)

__all__ = ["SessionDeleteResponse", "SessionStateResponse"]
