"""Pydantic schemas for task session API responses."""

from typing import Literal

from pydantic import BaseModel, Field

from taskflow.infrastructure.task.schemas.flow_schemas import (
    FlowItemResponse,
    PhaseGuidanceResponse,
)


class SessionStateResponse(BaseModel):
    """Schema for the state of a task session."""

    id: str = Field(..., description="Session ID")
    screen: Literal["welcome", "loading", "phase-guidance", "question", "complete"]
    task_id: str | None = Field(None, description="ID of the loaded task, if any")
    flow_index: int
    flow_length: int
    phase_guidance_index: int
    answered: bool
    can_continue: bool = Field(..., description="Whether a continue signal is accepted now")
    error: str | None = Field(None, description="Message of the last load failure")
    current_item: FlowItemResponse | None = None
    current_guidance: PhaseGuidanceResponse | None = None


class SessionDeleteResponse(BaseModel):
    """Schema for session deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
