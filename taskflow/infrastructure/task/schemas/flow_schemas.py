"""Pydantic schemas for flattened flow responses."""

from typing import Literal

from pydantic import BaseModel, Field

from taskflow.infrastructure.task.schemas.task_package_schemas import (
    GuidanceSchema,
    Phase4SubtaskEntrySchema,
    Phase6RoleplayEntrySchema,
    QuestionSchema,
)


class PhaseGuidanceResponse(BaseModel):
    """Schema for a phase guidance interstitial."""

    phase_index: int
    phase_type: str
    guidance: GuidanceSchema


class FlowItemResponse(BaseModel):
    """Schema for one flow item; kind-specific fields are None for other kinds."""

    kind: Literal[
        "question",
        "phase4_subtask",
        "phase5_sentence",
        "phase5_phrase_cloze",
        "phase6_roleplay",
    ]
    phase_index: int
    step_index: int
    step_id: str
    step_type: str
    label: str = Field(..., description="Human readable position of the item")
    step_guidance: GuidanceSchema | None = None

    # question
    question_index: int | None = None
    question: QuestionSchema | None = None
    item_type: str | None = None
    item_index: int | None = None
    item_count: int | None = None

    # phase4_subtask
    subtask_index: int | None = None
    subtask: Phase4SubtaskEntrySchema | None = None

    # phase5_sentence / phase5_phrase_cloze
    sentence_index: int | None = None
    sentence: str | None = None
    phrase_id: str | None = None
    round_index: int | None = None
    round_count: int | None = None
    answer: str | None = None
    text_hint: str | None = None
    audio_hint: str | None = None

    # phase6_roleplay
    roleplay: Phase6RoleplayEntrySchema | None = None


class TaskFlowResponse(BaseModel):
    """Schema for the flattened flow of a task."""

    task_id: str
    title: str
    guidance_items: list[PhaseGuidanceResponse] = Field(..., description="Phase interstitials")
    flow_items: list[FlowItemResponse] = Field(..., description="Navigable items in order")
