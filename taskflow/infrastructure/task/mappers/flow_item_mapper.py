"""Mapper for flow item domain -> response schema conversion."""

from dataclasses import asdict
from typing import assert_never

from taskflow.domain.task.entities import Guidance
from taskflow.domain.task.value_objects import (
    FlowItem,
    Phase4SubtaskItem,
    Phase5PhraseClozeItem,
    Phase5SentenceItem,
    Phase6RoleplayItem,
    PhaseGuidanceItem,
    QuestionItem,
    TaskFlow,
)
from taskflow.infrastructure.task.schemas.flow_schemas import (
    FlowItemResponse,
    PhaseGuidanceResponse,
    TaskFlowResponse,
)
from taskflow.infrastructure.task.schemas.task_package_schemas import (
    GuidanceSchema,
    Phase4SubtaskEntrySchema,
    Phase6RoleplayEntrySchema,
    QuestionSchema,
)


class FlowItemMapper:
    """Mapper for flow item domain -> response schema conversion."""

    def to_response(self, item: FlowItem) -> FlowItemResponse:
        response = FlowItemResponse(
            kind=item.kind,
            phase_index=item.phase_index,
            step_index=item.step_index,
            step_id=item.step.id,
            step_type=item.step.type.value,
            label=item.position_label(),
            step_guidance=self._guidance(item.step.guidance),
        )
        match item:
            case QuestionItem():
                response.question_index = item.question_index
                response.question = QuestionSchema.model_validate(asdict(item.question))
                response.item_type = item.item_type
                response.item_index = item.item_index
                response.item_count = item.item_count
            case Phase4SubtaskItem():
                response.subtask_index = item.subtask_index
                response.subtask = Phase4SubtaskEntrySchema.model_validate(asdict(item.entry))
            case Phase5SentenceItem():
                response.sentence_index = item.sentence_index
                response.sentence = item.sentence
            case Phase5PhraseClozeItem():
                response.phrase_id = item.phrase_id
                response.round_index = item.round_index
                response.round_count = item.round_count
                response.sentence = item.sentence
                response.answer = item.answer
                response.text_hint = item.text_hint
                response.audio_hint = item.audio_hint
            case Phase6RoleplayItem():
                response.roleplay = Phase6RoleplayEntrySchema.model_validate(asdict(item.roleplay))
            case _:
                assert_never(item)
        return response

    def guidance_to_response(self, guidance_item: PhaseGuidanceItem) -> PhaseGuidanceResponse:
        guidance = guidance_item.phase.guidance
        assert guidance is not None
        return PhaseGuidanceResponse(
            phase_index=guidance_item.phase_index,
            phase_type=guidance_item.phase.type.value,
            guidance=GuidanceSchema(purpose=guidance.purpose, description=guidance.description),
        )

    def flow_to_response(self, task_id: str, title: str, flow: TaskFlow) -> TaskFlowResponse:
        return TaskFlowResponse(
            task_id=task_id,
            title=title,
            guidance_items=[self.guidance_to_response(item) for item in flow.guidance_items],
            flow_items=[self.to_response(item) for item in flow.flow_items],
        )

    def _guidance(self, guidance: Guidance | None) -> GuidanceSchema | None:
        if guidance is None:
            return None
        return GuidanceSchema(purpose=guidance.purpose, description=guidance.description)
