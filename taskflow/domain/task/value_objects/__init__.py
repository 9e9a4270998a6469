from .flow_items import (
    FlowItem,
    FlowItemKind,
    Phase4SubtaskItem,
    Phase5PhraseClozeItem,
    Phase5SentenceItem,
    Phase6RoleplayItem,
    PhaseGuidanceItem,
    QuestionItem,
    TaskFlow,
)

__all__ = [
    "FlowItem",
    "FlowItemKind",
    "Phase4SubtaskItem",
    "Phase5PhraseClozeItem",
    "Phase5SentenceItem",
    "Phase6RoleplayItem",
    "PhaseGuidanceItem",
    "QuestionItem",
    "TaskFlow",
]
