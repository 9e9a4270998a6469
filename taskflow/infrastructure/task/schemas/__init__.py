"""Task context schemas."""

from taskflow.infrastructure.task.schemas.flow_schemas import (
    FlowItemResponse,
    PhaseGuidanceResponse,
    TaskFlowResponse,
)
from taskflow.infrastructure.task.schemas.task_package_schemas import (
    AnyStepSchema,
    GuidanceSchema,
    PhaseSchema,
    QuestionSchema,
    TaskPackageSchema,
)

__all__ = [
    "AnyStepSchema",
    "FlowItemResponse",
    "GuidanceSchema",
    "PhaseGuidanceResponse",
    "PhaseSchema",
    "QuestionSchema",
    "TaskFlowResponse",
    "TaskPackageSchema",
]
