"""API routes for the task document and its flattened flow."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from taskflow.application.task.use_cases.load_task_use_case import LoadTaskUseCase
from taskflow.core import container
from taskflow.domain.common.exceptions import DomainError
from taskflow.exceptions import TaskflowError
from taskflow.infrastructure.common.di import inject_use_case
from taskflow.infrastructure.task.mappers.flow_item_mapper import FlowItemMapper
from taskflow.infrastructure.task.schemas import TaskFlowResponse, TaskPackageSchema
from taskflow.infrastructure.task.sources.base import TaskSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/task", tags=["task"])


@router.get("", response_model=TaskPackageSchema, response_model_by_alias=True)
def get_task(
    task_source: TaskSource = Depends(inject_use_case(container.task_source)),
) -> TaskPackageSchema:
    """
    Serve the configured task document.

    The document is validated before it is served, so a client receives
    either a well-formed task or a load error.

    Raises:
        TaskLoadError: If the task document cannot be loaded
    """
    return task_source.load_schema()


@router.get("/flow", response_model=TaskFlowResponse, status_code=status.HTTP_200_OK)
def get_task_flow(
    use_case: LoadTaskUseCase = Depends(inject_use_case(container.load_task_use_case)),
    mapper: FlowItemMapper = Depends(inject_use_case(container.flow_item_mapper)),
) -> TaskFlowResponse:
    """
    Flatten the configured task into guidance items and flow items.

    Returns:
        The flattened flow, in navigation order

    Raises:
        HTTPException: If the flow cannot be built
    """
    try:
        loaded = use_case.load()
        return mapper.flow_to_response(loaded.task.id, loaded.task.title, loaded.flow)
    except (TaskflowError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to flatten task: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
