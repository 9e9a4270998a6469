"""Use case for loading and flattening the configured task."""

from dataclasses import dataclass

import structlog

from taskflow.application.task.protocols.task_source import TaskSourceProtocol
from taskflow.domain.task.entities import TaskPackage
from taskflow.domain.task.services.flow_flattener import FlowFlattener
from taskflow.domain.task.services.task_integrity_checker import (
    IntegrityIssue,
    TaskIntegrityChecker,
)
from taskflow.domain.task.value_objects import TaskFlow

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoadedTask:
    """DTO for a loaded task with its flattened flow and integrity report."""

    task: TaskPackage
    flow: TaskFlow
    issues: tuple[IntegrityIssue, ...] = ()


class LoadTaskUseCase:
    """Use case for loading the task document and deriving its flow."""

    def __init__(
        self,
        task_source: TaskSourceProtocol,
        flattener: FlowFlattener,
        integrity_checker: TaskIntegrityChecker,
    ) -> None:
        """Initialize use case with the task source and domain services."""
        self.task_source = task_source
        self.flattener = flattener
        self.integrity_checker = integrity_checker

    def load(self) -> LoadedTask:
        """
        Load the task and flatten it.

        Referential gaps are logged as warnings and never fail the load.

        Returns:
            LoadedTask with a freshly flattened flow

        Raises:
            TaskLoadError: If the task source fails
        """
        task = self.task_source.load()
        flow = self.flattener.flatten(task)
        issues = tuple(self.integrity_checker.check(task, flow))

        for issue in issues:
            logger.warning(
                "task_integrity_issue",
                task_id=task.id,
                code=issue.code,
                path=issue.path,
                detail=issue.message,
            )

        logger.info(
            "loaded_task",
            task_id=task.id,
            source=self.task_source.description,
            phases=len(task.phases),
            flow_items=len(flow.flow_items),
            guidance_items=len(flow.guidance_items),
            integrity_issues=len(issues),
        )
        return LoadedTask(task=task, flow=flow, issues=issues)
