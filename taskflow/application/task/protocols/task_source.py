"""Protocol for task document sources."""

from typing import Protocol

from taskflow.domain.task.entities import TaskPackage


class TaskSourceProtocol(Protocol):
    """Protocol for loading one whole task document."""

    description: str

    def load(self) -> TaskPackage:
        """
        Load the task document.

        Returns:
            The validated task package

        Raises:
            TaskLoadError: If the document cannot be fetched, decoded or validated
        """
        ...
