"""Base class for task document sources."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError

from taskflow.domain.task.entities import TaskPackage
from taskflow.exceptions import TaskLoadError
from taskflow.infrastructure.task.mappers.task_package_mapper import TaskPackageMapper
from taskflow.infrastructure.task.schemas.task_package_schemas import TaskPackageSchema


class TaskSource(ABC):
    """
    Delivers one whole task document.

    Subclasses only fetch raw JSON; validation and mapping to the domain
    model happen here so every source fails the same way.
    """

    description: str = "task source"

    def __init__(self, mapper: TaskPackageMapper | None = None) -> None:
        self.mapper = mapper or TaskPackageMapper()

    @abstractmethod
    def fetch_document(self) -> dict[str, Any]:
        """
        Fetch the raw task document.

        Raises:
            TaskLoadError: If the document cannot be fetched or decoded
        """

    def load_schema(self) -> TaskPackageSchema:
        """Fetch and validate the document."""
        document = self.fetch_document()
        try:
            return TaskPackageSchema.model_validate(document)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            reason = (
                f"invalid task document ({e.error_count()} errors, "
                f"first at {location}: {first['msg']})"
            )
            raise TaskLoadError(reason, source=self.description) from e

    def load(self) -> TaskPackage:
        """Fetch, validate and map the document to the domain model."""
        return self.mapper.to_domain(self.load_schema())
