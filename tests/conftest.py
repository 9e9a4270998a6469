"""Pytest configuration and fixtures."""

import copy
import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from taskflow.config import SAMPLE_TASK_PATH
from taskflow.core import container
from taskflow.domain.task.entities import TaskPackage
from taskflow.infrastructure.session.repositories import InMemorySessionRepository
from taskflow.infrastructure.task.mappers import TaskPackageMapper
from taskflow.infrastructure.task.schemas import TaskPackageSchema
from taskflow.infrastructure.task.sources import FileTaskSource, TaskSource
from taskflow.main import app

with SAMPLE_TASK_PATH.open(encoding="utf-8") as _f:
    _SAMPLE_DOCUMENT: dict[str, Any] = json.load(_f)


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A fresh copy of the bundled sample task document."""
    return copy.deepcopy(_SAMPLE_DOCUMENT)


@pytest.fixture
def sample_task(sample_document: dict[str, Any]) -> TaskPackage:
    """The sample task document mapped to the domain model."""
    return TaskPackageMapper().to_domain(TaskPackageSchema.model_validate(sample_document))


@pytest.fixture
def write_task_document(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a task document to a temporary JSON file and return its path."""

    def write(document: Any) -> Path:
        path = tmp_path / "task.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return write


@pytest.fixture
def use_task_source() -> Generator[Callable[[TaskSource], None], None, None]:
    """Swap the container's task source for the duration of a test."""

    def use(source: TaskSource) -> None:
        container.task_source.override(providers.Object(source))

    yield use

    container.task_source.reset_override()


@pytest.fixture
def use_task_document(
    use_task_source: Callable[[TaskSource], None],
    write_task_document: Callable[[Any], Path],
) -> Callable[[Any], None]:
    """Serve the given document from the container's task source."""

    def use(document: Any) -> None:
        use_task_source(FileTaskSource(write_task_document(document)))

    return use


@pytest.fixture
def client() -> Generator[TestClient, Any, None]:
    """Create a test client with an empty session store."""
    container.session_repository.override(providers.Singleton(InMemorySessionRepository))

    with TestClient(app) as test_client:
        yield test_client

    container.session_repository.reset_override()
