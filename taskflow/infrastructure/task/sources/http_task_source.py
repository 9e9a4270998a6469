"""Task source fetching the JSON document over HTTP."""

import logging
from typing import Any

import httpx

from taskflow.exceptions import TaskLoadError
from taskflow.infrastructure.task.mappers.task_package_mapper import TaskPackageMapper
from taskflow.infrastructure.task.sources.base import TaskSource

logger = logging.getLogger(__name__)


class HttpTaskSource(TaskSource):
    """HTTP client for the task endpoint.

    Performs a single GET per load. There is no retry: a failed fetch is
    terminal for that load and the caller starts over.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        mapper: TaskPackageMapper | None = None,
    ) -> None:
        super().__init__(mapper)
        self.url = url
        self.timeout = timeout
        self.transport = transport
        self.description = url

    def fetch_document(self) -> dict[str, Any]:
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.url, headers={"Accept": "application/json"})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TaskLoadError(
                f"server responded with {e.response.status_code}", source=self.description
            ) from e
        except httpx.HTTPError as e:
            raise TaskLoadError(f"request failed ({e!s})", source=self.description) from e

        try:
            document = response.json()
        except ValueError as e:
            raise TaskLoadError("response is not valid JSON", source=self.description) from e

        if not isinstance(document, dict):
            raise TaskLoadError("document is not a JSON object", source=self.description)
        logger.info(f"Fetched task document from {self.url}")
        return document
