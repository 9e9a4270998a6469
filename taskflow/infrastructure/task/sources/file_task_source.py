"""Task source reading a JSON document from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from taskflow.exceptions import TaskLoadError
from taskflow.infrastructure.task.mappers.task_package_mapper import TaskPackageMapper
from taskflow.infrastructure.task.sources.base import TaskSource

logger = logging.getLogger(__name__)


class FileTaskSource(TaskSource):
    """Reads the task document from a local JSON file."""

    def __init__(self, path: Path | str, mapper: TaskPackageMapper | None = None) -> None:
        super().__init__(mapper)
        self.path = Path(path)
        self.description = str(self.path)

    def fetch_document(self) -> dict[str, Any]:
        try:
            with self.path.open(encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as e:
            raise TaskLoadError("file not found", source=self.description) from e
        except OSError as e:
            raise TaskLoadError(f"cannot read file ({e.strerror})", source=self.description) from e
        except json.JSONDecodeError as e:
            raise TaskLoadError(f"invalid JSON ({e.msg})", source=self.description) from e
        except UnicodeDecodeError as e:
            raise TaskLoadError(
                f"file is not valid UTF-8 (byte {e.start})", source=self.description
            ) from e

        if not isinstance(document, dict):
            raise TaskLoadError("document is not a JSON object", source=self.description)
        logger.debug(f"Read task document from {self.path}")
        return document
