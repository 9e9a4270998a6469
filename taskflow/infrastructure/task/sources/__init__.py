from .base import TaskSource
from .file_task_source import FileTaskSource
from .http_task_source import HttpTaskSource

__all__ = ["FileTaskSource", "HttpTaskSource", "TaskSource"]
