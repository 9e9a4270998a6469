from .flow_flattener import FlowFlattener
from .task_integrity_checker import IntegrityIssue, TaskIntegrityChecker
from .task_model_resolver import ResolvedAsset, TaskModelResolver

__all__ = [
    "FlowFlattener",
    "IntegrityIssue",
    "ResolvedAsset",
    "TaskIntegrityChecker",
    "TaskModelResolver",
]
