from .flow_item_mapper import FlowItemMapper
from .task_package_mapper import TaskPackageMapper

__all__ = ["FlowItemMapper", "TaskPackageMapper"]
