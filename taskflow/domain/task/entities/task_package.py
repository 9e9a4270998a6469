"""
TaskPackage aggregate root.
"""

from dataclasses import dataclass, field

from .phase import Phase
from .task_model import TaskModel


@dataclass(frozen=True)
class Translation:
    native: str
    ipa: str | None = None


@dataclass(frozen=True)
class TaskPackage:
    """
    Root of a loaded task document.

    Business Rules:
    - Exactly one task model per package
    - Phases are ordered and fixed once loaded
    - Translations are sparse; a missing key is not an error
    """

    version: str
    id: str
    title: str
    task_model: TaskModel
    phases: tuple[Phase, ...] = ()
    description: str = ""
    task_model_language: str = ""
    native_language: str = ""
    translations: dict[str, Translation] = field(default_factory=dict)

    def phase_at(self, phase_index: int) -> Phase | None:
        if 0 <= phase_index < len(self.phases):
            return self.phases[phase_index]
        return None
