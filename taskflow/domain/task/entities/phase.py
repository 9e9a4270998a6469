"""Phase entity: one ordered group of steps in the learning flow."""

from dataclasses import dataclass
from enum import StrEnum

from .guidance import Guidance
from .steps import Step


class PhaseType(StrEnum):
    PHASE1 = "phase1"
    PHASE2 = "phase2"
    PHASE3 = "phase3"
    PHASE4 = "phase4"
    PHASE5 = "phase5"
    PHASE6 = "phase6"


@dataclass(frozen=True)
class Phase:
    """
    A learning phase.

    ``guidance`` is shown once, before the phase's first flow item.
    """

    type: PhaseType
    steps: tuple[Step, ...] = ()
    guidance: Guidance | None = None
