"""
Flow items: the navigable units derived from a task package.

Flow items are built fresh by the flattener on every load and never
mutated. Every item points back to its source through ``phase_index``,
``step_index`` and the ``step`` it came from; it never copies task model
content, only ids.
"""

from dataclasses import dataclass
from typing import ClassVar, Literal

from taskflow.domain.task.entities import (
    Phase,
    Phase4SubtaskEntry,
    Phase4SubtasksStep,
    Phase5PhrasesStep,
    Phase5SentencesStep,
    Phase6RoleplayEntry,
    Phase6RoleplayStep,
    Question,
    Step,
)

FlowItemKind = Literal[
    "question",
    "phase4_subtask",
    "phase5_sentence",
    "phase5_phrase_cloze",
    "phase6_roleplay",
]


def _base_label(phase_index: int, step_index: int) -> str:
    return f"Phase {phase_index + 1} / Step {step_index + 1}"


@dataclass(frozen=True)
class QuestionItem:
    """
    One question of a question-based step.

    The group label (``item_type``, 1-based ``item_index``, ``item_count``)
    is only set when the step's id-to-questions mapping has more than one key.
    """

    kind: ClassVar[FlowItemKind] = "question"

    phase_index: int
    step_index: int
    question_index: int
    question: Question
    step: Step
    item_type: str | None = None
    item_index: int | None = None
    item_count: int | None = None

    @property
    def has_group_label(self) -> bool:
        return self.item_type is not None

    def position_label(self) -> str:
        label = _base_label(self.phase_index, self.step_index)
        label += f" / Question {self.question_index + 1}"
        if self.item_type is not None:
            label += f" / {self.item_type.capitalize()} {self.item_index} of {self.item_count}"
        return label


@dataclass(frozen=True)
class Phase4SubtaskItem:
    """A subtask dialogue. Turn pacing is driven from the referenced dialogue."""

    kind: ClassVar[FlowItemKind] = "phase4_subtask"

    phase_index: int
    step_index: int
    subtask_index: int
    step: Phase4SubtasksStep

    @property
    def entry(self) -> Phase4SubtaskEntry:
        return self.step.subtasks[self.subtask_index]

    def position_label(self) -> str:
        return f"Subtask {self.subtask_index + 1}: {self.entry.subtask_id}"


@dataclass(frozen=True)
class Phase5SentenceItem:
    """A sentence-ordering exercise. ``sentence`` is empty for the placeholder slot."""

    kind: ClassVar[FlowItemKind] = "phase5_sentence"

    phase_index: int
    step_index: int
    sentence_index: int
    sentence: str
    step: Phase5SentencesStep

    @property
    def is_placeholder(self) -> bool:
        return not self.sentence.strip()

    def position_label(self) -> str:
        return f"Sentence {self.sentence_index + 1}"


@dataclass(frozen=True)
class Phase5PhraseClozeItem:
    """One cloze round for a phrase."""

    kind: ClassVar[FlowItemKind] = "phase5_phrase_cloze"

    phase_index: int
    step_index: int
    phrase_id: str
    round_index: int
    round_count: int
    sentence: str
    answer: str
    step: Phase5PhrasesStep
    text_hint: str | None = None
    audio_hint: str | None = None

    def position_label(self) -> str:
        return f"Phrase {self.phrase_id} - Round {self.round_index + 1} of {self.round_count}"


@dataclass(frozen=True)
class Phase6RoleplayItem:
    """The roleplay of a step; only the first roleplay entry is played."""

    kind: ClassVar[FlowItemKind] = "phase6_roleplay"

    phase_index: int
    step_index: int
    step: Phase6RoleplayStep

    @property
    def roleplay(self) -> Phase6RoleplayEntry:
        return self.step.roleplays[0]

    def position_label(self) -> str:
        return "Roleplay"


FlowItem = (
    QuestionItem
    | Phase4SubtaskItem
    | Phase5SentenceItem
    | Phase5PhraseClozeItem
    | Phase6RoleplayItem
)


@dataclass(frozen=True)
class PhaseGuidanceItem:
    """An interstitial shown once before the first flow item of ``phase``."""

    phase_index: int
    phase: Phase


@dataclass(frozen=True)
class TaskFlow:
    """Output of the flattener: guidance interstitials plus the ordered flow items."""

    guidance_items: tuple[PhaseGuidanceItem, ...] = ()
    flow_items: tuple[FlowItem, ...] = ()

    def __len__(self) -> int:
        return len(self.flow_items)

    def first_index_for_phase(self, phase_index: int) -> int | None:
        """Index of the first flow item produced by ``phase_index``, or None."""
        for index, item in enumerate(self.flow_items):
            if item.phase_index == phase_index:
                return index
        return None

    def guidance_for(self, phase_index: int) -> PhaseGuidanceItem | None:
        for guidance_item in self.guidance_items:
            if guidance_item.phase_index == phase_index:
                return guidance_item
        return None

    def has_guidance(self, phase_index: int) -> bool:
        return self.guidance_for(phase_index) is not None

    def items_for_step(self, phase_index: int, step_index: int) -> list[FlowItem]:
        return [
            item
            for item in self.flow_items
            if item.phase_index == phase_index and item.step_index == step_index
        ]
