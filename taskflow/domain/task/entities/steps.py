"""
Step entities.

A step is a closed union of ten variants, one per step type. Each variant
carries its own payload shape; ``type`` is a class-level discriminant so
variants can be matched by class.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar

from .guidance import Guidance
from .question import Question
from .task_model import Difficulty


class StepType(StrEnum):
    PHASE1_TASK_ENTRY = "phase1_task_entry"
    PHASE2_WARMUP = "phase2_warmup"
    PHASE3_WORDS = "phase3_words"
    PHASE3_PHRASES = "phase3_phrases"
    PHASE3_SENTENCES = "phase3_sentences"
    PHASE4_SUBTASKS = "phase4_subtasks"
    PHASE5_WORDS = "phase5_words"
    PHASE5_PHRASES = "phase5_phrases"
    PHASE5_SENTENCES = "phase5_sentences"
    PHASE6_ROLEPLAY = "phase6_roleplay"


# Question mappings keyed by word, phrase or sentence id.
# Iteration order is navigation order.
QuestionGroups = dict[str, tuple[Question, ...]]


@dataclass(frozen=True)
class Phase1TaskEntryStep:
    type: ClassVar[StepType] = StepType.PHASE1_TASK_ENTRY

    id: str
    call_to_action_text: str = ""
    entry_questions: tuple[Question, ...] = ()
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase2WarmupStep:
    type: ClassVar[StepType] = StepType.PHASE2_WARMUP

    id: str
    warmup_questions: tuple[Question, ...] = ()
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase3WordsStep:
    type: ClassVar[StepType] = StepType.PHASE3_WORDS

    id: str
    word_questions: QuestionGroups = field(default_factory=dict)
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase3PhrasesStep:
    type: ClassVar[StepType] = StepType.PHASE3_PHRASES

    id: str
    phrase_questions: QuestionGroups = field(default_factory=dict)
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase3SentencesStep:
    type: ClassVar[StepType] = StepType.PHASE3_SENTENCES

    id: str
    sentence_questions: QuestionGroups = field(default_factory=dict)
    guidance: Guidance | None = None


@dataclass(frozen=True)
class DistractorOption:
    id: str
    text: str


@dataclass(frozen=True)
class DialogDistractor:
    """Wrong alternatives offered for the dialogue turn at ``index``."""

    index: int
    options: tuple[DistractorOption, ...] = ()


@dataclass(frozen=True)
class Phase4SubtaskEntry:
    """One subtask dialogue practice: the learner picks lines among distractors."""

    subtask_id: str
    dialogue_id: str
    allowed_roles: tuple[str, ...] = ()
    dialog_distractors: tuple[DialogDistractor, ...] = ()

    def distractors_by_turn(self) -> dict[int, tuple[DistractorOption, ...]]:
        # Later entries for the same turn index win.
        return {distractor.index: distractor.options for distractor in self.dialog_distractors}


@dataclass(frozen=True)
class Phase4SubtasksStep:
    type: ClassVar[StepType] = StepType.PHASE4_SUBTASKS

    id: str
    subtasks: tuple[Phase4SubtaskEntry, ...] = ()
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase5WordsStep:
    type: ClassVar[StepType] = StepType.PHASE5_WORDS

    id: str
    word_questions: QuestionGroups = field(default_factory=dict)
    guidance: Guidance | None = None


@dataclass(frozen=True)
class PhraseClozeEntry:
    """
    Cloze rounds for one phrase.

    Every sentence has the same key term removed; ``answer`` is that term
    and the hints point the learner at it.
    """

    sentences: tuple[str, ...] = ()
    answer: str = ""
    text_hint: str | None = None
    audio_hint: str | None = None


@dataclass(frozen=True)
class Phase5PhrasesStep:
    type: ClassVar[StepType] = StepType.PHASE5_PHRASES

    id: str
    phrase_questions: QuestionGroups = field(default_factory=dict)
    phrase_clozes: dict[str, PhraseClozeEntry] = field(default_factory=dict)
    guidance: Guidance | None = None


@dataclass(frozen=True)
class Phase5SentencesStep:
    type: ClassVar[StepType] = StepType.PHASE5_SENTENCES

    id: str
    sentences: tuple[str, ...] = ()
    guidance: Guidance | None = None


@dataclass(frozen=True)
class DialogHint:
    index: int
    text: str


@dataclass(frozen=True)
class Phase6RoleplayEntry:
    """A free-text roleplay over one dialogue, with hints for some turns."""

    dialogue_id: str
    allowed_roles: tuple[str, ...] = ()
    difficulty: Difficulty | None = None
    dialog_hints: tuple[DialogHint, ...] = ()

    def hints_by_turn(self) -> dict[int, str]:
        return {hint.index: hint.text for hint in self.dialog_hints}


@dataclass(frozen=True)
class Phase6RoleplayStep:
    type: ClassVar[StepType] = StepType.PHASE6_ROLEPLAY

    id: str
    roleplays: tuple[Phase6RoleplayEntry, ...] = ()
    guidance: Guidance | None = None


Step = (
    Phase1TaskEntryStep
    | Phase2WarmupStep
    | Phase3WordsStep
    | Phase3PhrasesStep
    | Phase3SentencesStep
    | Phase4SubtasksStep
    | Phase5WordsStep
    | Phase5PhrasesStep
    | Phase5SentencesStep
    | Phase6RoleplayStep
)
