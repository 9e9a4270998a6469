from .guidance import Guidance
from .phase import Phase, PhaseType
from .question import Question, QuestionOption, QuestionStem, QuestionType
from .steps import (
    DialogDistractor,
    DialogHint,
    DistractorOption,
    Phase1TaskEntryStep,
    Phase2WarmupStep,
    Phase3PhrasesStep,
    Phase3SentencesStep,
    Phase3WordsStep,
    Phase4SubtaskEntry,
    Phase4SubtasksStep,
    Phase5PhrasesStep,
    Phase5SentencesStep,
    Phase5WordsStep,
    Phase6RoleplayEntry,
    Phase6RoleplayStep,
    PhraseClozeEntry,
    QuestionGroups,
    Step,
    StepType,
)
from .task_model import (
    AssetLibrary,
    CompletionCriteria,
    Dialogue,
    DialogueScope,
    DialogueTurn,
    Difficulty,
    MediaAsset,
    Role,
    Subtask,
    TaskModel,
    TltKind,
    Tlts,
)
from .task_package import TaskPackage, Translation

__all__ = [
    "AssetLibrary",
    "CompletionCriteria",
    "DialogDistractor",
    "DialogHint",
    "Dialogue",
    "DialogueScope",
    "DialogueTurn",
    "Difficulty",
    "DistractorOption",
    "Guidance",
    "MediaAsset",
    "Phase",
    "Phase1TaskEntryStep",
    "Phase2WarmupStep",
    "Phase3PhrasesStep",
    "Phase3SentencesStep",
    "Phase3WordsStep",
    "Phase4SubtaskEntry",
    "Phase4SubtasksStep",
    "Phase5PhrasesStep",
    "Phase5SentencesStep",
    "Phase5WordsStep",
    "Phase6RoleplayEntry",
    "Phase6RoleplayStep",
    "PhaseType",
    "PhraseClozeEntry",
    "Question",
    "QuestionGroups",
    "QuestionOption",
    "QuestionStem",
    "QuestionType",
    "Role",
    "Step",
    "StepType",
    "Subtask",
    "TaskModel",
    "TaskPackage",
    "TltKind",
    "Tlts",
    "Translation",
]
