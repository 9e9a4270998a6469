"""Pydantic schemas for the task package JSON document.

The wire format is camelCase; fields are declared in snake_case and
aliased. Optional collections default to empty so that a missing mapping
or array is never an error.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from taskflow.domain.task.entities import (
    DialogueScope,
    Difficulty,
    PhaseType,
    QuestionType,
)


class CamelModel(BaseModel):
    """Base schema accepting camelCase keys and ignoring unknown ones."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class GuidanceSchema(CamelModel):
    purpose: str = Field(..., description="Design intent of the phase, step or question")
    description: str = Field(..., description="Detailed description of the design intent")


class TranslationSchema(CamelModel):
    native: str
    ipa: str | None = None


class RoleSchema(CamelModel):
    id: str | None = None
    title: str
    description: str | None = None


class TltsSchema(CamelModel):
    words: dict[str, str] = Field(default_factory=dict)
    phrases: dict[str, str] = Field(default_factory=dict)
    sentences: dict[str, str] = Field(default_factory=dict)


class SubtaskSchema(CamelModel):
    id: str
    title: str
    goal: str = ""
    description: str = ""


class DialogueTurnSchema(CamelModel):
    role: str
    text: str
    audio_asset_id: str | None = None


class DialogueSchema(CamelModel):
    id: str
    scope: DialogueScope
    difficulty: Difficulty | None = None
    subtask_id: str | None = None
    turns: list[DialogueTurnSchema] = Field(default_factory=list)


class MediaAssetSchema(CamelModel):
    prompt: str | None = None
    url: str | None = None
    base64: str | None = None


class AssetLibrarySchema(CamelModel):
    images: dict[str, MediaAssetSchema] = Field(default_factory=dict)
    audios: dict[str, MediaAssetSchema] = Field(default_factory=dict)


class CompletionCriteriaSchema(CamelModel):
    pass_score: float = 0
    dimensions: list[str] = Field(default_factory=list)


class TaskModelSchema(CamelModel):
    physical_scene: str = ""
    industry: str | None = None
    roles: list[RoleSchema] = Field(default_factory=list)
    tlts: TltsSchema = Field(default_factory=TltsSchema)
    behavioral_chain: list[str] = Field(default_factory=list)
    subtasks: list[SubtaskSchema] = Field(default_factory=list)
    dialogues: list[DialogueSchema] = Field(default_factory=list)
    assets: AssetLibrarySchema = Field(default_factory=AssetLibrarySchema)
    completion_criteria: CompletionCriteriaSchema = Field(default_factory=CompletionCriteriaSchema)
    culture_model: str = ""
    feedback_principles: list[str] = Field(default_factory=list)


class QuestionStemSchema(CamelModel):
    text: str | None = None
    audio_asset_id: str | None = None
    image_asset_id: str | None = None


class QuestionOptionSchema(CamelModel):
    text: str | None = None
    audio_asset_id: str | None = None
    image_asset_id: str | None = None
    explanation: str | None = None


class QuestionSchema(CamelModel):
    type: QuestionType
    guidance: GuidanceSchema | None = None
    stem: QuestionStemSchema = Field(default_factory=QuestionStemSchema)
    options: list[QuestionOptionSchema] = Field(default_factory=list)
    correct_option_indexes: list[int] = Field(
        ..., min_length=1, description="Indexes into options; more than one means multi-select"
    )
    hint: str | None = None

    @model_validator(mode="after")
    def validate_correct_option_indexes(self) -> "QuestionSchema":
        """Correct indexes must be unique and point into options."""
        indexes = self.correct_option_indexes
        if len(set(indexes)) != len(indexes):
            msg = "correctOptionIndexes must be unique"
            raise ValueError(msg)
        for index in indexes:
            if not 0 <= index < len(self.options):
                msg = f"correctOptionIndexes entry {index} is out of range"
                raise ValueError(msg)
        return self


QuestionGroupsSchema = dict[str, list[QuestionSchema]]


class StepSchema(CamelModel):
    id: str
    guidance: GuidanceSchema | None = None


class Phase1TaskEntryStepSchema(StepSchema):
    type: Literal["phase1_task_entry"]
    call_to_action_text: str = ""
    entry_questions: list[QuestionSchema] = Field(default_factory=list)


class Phase2WarmupStepSchema(StepSchema):
    type: Literal["phase2_warmup"]
    warmup_questions: list[QuestionSchema] = Field(default_factory=list)


class Phase3WordsStepSchema(StepSchema):
    type: Literal["phase3_words"]
    word_questions: QuestionGroupsSchema = Field(default_factory=dict)


class Phase3PhrasesStepSchema(StepSchema):
    type: Literal["phase3_phrases"]
    phrase_questions: QuestionGroupsSchema = Field(default_factory=dict)


class Phase3SentencesStepSchema(StepSchema):
    type: Literal["phase3_sentences"]
    sentence_questions: QuestionGroupsSchema = Field(default_factory=dict)


class DistractorOptionSchema(CamelModel):
    id: str
    text: str


class DialogDistractorSchema(CamelModel):
    index: int = Field(..., ge=0, description="Index of the dialogue turn")
    options: list[DistractorOptionSchema] = Field(default_factory=list)


class Phase4SubtaskEntrySchema(CamelModel):
    subtask_id: str
    allowed_roles: list[str] = Field(default_factory=list)
    dialogue_id: str
    dialog_distractors: list[DialogDistractorSchema] = Field(default_factory=list)


class Phase4SubtasksStepSchema(StepSchema):
    type: Literal["phase4_subtasks"]
    subtasks: list[Phase4SubtaskEntrySchema] = Field(default_factory=list)


class Phase5WordsStepSchema(StepSchema):
    type: Literal["phase5_words"]
    word_questions: QuestionGroupsSchema = Field(default_factory=dict)


class PhraseClozeEntrySchema(CamelModel):
    sentences: list[str] = Field(default_factory=list)
    answer: str = ""
    text_hint: str | None = None
    audio_hint: str | None = None


class Phase5PhrasesStepSchema(StepSchema):
    type: Literal["phase5_phrases"]
    phrase_questions: QuestionGroupsSchema = Field(default_factory=dict)
    phrase_clozes: dict[str, PhraseClozeEntrySchema] = Field(default_factory=dict)


class Phase5SentencesStepSchema(StepSchema):
    type: Literal["phase5_sentences"]
    sentences: list[str] = Field(default_factory=list)


class DialogHintSchema(CamelModel):
    index: int = Field(..., ge=0, description="Index of the dialogue turn")
    text: str


class Phase6RoleplayEntrySchema(CamelModel):
    allowed_roles: list[str] = Field(default_factory=list)
    dialogue_id: str
    difficulty: Difficulty | None = None
    dialog_hints: list[DialogHintSchema] = Field(default_factory=list)


class Phase6RoleplayStepSchema(StepSchema):
    type: Literal["phase6_roleplay"]
    roleplays: list[Phase6RoleplayEntrySchema] = Field(default_factory=list)


AnyStepSchema = Annotated[
    Phase1TaskEntryStepSchema
    | Phase2WarmupStepSchema
    | Phase3WordsStepSchema
    | Phase3PhrasesStepSchema
    | Phase3SentencesStepSchema
    | Phase4SubtasksStepSchema
    | Phase5WordsStepSchema
    | Phase5PhrasesStepSchema
    | Phase5SentencesStepSchema
    | Phase6RoleplayStepSchema,
    Field(discriminator="type"),
]


class PhaseSchema(CamelModel):
    type: PhaseType
    guidance: GuidanceSchema | None = None
    steps: list[AnyStepSchema] = Field(default_factory=list)


class TaskPackageSchema(CamelModel):
    """Schema for the whole task document."""

    version: str
    id: str
    title: str
    description: str = ""
    task_model_language: str = ""
    native_language: str = ""
    task_model: TaskModelSchema
    phases: list[PhaseSchema] = Field(default_factory=list)
    translations: dict[str, TranslationSchema] = Field(default_factory=dict)
