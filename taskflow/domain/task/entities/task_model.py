"""
Task model (phase 0) entities.

The task model is the content library every step refers to by id:
roles, target learning tokens, subtasks, canonical dialogues and the
deduplicated asset library. Completion criteria and culture/feedback
fields are metadata carried through untouched.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class DialogueScope(StrEnum):
    SUBTASK = "subtask"
    FULL_TASK = "full_task"


class Difficulty(StrEnum):
    A = "a"
    B = "b"
    C = "c"


class TltKind(StrEnum):
    """The three target learning token mappings."""

    WORD = "word"
    PHRASE = "phrase"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class Role:
    """A speaking role, e.g. ``sales`` or ``customer``."""

    title: str
    id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Tlts:
    """Target learning tokens keyed by id, one mapping per kind."""

    words: dict[str, str] = field(default_factory=dict)
    phrases: dict[str, str] = field(default_factory=dict)
    sentences: dict[str, str] = field(default_factory=dict)

    def mapping(self, kind: TltKind) -> dict[str, str]:
        match kind:
            case TltKind.WORD:
                return self.words
            case TltKind.PHRASE:
                return self.phrases
            case TltKind.SENTENCE:
                return self.sentences


@dataclass(frozen=True)
class Subtask:
    id: str
    title: str
    goal: str
    description: str


@dataclass(frozen=True)
class DialogueTurn:
    """Smallest unit of a dialogue: one role speaking one line."""

    role: str
    text: str
    audio_asset_id: str | None = None


@dataclass(frozen=True)
class Dialogue:
    """A canonical dialogue script, referenced from steps by ``id``."""

    id: str
    scope: DialogueScope
    turns: tuple[DialogueTurn, ...] = ()
    difficulty: Difficulty | None = None
    subtask_id: str | None = None


@dataclass(frozen=True)
class MediaAsset:
    """Image or audio asset; either ``url`` or inline ``base64`` carries the data."""

    prompt: str | None = None
    url: str | None = None
    base64: str | None = None

    @property
    def source(self) -> str | None:
        return self.url or self.base64


@dataclass(frozen=True)
class AssetLibrary:
    """Global asset store; everything else refers to assets by id."""

    images: dict[str, MediaAsset] = field(default_factory=dict)
    audios: dict[str, MediaAsset] = field(default_factory=dict)


@dataclass(frozen=True)
class CompletionCriteria:
    pass_score: float = 0
    dimensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class TaskModel:
    """Phase 0 content library. Single source of truth for dialogues, assets and tlts."""

    physical_scene: str = ""
    industry: str | None = None
    roles: tuple[Role, ...] = ()
    tlts: Tlts = field(default_factory=Tlts)
    behavioral_chain: tuple[str, ...] = ()
    subtasks: tuple[Subtask, ...] = ()
    dialogues: tuple[Dialogue, ...] = ()
    assets: AssetLibrary = field(default_factory=AssetLibrary)
    completion_criteria: CompletionCriteria = field(default_factory=CompletionCriteria)
    culture_model: str = ""
    feedback_principles: tuple[str, ...] = ()
