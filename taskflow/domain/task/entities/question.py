"""
Question entity shared by every question-based step.
"""

from dataclasses import dataclass
from enum import StrEnum

from .guidance import Guidance


class QuestionType(StrEnum):
    """Informational tag describing stem and option media. Never affects flattening."""

    TEXT_TEXT = "text_text"
    TEXT_IMAGE = "text_image"
    TEXT_CLOZE = "text_cloze"
    AUDIO_TEXT = "audio_text"


@dataclass(frozen=True)
class QuestionStem:
    """Question prompt: text and/or references into the asset library."""

    text: str | None = None
    audio_asset_id: str | None = None
    image_asset_id: str | None = None


@dataclass(frozen=True)
class QuestionOption:
    """One answer option, with an optional explanation of why it is (in)correct."""

    text: str | None = None
    audio_asset_id: str | None = None
    image_asset_id: str | None = None
    explanation: str | None = None


@dataclass(frozen=True)
class Question:
    """
    A single- or multi-select question.

    ``correct_option_indexes`` points into ``options``; one index means
    single-select, more than one means multi-select.
    """

    type: QuestionType
    stem: QuestionStem
    options: tuple[QuestionOption, ...]
    correct_option_indexes: tuple[int, ...]
    hint: str | None = None
    guidance: Guidance | None = None

    @property
    def is_multi_select(self) -> bool:
        return len(self.correct_option_indexes) > 1

    def correct_options(self) -> list[QuestionOption]:
        """Options marked correct, skipping indexes outside ``options``."""
        return [
            self.options[index]
            for index in self.correct_option_indexes
            if 0 <= index < len(self.options)
        ]
