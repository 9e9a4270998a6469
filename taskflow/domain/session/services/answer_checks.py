"""Answer checks for every exercise kind.

All checks are pure functions over the flow item data; capturing the
learner's input is the presentation layer's job.
"""

import re
from collections.abc import Iterable, Sequence

from taskflow.domain.task.entities import Question
from taskflow.domain.task.value_objects import Phase5PhraseClozeItem

_WHITESPACE = re.compile(r"\s+")


def check_choice(question: Question, selected_indexes: Iterable[int]) -> bool:
    """True when exactly the correct options were selected."""
    selected = set(selected_indexes)
    return bool(selected) and selected == set(question.correct_option_indexes)


def check_cloze_answer(item: Phase5PhraseClozeItem, text: str) -> bool:
    """Cloze answers are compared trimmed and case-insensitively."""
    return text.strip().casefold() == item.answer.strip().casefold()


def sentence_tokens(sentence: str) -> list[str]:
    """Split a sentence into the words the learner has to put in order."""
    return [token for token in _WHITESPACE.split(sentence.strip()) if token]


def check_sentence_order(sentence: str, ordered_tokens: Sequence[str]) -> bool:
    tokens = sentence_tokens(sentence)
    return bool(tokens) and list(ordered_tokens) == tokens


def check_roleplay_reply(expected: str, text: str) -> bool:
    """Roleplay replies must match the dialogue line exactly, ignoring outer whitespace."""
    return text.strip() == expected.strip()
