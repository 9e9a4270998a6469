"""
Turn-by-turn practice of a subtask dialogue.

The learner plays the first allowed role. On a learner turn that has
distractors, the learner picks the correct line among them; every other
turn is simply read and passed.
"""

from dataclasses import dataclass

from taskflow.domain.common.exceptions import PracticeStateError
from taskflow.domain.task.entities import DialogueTurn
from taskflow.domain.task.services.task_model_resolver import TaskModelResolver
from taskflow.domain.task.value_objects import Phase4SubtaskItem

DEFAULT_LEARNER_ROLE = "user"


@dataclass(frozen=True)
class DialogueChoice:
    text: str
    is_correct: bool


class DialoguePractice:
    """State machine for one ``phase4_subtask`` flow item."""

    def __init__(self, item: Phase4SubtaskItem, resolver: TaskModelResolver) -> None:
        entry = item.entry
        self.item = item
        self.learner_role = entry.allowed_roles[0] if entry.allowed_roles else DEFAULT_LEARNER_ROLE
        self.turns: tuple[DialogueTurn, ...] = resolver.dialogue_turns(entry.dialogue_id)
        self.turn_index = 0
        self.history: list[bool] = []
        self._distractors = entry.distractors_by_turn()

    @property
    def is_complete(self) -> bool:
        return self.turn_index >= len(self.turns)

    @property
    def current_turn(self) -> DialogueTurn | None:
        if self.is_complete:
            return None
        return self.turns[self.turn_index]

    @property
    def is_learner_turn(self) -> bool:
        turn = self.current_turn
        return turn is not None and turn.role == self.learner_role

    @property
    def choices(self) -> list[DialogueChoice]:
        """Correct line first, then the distractors for this turn. Empty when no choice is due."""
        turn = self.current_turn
        if turn is None or not self.is_learner_turn:
            return []
        distractors = self._distractors.get(self.turn_index, ())
        if not distractors:
            return []
        return [DialogueChoice(text=turn.text, is_correct=True)] + [
            DialogueChoice(text=option.text, is_correct=False) for option in distractors
        ]

    def choose(self, index: int) -> bool:
        """
        Pick one of ``choices`` and move to the next turn.

        Returns:
            Whether the picked line is the dialogue's own line

        Raises:
            PracticeStateError: If no choice is due or ``index`` is out of range
        """
        choices = self.choices
        if not choices:
            raise PracticeStateError("dialogue", "No choice is due on this turn")
        if not 0 <= index < len(choices):
            raise PracticeStateError("dialogue", f"Choice {index} is out of range")
        correct = choices[index].is_correct
        self.history.append(correct)
        self.turn_index += 1
        return correct

    def advance(self) -> None:
        """Pass a turn that needs no choice."""
        if self.is_complete:
            raise PracticeStateError("dialogue", "Dialogue is already complete")
        if self.choices:
            raise PracticeStateError("dialogue", "Pick a line before moving on")
        self.turn_index += 1

    def transcript(self) -> tuple[DialogueTurn, ...]:
        """Turns already passed."""
        return self.turns[: self.turn_index]
