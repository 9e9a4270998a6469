"""
Free-text roleplay over a dialogue.
"""

from dataclasses import dataclass

from taskflow.domain.common.exceptions import PracticeStateError
from taskflow.domain.session.services.answer_checks import check_roleplay_reply
from taskflow.domain.task.entities import DialogueTurn
from taskflow.domain.task.services.task_model_resolver import TaskModelResolver
from taskflow.domain.task.value_objects import Phase6RoleplayItem

from .dialogue_practice import DEFAULT_LEARNER_ROLE


@dataclass(frozen=True)
class RoleplayFeedback:
    correct: bool
    user_answer: str
    expected: str


class RoleplayPractice:
    """
    State machine for one ``phase6_roleplay`` flow item.

    Correct replies move straight on. A wrong reply keeps the turn open,
    showing the expected line, until ``acknowledge`` is called.
    """

    def __init__(self, item: Phase6RoleplayItem, resolver: TaskModelResolver) -> None:
        roleplay = item.roleplay
        self.item = item
        self.learner_role = (
            roleplay.allowed_roles[0] if roleplay.allowed_roles else DEFAULT_LEARNER_ROLE
        )
        self.turns: tuple[DialogueTurn, ...] = resolver.dialogue_turns(roleplay.dialogue_id)
        self.turn_index = 0
        self.pending_feedback: RoleplayFeedback | None = None
        self._hints = roleplay.hints_by_turn()

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
    def hint(self) -> str | None:
        if not self.is_learner_turn:
            return None
        return self._hints.get(self.turn_index)

    def submit(self, text: str) -> RoleplayFeedback:
        turn = self.current_turn
        if turn is None or not self.is_learner_turn:
            raise PracticeStateError("roleplay", "It is not the learner's turn")
        if self.pending_feedback is not None:
            raise PracticeStateError("roleplay", "Acknowledge the previous answer first")

        feedback = RoleplayFeedback(
            correct=check_roleplay_reply(turn.text, text),
            user_answer=text.strip(),
            expected=turn.text,
        )
        if feedback.correct:
            self.turn_index += 1
        else:
            self.pending_feedback = feedback
        return feedback

    def acknowledge(self) -> None:
        """Move on after a wrong reply."""
        if self.pending_feedback is None:
            raise PracticeStateError("roleplay", "There is no wrong answer to acknowledge")
        self.pending_feedback = None
        self.turn_index += 1

    def advance(self) -> None:
        """Pass a partner turn."""
        if self.is_complete:
            raise PracticeStateError("roleplay", "Roleplay is already complete")
        if self.is_learner_turn:
            raise PracticeStateError("roleplay", "Reply before moving on")
        self.turn_index += 1
