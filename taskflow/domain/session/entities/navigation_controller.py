"""
Navigation state machine for one task session.
"""

import logging
from enum import StrEnum

from taskflow.domain.common.exceptions import InvalidTransitionError
from taskflow.domain.task.entities import TaskPackage
from taskflow.domain.task.services.flow_flattener import FlowFlattener
from taskflow.domain.task.value_objects import FlowItem, PhaseGuidanceItem, QuestionItem, TaskFlow

logger = logging.getLogger(__name__)


class Screen(StrEnum):
    WELCOME = "welcome"
    LOADING = "loading"
    PHASE_GUIDANCE = "phase-guidance"
    QUESTION = "question"
    COMPLETE = "complete"


class NavigationController:
    """
    Decides which screen follows each event of a task session.

    Business Rules:
    - ``flow_index`` never decreases, except when ``restart`` resets it to 0
    - Phase guidance is shown at most once per phase, right before the
      phase's first flow item
    - A ``question`` item must be answered before continuing
    - An event the current screen does not accept is rejected with
      InvalidTransitionError and leaves the state untouched
    """

    def __init__(self, flattener: FlowFlattener | None = None) -> None:
        self.flattener = flattener or FlowFlattener()
        self.screen = Screen.WELCOME
        self.flow_index = 0
        self.phase_guidance_index = 0
        self.answered = False
        self.error: str | None = None
        self._task: TaskPackage | None = None
        self._flow = TaskFlow()
        self._shown_guidance: set[int] = set()

    @property
    def task(self) -> TaskPackage | None:
        return self._task

    @property
    def flow(self) -> TaskFlow:
        return self._flow

    @property
    def current_item(self) -> FlowItem | None:
        """The flow item on screen, or None outside of the Question screen."""
        if self.screen != Screen.QUESTION:
            return None
        if 0 <= self.flow_index < len(self._flow.flow_items):
            return self._flow.flow_items[self.flow_index]
        return None

    @property
    def current_guidance(self) -> PhaseGuidanceItem | None:
        if self.screen != Screen.PHASE_GUIDANCE:
            return None
        return self._flow.guidance_for(self.phase_guidance_index)

    @property
    def can_continue(self) -> bool:
        """Whether ``advance`` would be accepted right now."""
        if self.screen == Screen.PHASE_GUIDANCE:
            return True
        if self.screen != Screen.QUESTION:
            return False
        item = self.current_item
        if isinstance(item, QuestionItem):
            return self.answered
        return True

    def begin_loading(self) -> None:
        """Welcome -> Loading."""
        self._require(Screen.WELCOME, "begin loading")
        self.error = None
        self._move(Screen.LOADING)

    def fail_loading(self, message: str) -> None:
        """Loading -> Welcome, keeping ``message`` and no partial task state."""
        self._require(Screen.LOADING, "fail loading")
        self._reset()
        self.error = message
        self._move(Screen.WELCOME)

    def start(self, task: TaskPackage, flow: TaskFlow | None = None) -> None:
        """
        Loading -> first screen of ``task``.

        Shows phase 0 guidance when present, otherwise the first item of
        phase 0 (index 0 when phase 0 produced nothing).

        Args:
            task: The freshly loaded task package
            flow: The flattened ``task``, when the caller already has it
        """
        self._require(Screen.LOADING, "start")
        self._task = task
        self._flow = flow if flow is not None else self.flattener.flatten(task)
        self.flow_index = 0
        self.answered = False

        first_phase = task.phase_at(0)
        if first_phase is not None and first_phase.guidance is not None:
            self._show_guidance(0)
            return

        if not self._flow.flow_items:
            self._move(Screen.COMPLETE)
            return

        first_index = self._flow.first_index_for_phase(0)
        self.flow_index = first_index if first_index is not None else 0
        self._move(Screen.QUESTION)

    def record_answer(self) -> None:
        """Mark the current ``question`` item as answered."""
        self._require(Screen.QUESTION, "record an answer")
        if not isinstance(self.current_item, QuestionItem):
            raise InvalidTransitionError(
                self.screen,
                "record an answer",
                f"Flow item {self.flow_index} is not a question",
            )
        self.answered = True

    def continue_from_guidance(self) -> None:
        """PhaseGuidance -> Question at the first item of the phase just shown."""
        self._require(Screen.PHASE_GUIDANCE, "continue from guidance")
        if not self._flow.flow_items:
            self._move(Screen.COMPLETE)
            return

        first_index = self._flow.first_index_for_phase(self.phase_guidance_index)
        if first_index is None:
            logger.warning(
                f"Phase {self.phase_guidance_index} has guidance but no flow items; "
                f"staying at flow index {self.flow_index}"
            )
        elif first_index > self.flow_index:
            self.flow_index = first_index
        self.answered = False
        self._move(Screen.QUESTION)

    def continue_from_flow(self) -> None:
        """
        Question -> next item, next phase guidance, or Complete.

        Raises:
            InvalidTransitionError: If not on the Question screen or the
                current question has not been answered
        """
        self._require(Screen.QUESTION, "continue")
        if not self.can_continue:
            raise InvalidTransitionError(
                self.screen, "continue", "Answer the current question before continuing"
            )

        items = self._flow.flow_items
        if self.flow_index >= len(items) - 1:
            self.answered = False
            self._move(Screen.COMPLETE)
            return

        current = items[self.flow_index]
        upcoming = items[self.flow_index + 1]
        self.answered = False

        if (
            upcoming.phase_index != current.phase_index
            and self._flow.has_guidance(upcoming.phase_index)
            and upcoming.phase_index not in self._shown_guidance
        ):
            # flow_index moves onto the new phase when its guidance is dismissed
            self._show_guidance(upcoming.phase_index)
            return

        self.flow_index += 1
        logger.debug(f"Advanced to flow index {self.flow_index}")

    def advance(self) -> None:
        """Continue from whatever the current screen is."""
        if self.screen == Screen.PHASE_GUIDANCE:
            self.continue_from_guidance()
        else:
            self.continue_from_flow()

    def restart(self) -> None:
        """Complete or Welcome -> Welcome, discarding all session state."""
        if self.screen not in (Screen.COMPLETE, Screen.WELCOME):
            raise InvalidTransitionError(self.screen, "restart")
        self._reset()
        self.error = None
        self._move(Screen.WELCOME)

    def _show_guidance(self, phase_index: int) -> None:
        self.phase_guidance_index = phase_index
        self._shown_guidance.add(phase_index)
        self._move(Screen.PHASE_GUIDANCE)

    def _reset(self) -> None:
        self._task = None
        self._flow = TaskFlow()
        self._shown_guidance = set()
        self.flow_index = 0
        self.phase_guidance_index = 0
        self.answered = False

    def _require(self, screen: Screen, action: str) -> None:
        if self.screen != screen:
            raise InvalidTransitionError(self.screen, action)

    def _move(self, screen: Screen) -> None:
        logger.debug(f"Screen {self.screen} -> {screen} (flow index {self.flow_index})")
        self.screen = screen
