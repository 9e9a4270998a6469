"""Tests for NavigationController state machine."""

import pytest

from taskflow.domain.common.exceptions import InvalidTransitionError
from taskflow.domain.session.entities import NavigationController, Screen
from taskflow.domain.task.entities import (
    Guidance,
    Phase,
    Phase1TaskEntryStep,
    Phase2WarmupStep,
    Phase3WordsStep,
    Phase5SentencesStep,
    PhaseType,
    Question,
    QuestionOption,
    QuestionStem,
    QuestionType,
    TaskModel,
    TaskPackage,
)
from taskflow.domain.task.value_objects import QuestionItem

GUIDANCE = Guidance(purpose="Why", description="What this phase does")


def _question(text: str = "q") -> Question:
    return Question(
        type=QuestionType.TEXT_TEXT,
        stem=QuestionStem(text=text),
        options=(QuestionOption(text="yes"), QuestionOption(text="no")),
        correct_option_indexes=(0,),
    )


def _task(*phases: Phase) -> TaskPackage:
    return TaskPackage(version="1", id="t1", title="Task", task_model=TaskModel(), phases=phases)


def _started(task: TaskPackage) -> NavigationController:
    controller = NavigationController()
    controller.begin_loading()
    controller.start(task)
    return controller


def _walk(controller: NavigationController) -> list[tuple[Screen, int]]:
    """Answer and continue until Complete, recording every screen visited."""
    visited = [(controller.screen, controller.flow_index)]
    while controller.screen != Screen.COMPLETE:
        if isinstance(controller.current_item, QuestionItem) and not controller.answered:
            controller.record_answer()
        controller.advance()
        visited.append((controller.screen, controller.flow_index))
    return visited


@pytest.fixture
def two_phase_task() -> TaskPackage:
    return _task(
        Phase(
            type=PhaseType.PHASE1,
            steps=(Phase1TaskEntryStep(id="entry", entry_questions=(_question(),)),),
        ),
        Phase(
            type=PhaseType.PHASE5,
            guidance=GUIDANCE,
            steps=(Phase5SentencesStep(id="sentences", sentences=("I like tea",)),),
        ),
    )


class TestStart:
    """Test suite for loading and starting a session."""

    def test_initial_state(self) -> None:
        controller = NavigationController()
        assert controller.screen == Screen.WELCOME
        assert controller.flow_index == 0
        assert controller.current_item is None
        assert controller.task is None

    def test_start_without_phase0_guidance_shows_first_item(
        self, two_phase_task: TaskPackage
    ) -> None:
        controller = _started(two_phase_task)
        assert controller.screen == Screen.QUESTION
        assert controller.flow_index == 0
        assert isinstance(controller.current_item, QuestionItem)

    def test_start_with_phase0_guidance_shows_guidance(self) -> None:
        task = _task(
            Phase(
                type=PhaseType.PHASE1,
                guidance=GUIDANCE,
                steps=(Phase1TaskEntryStep(id="entry", entry_questions=(_question(),)),),
            )
        )
        controller = _started(task)
        assert controller.screen == Screen.PHASE_GUIDANCE
        assert controller.phase_guidance_index == 0
        assert controller.current_guidance is not None
        assert controller.current_guidance.phase.guidance == GUIDANCE
        assert controller.current_item is None

    def test_start_empty_task_completes(self) -> None:
        controller = _started(_task())
        assert controller.screen == Screen.COMPLETE

    def test_start_requires_loading(self, two_phase_task: TaskPackage) -> None:
        controller = NavigationController()
        with pytest.raises(InvalidTransitionError):
            controller.start(two_phase_task)
        assert controller.screen == Screen.WELCOME

    def test_fail_loading_returns_to_welcome(self) -> None:
        controller = NavigationController()
        controller.begin_loading()
        assert controller.screen == Screen.LOADING

        controller.fail_loading("Failed to load task: boom")

        assert controller.screen == Screen.WELCOME
        assert controller.error == "Failed to load task: boom"
        assert controller.task is None
        assert len(controller.flow) == 0

    def test_begin_loading_clears_previous_error(self) -> None:
        controller = NavigationController()
        controller.begin_loading()
        controller.fail_loading("boom")
        controller.begin_loading()
        assert controller.error is None


class TestTwoPhaseScenario:
    """Entry question, then guided sentence phase, then Complete."""

    def test_full_walk(self, two_phase_task: TaskPackage) -> None:
        controller = _started(two_phase_task)
        assert controller.screen == Screen.QUESTION
        assert controller.current_item.kind == "question"

        controller.record_answer()
        controller.continue_from_flow()
        assert controller.screen == Screen.PHASE_GUIDANCE
        assert controller.phase_guidance_index == 1

        controller.continue_from_guidance()
        assert controller.screen == Screen.QUESTION
        assert controller.flow_index == 1
        assert controller.current_item.kind == "phase5_sentence"

        controller.continue_from_flow()
        assert controller.screen == Screen.COMPLETE


class TestContinue:
    """Test suite for continue signals."""

    def test_unanswered_question_blocks_continue(self, two_phase_task: TaskPackage) -> None:
        controller = _started(two_phase_task)
        assert not controller.can_continue

        with pytest.raises(InvalidTransitionError):
            controller.continue_from_flow()

        assert controller.screen == Screen.QUESTION
        assert controller.flow_index == 0

    def test_answered_resets_on_next_item(self) -> None:
        task = _task(
            Phase(
                type=PhaseType.PHASE2,
                steps=(Phase2WarmupStep(id="w", warmup_questions=(_question(), _question())),),
            )
        )
        controller = _started(task)
        controller.record_answer()
        controller.continue_from_flow()

        assert controller.flow_index == 1
        assert controller.answered is False

    def test_record_answer_rejects_non_question_items(self) -> None:
        task = _task(
            Phase(type=PhaseType.PHASE5, steps=(Phase5SentencesStep(id="s", sentences=("a b",)),))
        )
        controller = _started(task)
        assert controller.can_continue

        with pytest.raises(InvalidTransitionError):
            controller.record_answer()

    def test_continue_from_guidance_requires_guidance_screen(
        self, two_phase_task: TaskPackage
    ) -> None:
        controller = _started(two_phase_task)
        with pytest.raises(InvalidTransitionError):
            controller.continue_from_guidance()

    def test_guidance_skipped_for_unguided_phase(self) -> None:
        task = _task(
            Phase(
                type=PhaseType.PHASE1,
                steps=(Phase1TaskEntryStep(id="a", entry_questions=(_question(),)),),
            ),
            Phase(
                type=PhaseType.PHASE2,
                steps=(Phase2WarmupStep(id="b", warmup_questions=(_question(),)),),
            ),
        )
        controller = _started(task)
        controller.record_answer()
        controller.continue_from_flow()

        assert controller.screen == Screen.QUESTION
        assert controller.flow_index == 1

    def test_guided_phase_without_items_does_not_move_backwards(self) -> None:
        task = _task(
            Phase(type=PhaseType.PHASE1, guidance=GUIDANCE),
            Phase(
                type=PhaseType.PHASE2,
                steps=(Phase2WarmupStep(id="b", warmup_questions=(_question(),)),),
            ),
        )
        controller = _started(task)
        assert controller.screen == Screen.PHASE_GUIDANCE

        controller.continue_from_guidance()

        assert controller.screen == Screen.QUESTION
        assert controller.flow_index == 0
        assert controller.current_item.phase_index == 1

    def test_guidance_only_task_completes(self) -> None:
        controller = _started(_task(Phase(type=PhaseType.PHASE1, guidance=GUIDANCE)))
        assert controller.screen == Screen.PHASE_GUIDANCE

        controller.advance()

        assert controller.screen == Screen.COMPLETE


class TestSampleWalk:
    """Monotonic navigation and guidance gating over the sample task."""

    def test_flow_index_is_monotonic(self, sample_task: TaskPackage) -> None:
        controller = _started(sample_task)
        visited = _walk(controller)

        indexes = [index for _, index in visited]
        assert indexes == sorted(indexes)
        assert visited[-1][0] == Screen.COMPLETE
        assert visited[-2] == (Screen.QUESTION, len(controller.flow) - 1)

    def test_every_item_is_visited_once(self, sample_task: TaskPackage) -> None:
        controller = _started(sample_task)
        visited = _walk(controller)

        question_indexes = [index for screen, index in visited if screen == Screen.QUESTION]
        assert question_indexes == list(range(len(controller.flow)))

    def test_guidance_shown_once_per_guided_phase(self, sample_task: TaskPackage) -> None:
        controller = _started(sample_task)
        shown: list[int] = []
        while controller.screen != Screen.COMPLETE:
            if controller.screen == Screen.PHASE_GUIDANCE:
                shown.append(controller.phase_guidance_index)
            if isinstance(controller.current_item, QuestionItem):
                controller.record_answer()
            controller.advance()

        assert shown == [0, 2, 3, 4, 5]

    def test_guidance_precedes_first_item_of_its_phase(self, sample_task: TaskPackage) -> None:
        controller = _started(sample_task)
        while controller.screen != Screen.COMPLETE:
            if controller.screen == Screen.PHASE_GUIDANCE:
                phase_index = controller.phase_guidance_index
                controller.advance()
                assert controller.current_item.phase_index == phase_index
                assert controller.flow_index == controller.flow.first_index_for_phase(phase_index)
                continue
            if isinstance(controller.current_item, QuestionItem):
                controller.record_answer()
            controller.advance()


class TestRestart:
    """Test suite for restarting a session."""

    def test_restart_from_complete(self, two_phase_task: TaskPackage) -> None:
        controller = _started(two_phase_task)
        _walk(controller)

        controller.restart()

        assert controller.screen == Screen.WELCOME
        assert controller.flow_index == 0
        assert controller.task is None

    def test_restart_shows_guidance_again(self, two_phase_task: TaskPackage) -> None:
        controller = _started(two_phase_task)
        _walk(controller)
        controller.restart()
        controller.begin_loading()
        controller.start(two_phase_task)

        controller.record_answer()
        controller.continue_from_flow()

        assert controller.screen == Screen.PHASE_GUIDANCE

    def test_restart_rejected_mid_flow(self, two_phase_task: TaskPackage) -> None:
        controller = _started(two_phase_task)
        with pytest.raises(InvalidTransitionError):
            controller.restart()
        assert controller.screen == Screen.QUESTION


class TestCurrentItem:
    """Test suite for the item on screen."""

    def test_words_step_position_label(self) -> None:
        q = _question()
        task = _task(
            Phase(
                type=PhaseType.PHASE3,
                steps=(Phase3WordsStep(id="words", word_questions={"w1": (q,), "w2": (q,)}),),
            )
        )
        controller = _started(task)
        assert controller.current_item.position_label() == (
            "Phase 1 / Step 1 / Question 1 / Word 1 of 2"
        )
