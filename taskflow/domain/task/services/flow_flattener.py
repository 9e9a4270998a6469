"""Domain service for flattening a task package into a navigable flow."""

import logging
from typing import assert_never

from taskflow.domain.task.entities import (
    Phase1TaskEntryStep,
    Phase2WarmupStep,
    Phase3PhrasesStep,
    Phase3SentencesStep,
    Phase3WordsStep,
    Phase4SubtasksStep,
    Phase5PhrasesStep,
    Phase5SentencesStep,
    Phase5WordsStep,
    Phase6RoleplayStep,
    Question,
    QuestionGroups,
    Step,
    TaskPackage,
)
from taskflow.domain.task.value_objects import (
    FlowItem,
    Phase4SubtaskItem,
    Phase5PhraseClozeItem,
    Phase5SentenceItem,
    Phase6RoleplayItem,
    PhaseGuidanceItem,
    QuestionItem,
    TaskFlow,
)

logger = logging.getLogger(__name__)


class FlowFlattener:
    """
    Stateless domain service turning phases and steps into one ordered flow.

    Items are emitted in phase order, then step order, then in the order of
    each step's own arrays and mappings. That order is the navigation order.
    """

    def flatten(self, task: TaskPackage) -> TaskFlow:
        """
        Flatten every phase of ``task``.

        Args:
            task: The loaded task package

        Returns:
            TaskFlow with one guidance item per phase that carries guidance
            and the flow items of every step
        """
        guidance_items: list[PhaseGuidanceItem] = []
        flow_items: list[FlowItem] = []

        for phase_index, phase in enumerate(task.phases):
            for step_index, step in enumerate(phase.steps):
                flow_items.extend(self.expand_step(step, phase_index, step_index))

            if phase.guidance is not None:
                guidance_items.append(PhaseGuidanceItem(phase_index=phase_index, phase=phase))

        logger.debug(
            f"Flattened task {task.id} into {len(flow_items)} flow items "
            f"and {len(guidance_items)} guidance items"
        )
        return TaskFlow(guidance_items=tuple(guidance_items), flow_items=tuple(flow_items))

    def expand_step(self, step: Step, phase_index: int, step_index: int) -> list[FlowItem]:
        """Expand a single step into its flow items."""
        match step:
            case Phase1TaskEntryStep():
                return self._questions(step, step.entry_questions, phase_index, step_index)
            case Phase2WarmupStep():
                return self._questions(step, step.warmup_questions, phase_index, step_index)
            case Phase3WordsStep() | Phase5WordsStep():
                return self._grouped_questions(
                    step, step.word_questions, "word", phase_index, step_index
                )
            case Phase3PhrasesStep():
                return self._grouped_questions(
                    step, step.phrase_questions, "phrase", phase_index, step_index
                )
            case Phase3SentencesStep():
                return self._grouped_questions(
                    step, step.sentence_questions, "sentence", phase_index, step_index
                )
            case Phase4SubtasksStep():
                return [
                    Phase4SubtaskItem(
                        phase_index=phase_index,
                        step_index=step_index,
                        subtask_index=subtask_index,
                        step=step,
                    )
                    for subtask_index in range(len(step.subtasks))
                ]
            case Phase5PhrasesStep():
                if step.phrase_clozes:
                    return self._phrase_clozes(step, phase_index, step_index)
                return self._grouped_questions(
                    step, step.phrase_questions, "phrase", phase_index, step_index
                )
            case Phase5SentencesStep():
                return self._sentences(step, phase_index, step_index)
            case Phase6RoleplayStep():
                if not step.roleplays:
                    return []
                return [
                    Phase6RoleplayItem(phase_index=phase_index, step_index=step_index, step=step)
                ]
            case _:
                assert_never(step)

    def _questions(
        self,
        step: Step,
        questions: tuple[Question, ...],
        phase_index: int,
        step_index: int,
    ) -> list[FlowItem]:
        return [
            QuestionItem(
                phase_index=phase_index,
                step_index=step_index,
                question_index=question_index,
                question=question,
                step=step,
            )
            for question_index, question in enumerate(questions)
        ]

    def _grouped_questions(
        self,
        step: Step,
        groups: QuestionGroups,
        item_type: str,
        phase_index: int,
        step_index: int,
    ) -> list[FlowItem]:
        """
        Emit one item per question of every group, in mapping order.

        Group labels are only attached when there is more than one group,
        so a single word never reads "word 1 of 1".
        """
        item_count = len(groups)
        labelled = item_count > 1
        items: list[FlowItem] = []
        question_index = 0

        for group_number, questions in enumerate(groups.values(), start=1):
            for question in questions:
                items.append(
                    QuestionItem(
                        phase_index=phase_index,
                        step_index=step_index,
                        question_index=question_index,
                        question=question,
                        step=step,
                        item_type=item_type if labelled else None,
                        item_index=group_number if labelled else None,
                        item_count=item_count if labelled else None,
                    )
                )
                question_index += 1

        return items

    def _phrase_clozes(
        self, step: Phase5PhrasesStep, phase_index: int, step_index: int
    ) -> list[FlowItem]:
        items: list[FlowItem] = []
        for phrase_id, entry in step.phrase_clozes.items():
            for round_index, sentence in enumerate(entry.sentences):
                items.append(
                    Phase5PhraseClozeItem(
                        phase_index=phase_index,
                        step_index=step_index,
                        phrase_id=phrase_id,
                        round_index=round_index,
                        round_count=len(entry.sentences),
                        sentence=sentence,
                        answer=entry.answer,
                        step=step,
                        text_hint=entry.text_hint,
                        audio_hint=entry.audio_hint,
                    )
                )
        return items

    def _sentences(
        self, step: Phase5SentencesStep, phase_index: int, step_index: int
    ) -> list[FlowItem]:
        if not step.sentences:
            # An empty step still occupies one navigable slot.
            return [
                Phase5SentenceItem(
                    phase_index=phase_index,
                    step_index=step_index,
                    sentence_index=0,
                    sentence="",
                    step=step,
                )
            ]
        return [
            Phase5SentenceItem(
                phase_index=phase_index,
                step_index=step_index,
                sentence_index=sentence_index,
                sentence=sentence,
                step=step,
            )
            for sentence_index, sentence in enumerate(step.sentences)
        ]
