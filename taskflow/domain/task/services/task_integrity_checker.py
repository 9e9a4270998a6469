"""Domain service reporting referential gaps in a task package.

Gaps never stop a task from loading; the presentation falls back to
placeholders. The report exists so that authoring errors are visible in logs.
"""

from dataclasses import dataclass

from taskflow.domain.task.entities import (
    Phase1TaskEntryStep,
    Phase2WarmupStep,
    Phase3PhrasesStep,
    Phase3SentencesStep,
    Phase3WordsStep,
    Phase4SubtasksStep,
    Phase5PhrasesStep,
    Phase5WordsStep,
    Phase6RoleplayStep,
    Question,
    Step,
    TaskPackage,
)
from taskflow.domain.task.value_objects import TaskFlow


@dataclass(frozen=True)
class IntegrityIssue:
    """One dangling reference or malformed value, located by path."""

    code: str
    path: str
    message: str


class TaskIntegrityChecker:
    """Collects integrity issues; never raises for a structurally valid package."""

    def check(self, task: TaskPackage, flow: TaskFlow | None = None) -> list[IntegrityIssue]:
        issues: list[IntegrityIssue] = []
        model = task.task_model
        role_keys = {role.id for role in model.roles if role.id} | {
            role.title for role in model.roles
        }
        dialogue_ids = {dialogue.id for dialogue in model.dialogues}
        subtask_ids = {subtask.id for subtask in model.subtasks}

        for dialogue in model.dialogues:
            base = f"taskModel.dialogues[{dialogue.id}]"
            if dialogue.subtask_id and dialogue.subtask_id not in subtask_ids:
                issues.append(
                    IntegrityIssue(
                        "unknown_subtask",
                        base,
                        f"Dialogue references unknown subtask '{dialogue.subtask_id}'",
                    )
                )
            for turn_index, turn in enumerate(dialogue.turns):
                path = f"{base}.turns[{turn_index}]"
                if turn.role not in role_keys:
                    issues.append(
                        IntegrityIssue("unknown_role", path, f"Unknown role '{turn.role}'")
                    )
                if turn.audio_asset_id and turn.audio_asset_id not in model.assets.audios:
                    issues.append(
                        IntegrityIssue(
                            "unknown_audio",
                            path,
                            f"Unknown audio asset '{turn.audio_asset_id}'",
                        )
                    )

        for phase_index, phase in enumerate(task.phases):
            for step_index, step in enumerate(phase.steps):
                path = f"phases[{phase_index}].steps[{step_index}]"
                issues.extend(self._check_step(task, step, path, dialogue_ids, role_keys))

        if flow is not None:
            for guidance_item in flow.guidance_items:
                if flow.first_index_for_phase(guidance_item.phase_index) is None:
                    issues.append(
                        IntegrityIssue(
                            "empty_guided_phase",
                            f"phases[{guidance_item.phase_index}]",
                            "Phase has guidance but produces no flow items",
                        )
                    )

        return issues

    def _check_step(
        self,
        task: TaskPackage,
        step: Step,
        path: str,
        dialogue_ids: set[str],
        role_keys: set[str],
    ) -> list[IntegrityIssue]:
        issues: list[IntegrityIssue] = []
        match step:
            case Phase1TaskEntryStep():
                questions = list(step.entry_questions)
            case Phase2WarmupStep():
                questions = list(step.warmup_questions)
            case Phase3WordsStep() | Phase5WordsStep():
                questions = [q for group in step.word_questions.values() for q in group]
            case Phase3PhrasesStep():
                questions = [q for group in step.phrase_questions.values() for q in group]
            case Phase3SentencesStep():
                questions = [q for group in step.sentence_questions.values() for q in group]
            case Phase5PhrasesStep():
                questions = [q for group in step.phrase_questions.values() for q in group]
                for phrase_id, entry in step.phrase_clozes.items():
                    if entry.audio_hint and entry.audio_hint not in task.task_model.assets.audios:
                        issues.append(
                            IntegrityIssue(
                                "unknown_audio",
                                f"{path}.phraseClozes[{phrase_id}]",
                                f"Unknown audio hint '{entry.audio_hint}'",
                            )
                        )
            case Phase4SubtasksStep():
                questions = []
                for index, entry in enumerate(step.subtasks):
                    issues.extend(
                        self._check_dialogue_ref(
                            entry.dialogue_id,
                            entry.allowed_roles,
                            f"{path}.subtasks[{index}]",
                            dialogue_ids,
                            role_keys,
                        )
                    )
            case Phase6RoleplayStep():
                questions = []
                for index, roleplay in enumerate(step.roleplays):
                    issues.extend(
                        self._check_dialogue_ref(
                            roleplay.dialogue_id,
                            roleplay.allowed_roles,
                            f"{path}.roleplays[{index}]",
                            dialogue_ids,
                            role_keys,
                        )
                    )
            case _:
                questions = []

        for question_index, question in enumerate(questions):
            issues.extend(
                self._check_question(task, question, f"{path}.questions[{question_index}]")
            )
        return issues

    def _check_dialogue_ref(
        self,
        dialogue_id: str,
        allowed_roles: tuple[str, ...],
        path: str,
        dialogue_ids: set[str],
        role_keys: set[str],
    ) -> list[IntegrityIssue]:
        issues: list[IntegrityIssue] = []
        if dialogue_id not in dialogue_ids:
            issues.append(
                IntegrityIssue("unknown_dialogue", path, f"Unknown dialogue '{dialogue_id}'")
            )
        for role in allowed_roles:
            if role not in role_keys:
                issues.append(IntegrityIssue("unknown_role", path, f"Unknown role '{role}'"))
        return issues

    def _check_question(
        self, task: TaskPackage, question: Question, path: str
    ) -> list[IntegrityIssue]:
        issues: list[IntegrityIssue] = []
        assets = task.task_model.assets

        if not question.correct_option_indexes:
            issues.append(IntegrityIssue("no_correct_option", path, "No correct option"))
        if len(set(question.correct_option_indexes)) != len(question.correct_option_indexes):
            issues.append(
                IntegrityIssue("duplicate_correct_option", path, "Duplicate correct option index")
            )
        for index in question.correct_option_indexes:
            if not 0 <= index < len(question.options):
                issues.append(
                    IntegrityIssue(
                        "correct_option_out_of_range",
                        path,
                        f"Correct option index {index} is out of range",
                    )
                )

        refs = [(question.stem.image_asset_id, question.stem.audio_asset_id)] + [
            (option.image_asset_id, option.audio_asset_id) for option in question.options
        ]
        for image_id, audio_id in refs:
            if image_id and image_id not in assets.images:
                issues.append(
                    IntegrityIssue("unknown_image", path, f"Unknown image asset '{image_id}'")
                )
            if audio_id and audio_id not in assets.audios:
                issues.append(
                    IntegrityIssue("unknown_audio", path, f"Unknown audio asset '{audio_id}'")
                )
        return issues
