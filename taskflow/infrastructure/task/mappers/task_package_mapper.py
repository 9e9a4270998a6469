"""Mapper for task package schema -> domain conversion."""

from typing import assert_never

from taskflow.domain.task.entities import (
    AssetLibrary,
    CompletionCriteria,
    DialogDistractor,
    DialogHint,
    Dialogue,
    DialogueTurn,
    DistractorOption,
    Guidance,
    MediaAsset,
    Phase,
    Phase1TaskEntryStep,
    Phase2WarmupStep,
    Phase3PhrasesStep,
    Phase3SentencesStep,
    Phase3WordsStep,
    Phase4SubtaskEntry,
    Phase4SubtasksStep,
    Phase5PhrasesStep,
    Phase5SentencesStep,
    Phase5WordsStep,
    Phase6RoleplayEntry,
    Phase6RoleplayStep,
    PhraseClozeEntry,
    Question,
    QuestionGroups,
    QuestionOption,
    QuestionStem,
    Role,
    Step,
    Subtask,
    TaskModel,
    TaskPackage,
    Tlts,
    Translation,
)
from taskflow.infrastructure.task.schemas.task_package_schemas import (
    AnyStepSchema,
    GuidanceSchema,
    Phase1TaskEntryStepSchema,
    Phase2WarmupStepSchema,
    Phase3PhrasesStepSchema,
    Phase3SentencesStepSchema,
    Phase3WordsStepSchema,
    Phase4SubtasksStepSchema,
    Phase5PhrasesStepSchema,
    Phase5SentencesStepSchema,
    Phase5WordsStepSchema,
    Phase6RoleplayStepSchema,
    PhaseSchema,
    QuestionGroupsSchema,
    QuestionSchema,
    TaskModelSchema,
    TaskPackageSchema,
)


class TaskPackageMapper:
    """Mapper for task package schema -> domain conversion.

    Mapping order is copied as-is: dicts keep the order of the JSON document.
    """

    def to_domain(self, schema: TaskPackageSchema) -> TaskPackage:
        """Convert a validated document into the domain aggregate."""
        return TaskPackage(
            version=schema.version,
            id=schema.id,
            title=schema.title,
            description=schema.description,
            task_model_language=schema.task_model_language,
            native_language=schema.native_language,
            task_model=self._task_model(schema.task_model),
            phases=tuple(self._phase(phase) for phase in schema.phases),
            translations={
                key: Translation(native=value.native, ipa=value.ipa)
                for key, value in schema.translations.items()
            },
        )

    def _task_model(self, schema: TaskModelSchema) -> TaskModel:
        return TaskModel(
            physical_scene=schema.physical_scene,
            industry=schema.industry,
            roles=tuple(
                Role(id=role.id, title=role.title, description=role.description)
                for role in schema.roles
            ),
            tlts=Tlts(
                words=dict(schema.tlts.words),
                phrases=dict(schema.tlts.phrases),
                sentences=dict(schema.tlts.sentences),
            ),
            behavioral_chain=tuple(schema.behavioral_chain),
            subtasks=tuple(
                Subtask(
                    id=subtask.id,
                    title=subtask.title,
                    goal=subtask.goal,
                    description=subtask.description,
                )
                for subtask in schema.subtasks
            ),
            dialogues=tuple(
                Dialogue(
                    id=dialogue.id,
                    scope=dialogue.scope,
                    difficulty=dialogue.difficulty,
                    subtask_id=dialogue.subtask_id,
                    turns=tuple(
                        DialogueTurn(
                            role=turn.role, text=turn.text, audio_asset_id=turn.audio_asset_id
                        )
                        for turn in dialogue.turns
                    ),
                )
                for dialogue in schema.dialogues
            ),
            assets=AssetLibrary(
                images={
                    asset_id: MediaAsset(prompt=asset.prompt, url=asset.url, base64=asset.base64)
                    for asset_id, asset in schema.assets.images.items()
                },
                audios={
                    asset_id: MediaAsset(prompt=asset.prompt, url=asset.url, base64=asset.base64)
                    for asset_id, asset in schema.assets.audios.items()
                },
            ),
            completion_criteria=CompletionCriteria(
                pass_score=schema.completion_criteria.pass_score,
                dimensions=tuple(schema.completion_criteria.dimensions),
            ),
            culture_model=schema.culture_model,
            feedback_principles=tuple(schema.feedback_principles),
        )

    def _phase(self, schema: PhaseSchema) -> Phase:
        return Phase(
            type=schema.type,
            guidance=self._guidance(schema.guidance),
            steps=tuple(self._step(step) for step in schema.steps),
        )

    def _step(self, schema: AnyStepSchema) -> Step:
        guidance = self._guidance(schema.guidance)
        match schema:
            case Phase1TaskEntryStepSchema():
                return Phase1TaskEntryStep(
                    id=schema.id,
                    guidance=guidance,
                    call_to_action_text=schema.call_to_action_text,
                    entry_questions=self._questions(schema.entry_questions),
                )
            case Phase2WarmupStepSchema():
                return Phase2WarmupStep(
                    id=schema.id,
                    guidance=guidance,
                    warmup_questions=self._questions(schema.warmup_questions),
                )
            case Phase3WordsStepSchema():
                return Phase3WordsStep(
                    id=schema.id,
                    guidance=guidance,
                    word_questions=self._question_groups(schema.word_questions),
                )
            case Phase3PhrasesStepSchema():
                return Phase3PhrasesStep(
                    id=schema.id,
                    guidance=guidance,
                    phrase_questions=self._question_groups(schema.phrase_questions),
                )
            case Phase3SentencesStepSchema():
                return Phase3SentencesStep(
                    id=schema.id,
                    guidance=guidance,
                    sentence_questions=self._question_groups(schema.sentence_questions),
                )
            case Phase4SubtasksStepSchema():
                return Phase4SubtasksStep(
                    id=schema.id,
                    guidance=guidance,
                    subtasks=tuple(
                        Phase4SubtaskEntry(
                            subtask_id=entry.subtask_id,
                            dialogue_id=entry.dialogue_id,
                            allowed_roles=tuple(entry.allowed_roles),
                            dialog_distractors=tuple(
                                DialogDistractor(
                                    index=distractor.index,
                                    options=tuple(
                                        DistractorOption(id=option.id, text=option.text)
                                        for option in distractor.options
                                    ),
                                )
                                for distractor in entry.dialog_distractors
                            ),
                        )
                        for entry in schema.subtasks
                    ),
                )
            case Phase5WordsStepSchema():
                return Phase5WordsStep(
                    id=schema.id,
                    guidance=guidance,
                    word_questions=self._question_groups(schema.word_questions),
                )
            case Phase5PhrasesStepSchema():
                return Phase5PhrasesStep(
                    id=schema.id,
                    guidance=guidance,
                    phrase_questions=self._question_groups(schema.phrase_questions),
                    phrase_clozes={
                        phrase_id: PhraseClozeEntry(
                            sentences=tuple(entry.sentences),
                            answer=entry.answer,
                            text_hint=entry.text_hint,
                            audio_hint=entry.audio_hint,
                        )
                        for phrase_id, entry in schema.phrase_clozes.items()
                    },
                )
            case Phase5SentencesStepSchema():
                return Phase5SentencesStep(
                    id=schema.id,
                    guidance=guidance,
                    sentences=tuple(schema.sentences),
                )
            case Phase6RoleplayStepSchema():
                return Phase6RoleplayStep(
                    id=schema.id,
                    guidance=guidance,
                    roleplays=tuple(
                        Phase6RoleplayEntry(
                            dialogue_id=entry.dialogue_id,
                            allowed_roles=tuple(entry.allowed_roles),
                            difficulty=entry.difficulty,
                            dialog_hints=tuple(
                                DialogHint(index=hint.index, text=hint.text)
                                for hint in entry.dialog_hints
                            ),
                        )
                        for entry in schema.roleplays
                    ),
                )
            case _:
                assert_never(schema)

    def _question_groups(self, groups: QuestionGroupsSchema) -> QuestionGroups:
        return {key: self._questions(questions) for key, questions in groups.items()}

    def _questions(self, questions: list[QuestionSchema]) -> tuple[Question, ...]:
        return tuple(self._question(question) for question in questions)

    def _question(self, schema: QuestionSchema) -> Question:
        return Question(
            type=schema.type,
            guidance=self._guidance(schema.guidance),
            stem=QuestionStem(
                text=schema.stem.text,
                audio_asset_id=schema.stem.audio_asset_id,
                image_asset_id=schema.stem.image_asset_id,
            ),
            options=tuple(
                QuestionOption(
                    text=option.text,
                    audio_asset_id=option.audio_asset_id,
                    image_asset_id=option.image_asset_id,
                    explanation=option.explanation,
                )
                for option in schema.options
            ),
            correct_option_indexes=tuple(schema.correct_option_indexes),
            hint=schema.hint,
        )

    def _guidance(self, schema: GuidanceSchema | None) -> Guidance | None:
        if schema is None:
            return None
        return Guidance(purpose=schema.purpose, description=schema.description)
