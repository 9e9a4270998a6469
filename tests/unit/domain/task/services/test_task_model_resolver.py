"""Tests for TaskModelResolver domain service."""

from taskflow.domain.task.entities import (
    AssetLibrary,
    MediaAsset,
    Role,
    TaskModel,
    TaskPackage,
    TltKind,
)
from taskflow.domain.task.services import TaskModelResolver


class TestTaskModelResolver:
    def test_role_title_by_id(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        assert resolver.role_title("guest") == "Guest"

    def test_role_title_by_title(self) -> None:
        resolver = TaskModelResolver(TaskModel(roles=(Role(title="sales"),)))
        assert resolver.role_title("sales") == "sales"

    def test_unknown_role_falls_back_to_id(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        assert resolver.role_title("manager") == "manager"

    def test_dialogue_turns(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        turns = resolver.dialogue_turns("d2")
        assert [turn.role for turn in turns] == ["receptionist", "guest", "receptionist"]
        assert resolver.dialogue("d2").subtask_id == "st2"

    def test_unknown_dialogue(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        assert resolver.dialogue("missing") is None
        assert resolver.dialogue_turns("missing") == ()

    def test_image_with_url(self, sample_task: TaskPackage) -> None:
        asset = TaskModelResolver(sample_task.task_model).image("img_passport")
        assert asset.kind == "image"
        assert asset.source == "https://assets.example.com/img/passport.png"
        assert asset.prompt == "A passport on a counter"
        assert not asset.is_placeholder

    def test_inline_base64_audio(self) -> None:
        model = TaskModel(assets=AssetLibrary(audios={"a1": MediaAsset(base64="UklGRg==")}))
        asset = TaskModelResolver(model).audio("a1")
        assert asset.source == "UklGRg=="

    def test_asset_without_data_is_placeholder(self, sample_task: TaskPackage) -> None:
        asset = TaskModelResolver(sample_task.task_model).image("img_key")
        assert asset.is_placeholder
        assert asset.prompt == "A hotel key card"

    def test_missing_asset_is_placeholder(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        assert resolver.audio("nope").is_placeholder
        assert resolver.image(None).is_placeholder

    def test_tlt_text(self, sample_task: TaskPackage) -> None:
        resolver = TaskModelResolver(sample_task.task_model)
        assert resolver.tlt_text(TltKind.WORD, "w1") == "reservation"
        assert resolver.tlt_text(TltKind.PHRASE, "p2") == "under the name of"
        assert resolver.tlt_text(TltKind.SENTENCE, "s9") is None
