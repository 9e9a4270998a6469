"""Domain service for resolving id references into the task model."""

from dataclasses import dataclass
from typing import Literal

from taskflow.domain.task.entities import Dialogue, DialogueTurn, MediaAsset, TaskModel, TltKind

AssetKind = Literal["image", "audio"]


@dataclass(frozen=True)
class ResolvedAsset:
    """Result of asset resolution."""

    asset_id: str | None
    kind: AssetKind
    source: str | None  # url or inline base64 data, None for placeholders
    prompt: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.source is None


class TaskModelResolver:
    """Resolves role, dialogue, asset and tlt ids against one task model.

    Every lookup has the same fallback: a missing id never raises. Roles fall
    back to the raw id, dialogues to no turns, assets to a placeholder and
    tlts to None.
    """

    def __init__(self, task_model: TaskModel) -> None:
        self.task_model = task_model
        self._dialogues = {dialogue.id: dialogue for dialogue in task_model.dialogues}

    def role_title(self, role_id: str) -> str:
        """Display title of a role, matched by id or by title."""
        for role in self.task_model.roles:
            if role.id == role_id or role.title == role_id:
                return role.title
        return role_id

    def dialogue(self, dialogue_id: str) -> Dialogue | None:
        return self._dialogues.get(dialogue_id)

    def dialogue_turns(self, dialogue_id: str) -> tuple[DialogueTurn, ...]:
        dialogue = self.dialogue(dialogue_id)
        return dialogue.turns if dialogue else ()

    def image(self, asset_id: str | None) -> ResolvedAsset:
        return self._resolve(asset_id, "image", self.task_model.assets.images)

    def audio(self, asset_id: str | None) -> ResolvedAsset:
        return self._resolve(asset_id, "audio", self.task_model.assets.audios)

    def tlt_text(self, kind: TltKind, tlt_id: str) -> str | None:
        return self.task_model.tlts.mapping(kind).get(tlt_id)

    def _resolve(
        self, asset_id: str | None, kind: AssetKind, library: dict[str, MediaAsset]
    ) -> ResolvedAsset:
        asset = library.get(asset_id) if asset_id else None
        if asset is None:
            return ResolvedAsset(asset_id=asset_id, kind=kind, source=None)
        return ResolvedAsset(asset_id=asset_id, kind=kind, source=asset.source, prompt=asset.prompt)
