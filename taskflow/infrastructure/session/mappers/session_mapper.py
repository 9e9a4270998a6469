"""Mapper for task session -> response schema conversion."""

from taskflow.application.session.use_cases.dtos import TaskSession
from taskflow.infrastructure.session.schemas.session_schemas import SessionStateResponse
from taskflow.infrastructure.task.mappers.flow_item_mapper import FlowItemMapper


class SessionMapper:
    """Mapper for task session -> response schema conversion."""

    def __init__(self, flow_item_mapper: FlowItemMapper | None = None) -> None:
        self.flow_item_mapper = flow_item_mapper or FlowItemMapper()

    def to_response(self, session: TaskSession) -> SessionStateResponse:
        """
        Snapshot the session state.

        The whole state is read under the session lock, so a concurrent
        event never mixes old and new values into one response. Must not be
        called while the caller already holds the lock.
        """
        with session.lock:
            controller = session.controller
            task = controller.task
            item = controller.current_item
            guidance = controller.current_guidance
            return SessionStateResponse(
                id=session.id,
                screen=controller.screen.value,
                task_id=task.id if task else None,
                flow_index=controller.flow_index,
                flow_length=len(controller.flow.flow_items),
                phase_guidance_index=controller.phase_guidance_index,
                answered=controller.answered,
                can_continue=controller.can_continue,
                error=controller.error,
                current_item=self.flow_item_mapper.to_response(item) if item else None,
                current_guidance=(
                    self.flow_item_mapper.guidance_to_response(guidance) if guidance else None
                ),
            )
