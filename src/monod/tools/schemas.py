"""Pydantic models for MCP tool outputs."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from monod.store.state import DocumentsState


class DocumentResponse(BaseModel):
    """The current document as seen by an MCP client."""

    success: bool = True
    uuid: str | None = None
    content: str
    template: str
    last_modified_locally: datetime | None = None
    loaded: bool
    status: str  # new | synchronized
    force_update: bool
    dispatched: int = 0

    @classmethod
    def from_state(cls, state: DocumentsState, dispatched: int = 0) -> DocumentResponse:
        doc = state.current
        return cls(
            uuid=doc.uuid,
            content=doc.content,
            template=doc.template.value,
            last_modified_locally=doc.last_modified_locally,
            loaded=state.loaded,
            status=state.sync.kind,
            force_update=state.force_update,
            dispatched=dispatched,
        )


class TaskItemResponse(BaseModel):
    """Single item in a task-list listing."""

    index: int
    line_number: int
    checked: bool
    text: str
