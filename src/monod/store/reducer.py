"""Pure state transitions for the documents slice.

``reduce(state, action)`` never raises and never mutates its inputs.
Handlers are looked up by the concrete action class, so an action it does
not handle (a signal addressed to a collaborator, or a bare ``Action``
carrying a document action type but no payload) returns the very same
state object.
"""

from __future__ import annotations

from collections.abc import Callable

from monod.documents.document import Document
from monod.documents.tasklist import toggle_task_list_item
from monod.store.actions import (
    Action,
    ForceUpdateCurrentDocument,
    LoadDefault,
    LoadSuccess,
    ToggleTaskListItem,
    UpdateContent,
    UpdateCurrentDocument,
    UpdateTemplate,
)
from monod.store.state import (
    DocumentsState,
    NewDocument,
    initial_state,
    sync_status_for,
)

_Handler = Callable[[DocumentsState, Action], DocumentsState]


def reduce(state: DocumentsState | None, action: Action) -> DocumentsState:
    """Compute the state that follows *state* once *action* is applied."""
    if state is None:
        state = initial_state()
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


def _load_default(state: DocumentsState, action: Action) -> DocumentsState:
    return state.model_copy(
        update={
            "current": Document(),
            "loaded": True,
            "sync": NewDocument(),
            "force_update": False,
        }
    )


def _load_success(state: DocumentsState, action: LoadSuccess) -> DocumentsState:
    return state.model_copy(
        update={
            "current": action.document,
            "sync": sync_status_for(action.secret),
            "loaded": True,
            "force_update": False,
        }
    )


def _update_template(state: DocumentsState, action: UpdateTemplate) -> DocumentsState:
    return state.model_copy(
        update={
            "current": state.current.with_template(action.template),
            "force_update": False,
        }
    )


def _update_content(state: DocumentsState, action: UpdateContent) -> DocumentsState:
    return state.model_copy(
        update={
            "current": state.current.with_content(action.content),
            "force_update": False,
        }
    )


def _toggle_task_list_item(
    state: DocumentsState, action: ToggleTaskListItem
) -> DocumentsState:
    content = state.current.content
    toggled = toggle_task_list_item(content, action.index)
    if toggled == content:
        # Out of range: keep the current snapshot and its marker.
        if not state.force_update:
            return state
        return state.model_copy(update={"force_update": False})

    return state.model_copy(
        update={
            "current": state.current.with_content(toggled),
            "force_update": False,
        }
    )


def _force_update_current_document(
    state: DocumentsState, action: ForceUpdateCurrentDocument
) -> DocumentsState:
    return state.model_copy(update={"current": action.document, "force_update": True})


def _update_current_document(
    state: DocumentsState, action: UpdateCurrentDocument
) -> DocumentsState:
    return state.model_copy(update={"current": action.document, "force_update": False})


_HANDLERS: dict[type[Action], _Handler] = {
    LoadDefault: _load_default,
    LoadSuccess: _load_success,
    UpdateTemplate: _update_template,
    UpdateContent: _update_content,
    ToggleTaskListItem: _toggle_task_list_item,
    ForceUpdateCurrentDocument: _force_update_current_document,
    UpdateCurrentDocument: _update_current_document,
}
