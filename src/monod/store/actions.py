"""Action vocabulary understood by the documents store.

Document actions drive :func:`monod.store.reducer.reduce`.  Signal actions
are addressed to collaborators (sync, local persistence, notifications)
and pass through the reducer untouched.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from monod.documents.document import Document, Template


class ActionType(StrEnum):
    """Identifier carried in the ``type`` field of every action."""

    # Documents
    LOAD_DEFAULT = "monod/documents/LOAD_DEFAULT"
    LOAD_SUCCESS = "monod/documents/LOAD_SUCCESS"
    UPDATE_TEMPLATE = "monod/documents/UPDATE_TEMPLATE"
    UPDATE_CONTENT = "monod/documents/UPDATE_CONTENT"
    TOGGLE_TASK_LIST_ITEM = "monod/documents/TOGGLE_TASK_LIST_ITEM"
    FORCE_UPDATE_CURRENT_DOCUMENT = "monod/documents/FORCE_UPDATE_CURRENT_DOCUMENT"
    UPDATE_CURRENT_DOCUMENT = "monod/documents/UPDATE_CURRENT_DOCUMENT"

    # Sync
    SYNCHRONIZE = "monod/sync/SYNCHRONIZE"
    NO_NEED_TO_SYNC = "monod/sync/NO_NEED_TO_SYNC"
    SYNCHRONIZE_SUCCESS = "monod/sync/SYNCHRONIZE_SUCCESS"
    SYNCHRONIZE_ERROR = "monod/sync/SYNCHRONIZE_ERROR"

    # Persistence
    LOCAL_PERSIST = "monod/persistence/LOCAL_PERSIST"

    # Notification
    NOTIFY = "monod/notification/NOTIFY"


class Action(BaseModel):
    """Base class for all actions."""

    model_config = ConfigDict(frozen=True)

    type: ActionType


# ------------------------------------------------------------------
# Document actions
# ------------------------------------------------------------------


class LoadDefault(Action):
    type: Literal[ActionType.LOAD_DEFAULT] = ActionType.LOAD_DEFAULT


class LoadSuccess(Action):
    type: Literal[ActionType.LOAD_SUCCESS] = ActionType.LOAD_SUCCESS
    document: Document
    secret: str | None = None


class UpdateTemplate(Action):
    type: Literal[ActionType.UPDATE_TEMPLATE] = ActionType.UPDATE_TEMPLATE
    template: Template


class UpdateContent(Action):
    type: Literal[ActionType.UPDATE_CONTENT] = ActionType.UPDATE_CONTENT
    content: str


class ToggleTaskListItem(Action):
    type: Literal[ActionType.TOGGLE_TASK_LIST_ITEM] = ActionType.TOGGLE_TASK_LIST_ITEM
    index: int


class ForceUpdateCurrentDocument(Action):
    """Replace the current document on behalf of a non-local actor."""

    type: Literal[ActionType.FORCE_UPDATE_CURRENT_DOCUMENT] = (
        ActionType.FORCE_UPDATE_CURRENT_DOCUMENT
    )
    document: Document


class UpdateCurrentDocument(Action):
    type: Literal[ActionType.UPDATE_CURRENT_DOCUMENT] = (
        ActionType.UPDATE_CURRENT_DOCUMENT
    )
    document: Document


# ------------------------------------------------------------------
# Signals
# ------------------------------------------------------------------


class Synchronize(Action):
    type: Literal[ActionType.SYNCHRONIZE] = ActionType.SYNCHRONIZE


class NoNeedToSync(Action):
    type: Literal[ActionType.NO_NEED_TO_SYNC] = ActionType.NO_NEED_TO_SYNC


class SynchronizeSuccess(Action):
    type: Literal[ActionType.SYNCHRONIZE_SUCCESS] = ActionType.SYNCHRONIZE_SUCCESS


class SynchronizeError(Action):
    type: Literal[ActionType.SYNCHRONIZE_ERROR] = ActionType.SYNCHRONIZE_ERROR
    message: str


class LocalPersist(Action):
    type: Literal[ActionType.LOCAL_PERSIST] = ActionType.LOCAL_PERSIST


class NotificationLevel(StrEnum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Notify(Action):
    type: Literal[ActionType.NOTIFY] = ActionType.NOTIFY
    level: NotificationLevel
    message: str
