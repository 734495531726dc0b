"""Higher-level intents expressed as ordered lists of actions.

Every function here inspects the state it is given (if any) and returns
the actions to dispatch, in the order they must be dispatched, without
touching the store itself.  Collaborators reached through signal actions
(sync, local persistence, notifications) answer with their own follow-up
actions once the store dispatches them.
"""

from __future__ import annotations

import logging
import secrets

from monod.documents.document import Document
from monod.notifications import (
    DECRYPTION_FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    SERVER_UNREACHABLE_MESSAGE,
)
from monod.store.actions import (
    Action,
    ForceUpdateCurrentDocument,
    LoadDefault,
    LoadSuccess,
    LocalPersist,
    NotificationLevel,
    Notify,
    Synchronize,
    ToggleTaskListItem,
    UpdateContent,
    UpdateCurrentDocument,
    UpdateTemplate,
)
from monod.store.state import DocumentsState
from monod.sync.gateway import (
    DecryptionFailed,
    DocumentGateway,
    DocumentNotFound,
    ServerUnreachable,
)

logger = logging.getLogger(__name__)


def generate_secret() -> str:
    """Create the secret a brand new document will be encrypted with."""
    return secrets.token_urlsafe(32)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------


def load_default() -> list[Action]:
    return [LoadDefault()]


def load_success(document: Document, secret: str | None) -> list[Action]:
    """Make *document* the current one, then ask the sync layer to run."""
    return [LoadSuccess(document=document, secret=secret), Synchronize()]


def load(gateway: DocumentGateway, uuid: str, secret: str) -> list[Action]:
    """Fetch a remote document and turn the outcome into actions.

    Each gateway failure falls back to the default document after the
    user has been told what went wrong.
    """
    try:
        document = gateway.fetch(uuid, secret)
    except DocumentNotFound:
        logger.info("Document %s not found", uuid)
        return not_found()
    except DecryptionFailed:
        logger.warning("Could not decrypt document %s", uuid)
        return decryption_failed()
    except ServerUnreachable as exc:
        logger.warning("Server unreachable while loading %s: %s", uuid, exc)
        return server_unreachable()

    return load_success(document.mark_synchronized(), secret)


# ------------------------------------------------------------------
# Local edits
# ------------------------------------------------------------------


def update_content(state: DocumentsState, content: str) -> list[Action]:
    """Edit the current document's content.

    A document that was never synchronized is replaced as a whole by a
    fresh one carrying the edit, so no incremental change is persisted
    against an identity that does not exist remotely yet.
    """
    if state.is_new:
        document = Document(template=state.current.template).with_content(content)
        return load_success(document, generate_secret())
    return [UpdateContent(content=content), LocalPersist()]


def update_template(state: DocumentsState, template: str) -> list[Action]:
    """Change the current document's template (see :func:`update_content`)."""
    if state.is_new:
        document = Document(content=state.current.content).with_template(template)
        return load_success(document, generate_secret())
    return [UpdateTemplate(template=template), LocalPersist()]


def toggle_task_list_item(state: DocumentsState, index: int) -> list[Action]:
    actions: list[Action] = [ToggleTaskListItem(index=index)]
    if not state.is_new:
        actions.append(LocalPersist())
    return actions


def force_update_current_document(document: Document) -> list[Action]:
    return [ForceUpdateCurrentDocument(document=document)]


def update_current_document(document: Document) -> list[Action]:
    return [UpdateCurrentDocument(document=document)]


# ------------------------------------------------------------------
# Failures
# ------------------------------------------------------------------


def _fail(message: str) -> list[Action]:
    return [Notify(level=NotificationLevel.ERROR, message=message), LoadDefault()]


def not_found() -> list[Action]:
    return _fail(NOT_FOUND_MESSAGE)


def decryption_failed() -> list[Action]:
    return _fail(DECRYPTION_FAILED_MESSAGE)


def server_unreachable() -> list[Action]:
    return _fail(SERVER_UNREACHABLE_MESSAGE)
