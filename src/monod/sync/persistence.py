"""Local persistence using JSON-backed Pydantic models.

Keeps the current document (and the secret it is encrypted with) on disk
so an editing session can be restored after a restart, including edits
that were never synchronized.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field

from monod.documents.document import Document
from monod.store.actions import Action, ActionType
from monod.store.state import DocumentsState

logger = logging.getLogger(__name__)


class PersistedDocument(BaseModel):
    """Root model for the persisted state file."""

    version: int = 1
    document: Document
    secret: str | None = None
    saved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LocalDocumentStore:
    """Reads and writes the JSON file holding the last local document.

    Args:
        state_file: Path to the JSON state file.
    """

    def __init__(self, state_file: str | Path) -> None:
        self._state_file = Path(state_file)

    @property
    def state_file(self) -> Path:
        return self._state_file

    def load(self) -> PersistedDocument | None:
        """Load the persisted document, or ``None`` if the file does not
        exist or is empty.
        """
        if self._state_file.exists() and self._state_file.stat().st_size > 0:
            raw = self._state_file.read_text(encoding="utf-8")
            return PersistedDocument.model_validate_json(raw)
        return None

    def save(self, document: Document, secret: str | None) -> PersistedDocument:
        """Persist *document* and *secret* as pretty-printed JSON.

        Parent directories are created automatically if they do not exist.
        """
        persisted = PersistedDocument(document=document, secret=secret)
        self._state_file.parent.mkdir(parents=True, exist_ok=True)
        self._state_file.write_text(
            persisted.model_dump_json(indent=2) + "\n",
            encoding="utf-8",
        )
        return persisted

    def clear(self) -> None:
        self._state_file.unlink(missing_ok=True)


class LocalPersister:
    """Collaborator writing the current document on ``LocalPersist``."""

    def __init__(self, store: LocalDocumentStore) -> None:
        self._store = store

    def __call__(self, action: Action, state: DocumentsState) -> None:
        if action.type != ActionType.LOCAL_PERSIST:
            return None
        self._store.save(state.current, state.secret)
        logger.debug("Persisted document %s to %s", state.current.uuid, self._store.state_file)
        return None
