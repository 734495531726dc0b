"""Immutable markdown document snapshots.

A :class:`Document` is never mutated in place: every edit returns a new
instance, so consumers can compare references (``old is new``) to detect a
change cheaply.  Local edits stamp ``last_modified_locally`` so the sync
layer knows the document holds unsynced changes; loading a document from an
authoritative source clears it.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

DEFAULT_CONTENT = ""


class Template(StrEnum):
    """Style identifiers a document can be rendered with."""

    DEFAULT = ""
    LETTER = "letter"
    REPORT = "report"
    INVOICE = "invoice"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(BaseModel):
    """One markdown document and its sync metadata."""

    model_config = ConfigDict(frozen=True)

    uuid: str | None = None
    content: str = DEFAULT_CONTENT
    template: Template = Template.DEFAULT
    last_modified_locally: datetime | None = None

    @property
    def is_modified_locally(self) -> bool:
        return self.last_modified_locally is not None

    @property
    def has_default_content(self) -> bool:
        return self.content == DEFAULT_CONTENT

    def update(self, **changes: Any) -> Document:
        """Return a new document with *changes* applied through the local
        edit path.

        ``last_modified_locally`` is stamped with the current time when at
        least one field actually changes.  The one exception is a pristine
        document (no uuid, default content) whose content stays default:
        picking a template before typing anything leaves it clean.
        Re-applying a value the document already has leaves the marker
        untouched.

        Args:
            **changes: ``Document`` field names and their new values.

        Returns:
            A new ``Document`` instance, even when nothing changed.
        """
        data = self.model_dump()
        changed = any(data[key] != value for key, value in changes.items())
        data.update(changes)
        pristine = (
            self.uuid is None
            and self.has_default_content
            and data["content"] == DEFAULT_CONTENT
        )
        if changed and not pristine:
            data["last_modified_locally"] = _utcnow()
        return type(self).model_validate(data)

    def with_content(self, content: str) -> Document:
        return self.update(content=content)

    def with_template(self, template: str) -> Document:
        return self.update(template=template)

    def mark_synchronized(self) -> Document:
        """Return a copy without the local modification marker."""
        return self.model_copy(update={"last_modified_locally": None})


def compute_content_hash(content: str) -> str:
    """Compute a SHA-256 hash of document content after normalizing line endings.

    Args:
        content: The markdown text to hash.

    Returns:
        Hex-encoded SHA-256 digest string.
    """
    normalized = content.replace("\r\n", "\n").replace("\r", "\n")
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
