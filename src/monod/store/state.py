"""The documents state slice."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from monod.documents.document import Document


class NewDocument(BaseModel):
    """The current document was never associated with a remote identity."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["new"] = "new"


class Synchronized(BaseModel):
    """The current document is known remotely and encrypted with ``secret``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["synchronized"] = "synchronized"
    secret: str


SyncStatus = Annotated[NewDocument | Synchronized, Field(discriminator="kind")]


class DocumentsState(BaseModel):
    """Current document, load flag, sync status and force-update flag.

    ``force_update`` is only ``True`` right after the current document was
    replaced by a non-local actor, so views can skip echoing that change
    back as a local edit.
    """

    model_config = ConfigDict(frozen=True)

    current: Document = Field(default_factory=Document)
    loaded: bool = False
    sync: SyncStatus = Field(default_factory=NewDocument)
    force_update: bool = False

    @property
    def is_new(self) -> bool:
        return isinstance(self.sync, NewDocument)

    @property
    def secret(self) -> str | None:
        if isinstance(self.sync, Synchronized):
            return self.sync.secret
        return None


def sync_status_for(secret: str | None) -> NewDocument | Synchronized:
    if secret is None:
        return NewDocument()
    return Synchronized(secret=secret)


def initial_state() -> DocumentsState:
    return DocumentsState()
