"""Access to the remote copy of documents.

Transport and encryption live behind the :class:`DocumentGateway`
protocol; the editor core only sees documents going in and out and the
errors below.  :class:`InMemoryGateway` is a dict-backed implementation
used by the MCP server session and the test-suite.
"""

from __future__ import annotations

import uuid as uuid_lib
from typing import Protocol

from monod.documents.document import Document


class GatewayError(Exception):
    """Base class for errors raised while talking to the remote side."""


class DocumentNotFound(GatewayError):
    """No remote document exists for the requested uuid."""


class DecryptionFailed(GatewayError):
    """The remote payload could not be decrypted with the given secret."""


class ServerUnreachable(GatewayError):
    """The remote side could not be contacted."""


class DocumentGateway(Protocol):
    def fetch(self, uuid: str, secret: str) -> Document: ...

    def push(self, document: Document, secret: str) -> Document: ...


class InMemoryGateway:
    """Keeps remote documents in a dict, keyed by uuid.

    Each stored document remembers the secret it was pushed with; fetching
    it with another secret raises :class:`DecryptionFailed`.  Setting
    ``online`` to ``False`` makes every call raise
    :class:`ServerUnreachable`.
    """

    def __init__(self) -> None:
        self.online = True
        self._documents: dict[str, tuple[Document, str]] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def fetch(self, uuid: str, secret: str) -> Document:
        self._ensure_online()
        try:
            document, stored_secret = self._documents[uuid]
        except KeyError:
            raise DocumentNotFound(f"Document not found: {uuid}") from None
        if stored_secret != secret:
            raise DecryptionFailed(f"Cannot decrypt document {uuid}")
        return document

    def push(self, document: Document, secret: str) -> Document:
        """Store *document*, assigning a uuid on first push.

        Returns:
            The stored document, without local modification marker.
        """
        self._ensure_online()
        doc_uuid = document.uuid or uuid_lib.uuid4().hex
        existing = self._documents.get(doc_uuid)
        if existing is not None and existing[1] != secret:
            raise DecryptionFailed(f"Cannot decrypt document {doc_uuid}")

        stored = document.model_copy(
            update={"uuid": doc_uuid, "last_modified_locally": None}
        )
        self._documents[doc_uuid] = (stored, secret)
        return stored

    def _ensure_online(self) -> None:
        if not self.online:
            raise ServerUnreachable("Remote server is offline")
