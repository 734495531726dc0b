"""Sync collaborator: reconciles the current document with its remote copy.

Reacts to ``Synchronize`` actions only.  It compares the local document
(through its local modification marker) and the remote one (through a
fingerprint recorded at the last successful sync) to classify the change
that happened since then, and answers with the actions that bring both
sides back in line.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from monod.documents.document import Document, compute_content_hash
from monod.store.actions import (
    Action,
    ActionType,
    ForceUpdateCurrentDocument,
    NoNeedToSync,
    SynchronizeError,
    SynchronizeSuccess,
    UpdateCurrentDocument,
)
from monod.store.state import DocumentsState
from monod.sync.gateway import DocumentGateway, DocumentNotFound, GatewayError

logger = logging.getLogger(__name__)


class ChangeType(StrEnum):
    """Classification of changes detected between sync points."""

    NONE = "none"
    LOCAL_ONLY = "local_only"
    REMOTE_ONLY = "remote_only"
    BOTH_CHANGED = "both_changed"


def document_fingerprint(document: Document) -> str:
    """Hash of the synchronized fields of *document*."""
    return compute_content_hash(f"{document.template}\n{document.content}")


class Synchronizer:
    """Pushes local edits and pulls remote ones on ``Synchronize``.

    Args:
        gateway: Remote document access.
    """

    def __init__(self, gateway: DocumentGateway) -> None:
        self._gateway = gateway
        self._fingerprints: dict[str, str] = {}

    def __call__(self, action: Action, state: DocumentsState) -> list[Action] | None:
        if action.type != ActionType.SYNCHRONIZE:
            return None
        try:
            return self.synchronize(state)
        except GatewayError as exc:
            logger.warning("Synchronization failed: %s", exc)
            return [SynchronizeError(message=str(exc))]

    def synchronize(self, state: DocumentsState) -> list[Action]:
        """Return the actions reconciling *state* with the remote side.

        Raises:
            GatewayError: If the remote side fails while fetching or pushing.
        """
        secret = state.secret
        current = state.current
        if secret is None:
            return [NoNeedToSync(), SynchronizeSuccess()]

        remote: Document | None = None
        if current.uuid is not None:
            try:
                remote = self._gateway.fetch(current.uuid, secret)
            except DocumentNotFound:
                logger.info("Document %s does not exist remotely yet", current.uuid)

        change = self.detect(current, remote)
        logger.debug("Document %s: %s", current.uuid, change)

        if change == ChangeType.NONE:
            if remote is not None:
                self._remember(remote)
            return [NoNeedToSync(), SynchronizeSuccess()]

        if change == ChangeType.REMOTE_ONLY:
            assert remote is not None  # noqa: S101
            self._remember(remote)
            logger.info("Pulled remote changes of document %s", remote.uuid)
            return [
                ForceUpdateCurrentDocument(document=remote.mark_synchronized()),
                SynchronizeSuccess(),
            ]

        if change == ChangeType.BOTH_CHANGED:
            logger.warning(
                "Document %s changed both locally and remotely, keeping local version",
                current.uuid,
            )

        pushed = self._gateway.push(current, secret)
        self._remember(pushed)
        logger.info("Pushed local changes of document %s", pushed.uuid)
        return [UpdateCurrentDocument(document=pushed), SynchronizeSuccess()]

    def detect(self, current: Document, remote: Document | None) -> ChangeType:
        """Classify what changed since the last sync of *current*.

        Returns:
            A ``ChangeType`` indicating what has changed:

            - ``NONE`` -- neither side changed.
            - ``LOCAL_ONLY`` -- only the local document changed.
            - ``REMOTE_ONLY`` -- only the remote document changed.
            - ``BOTH_CHANGED`` -- both sides changed (true conflict).
        """
        local_changed = current.is_modified_locally
        remote_changed = False
        if remote is not None:
            remote_print = document_fingerprint(remote)
            known = self._fingerprints.get(remote.uuid or "")
            if known is None:
                # Never synced in this session: compare against the local copy.
                remote_changed = (
                    not local_changed and remote_print != document_fingerprint(current)
                )
            else:
                remote_changed = remote_print != known

        if local_changed and remote_changed:
            return ChangeType.BOTH_CHANGED
        if local_changed:
            return ChangeType.LOCAL_ONLY
        if remote_changed:
            return ChangeType.REMOTE_ONLY
        return ChangeType.NONE

    def _remember(self, document: Document) -> None:
        if document.uuid is not None:
            self._fingerprints[document.uuid] = document_fingerprint(document)
