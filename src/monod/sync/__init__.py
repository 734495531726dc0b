"""Collaborators keeping documents in sync with their remote and local copies."""

from monod.sync.gateway import (
    DecryptionFailed,
    DocumentGateway,
    DocumentNotFound,
    GatewayError,
    InMemoryGateway,
    ServerUnreachable,
)
from monod.sync.persistence import LocalDocumentStore, LocalPersister, PersistedDocument
from monod.sync.synchronizer import ChangeType, Synchronizer, document_fingerprint

__all__ = [
    "ChangeType",
    "DecryptionFailed",
    "DocumentGateway",
    "DocumentNotFound",
    "GatewayError",
    "InMemoryGateway",
    "LocalDocumentStore",
    "LocalPersister",
    "PersistedDocument",
    "ServerUnreachable",
    "Synchronizer",
    "document_fingerprint",
]
