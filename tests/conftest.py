"""Shared fixtures for the monod test-suite."""

import pytest

from monod.documents import Document
from monod.notifications import Notifier
from monod.store import DocumentsState, Store, Synchronized
from monod.sync import InMemoryGateway, LocalDocumentStore, LocalPersister, Synchronizer

NESTED_TASKS = """Hello:

- [ ] a bigger project
  - [ ] first subtask #1234
  - [X] follow up subtask #4321
  - [ ] final subtask cc @mention

- [ ] a separate task
  - [ ] first subtask #1234
  - [X] follow up subtask #4321"""


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def local_store(tmp_path):
    return LocalDocumentStore(tmp_path / "state" / "monod.json")


@pytest.fixture
def store(gateway, local_store, notifier):
    """A store wired with every collaborator, holding a new document."""
    return Store(
        collaborators=[
            Synchronizer(gateway),
            LocalPersister(local_store),
            notifier,
        ]
    )


@pytest.fixture
def synchronized_state():
    """State of a document already known remotely."""
    return DocumentsState(
        current=Document(),
        loaded=True,
        sync=Synchronized(secret="secret"),
    )


@pytest.fixture
def nested_tasks():
    return NESTED_TASKS
