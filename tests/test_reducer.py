"""Tests for the documents reducer."""

import pytest

from monod.documents import Document
from monod.store import Action, ActionType, DocumentsState, NewDocument, Synchronized, reduce
from monod.store.actions import (
    ForceUpdateCurrentDocument,
    LoadDefault,
    LoadSuccess,
    LocalPersist,
    Synchronize,
    ToggleTaskListItem,
    UpdateContent,
    UpdateCurrentDocument,
    UpdateTemplate,
)


# =============================================================================
# Loading
# =============================================================================


class TestLoading:
    def test_initial_state(self):
        state = reduce(None, "")

        assert set(DocumentsState.model_fields) == {
            "current", "loaded", "sync", "force_update",
        }
        assert state.current == Document()
        assert state.loaded is False
        assert state.secret is None
        assert state.is_new
        assert state.force_update is False

    def test_load_default(self):
        state = reduce(None, LoadDefault())

        assert state.loaded is True
        assert state.force_update is False
        assert state.current == Document()

    def test_load_default_forgets_the_previous_secret(self):
        state = reduce(None, LoadSuccess(document=Document(uuid="1"), secret="s"))
        state = reduce(state, LoadDefault())

        assert isinstance(state.sync, NewDocument)
        assert state.secret is None

    def test_load_success(self):
        doc = Document(uuid="1234", content="foo")
        state = reduce(None, LoadSuccess(document=doc, secret="secret"))

        assert state.current is doc
        assert state.loaded is True
        assert state.sync == Synchronized(secret="secret")
        assert state.secret == "secret"
        assert not state.is_new

    def test_load_success_without_secret_is_new(self):
        state = reduce(None, LoadSuccess(document=Document()))

        assert state.is_new
        assert state.loaded is True


# =============================================================================
# Local edits
# =============================================================================


class TestLocalEdits:
    def test_update_template_of_default_document(self):
        state = reduce(None, "")
        doc_before_update = state.current

        state = reduce(state, UpdateTemplate(template="letter"))

        assert state.current.template == "letter"
        assert state.current is not doc_before_update
        assert state.force_update is False
        assert state.current.last_modified_locally is None

    def test_update_template_with_local_modifications(self):
        state = DocumentsState(current=Document(content="foo"))
        doc_before_update = state.current

        state = reduce(state, UpdateTemplate(template="letter"))

        assert state.current.template == "letter"
        assert state.current is not doc_before_update
        assert state.current.last_modified_locally is not None
        assert state.force_update is False

    def test_update_content(self):
        state = reduce(None, "")
        doc_before_update = state.current

        state = reduce(state, UpdateContent(content="foo"))

        assert state.current.content == "foo"
        assert state.current is not doc_before_update
        assert state.current.last_modified_locally is not None
        assert state.force_update is False

    def test_clearing_synchronized_content_marks_modified(self):
        state = DocumentsState(
            current=Document(uuid="1", content="foo"),
            sync=Synchronized(secret="s"),
        )

        state = reduce(state, UpdateContent(content=""))

        assert state.current.content == ""
        assert state.current.last_modified_locally is not None

    def test_update_does_not_touch_previous_state(self):
        state = DocumentsState(current=Document(content="foo"))
        reduce(state, UpdateContent(content="bar"))

        assert state.current.content == "foo"
        assert state.current.last_modified_locally is None


# =============================================================================
# Task lists
# =============================================================================


class TestToggleTaskListItem:
    def test_check_item(self):
        state = DocumentsState(current=Document(content="Hello\n\n- [ ] item 1"))
        new_state = reduce(state, ToggleTaskListItem(index=0))

        assert new_state.current.content == "Hello\n\n- [x] item 1"
        assert new_state.current is not state.current
        assert new_state.current.last_modified_locally is not None

    def test_uncheck_item(self):
        state = DocumentsState(current=Document(content="Hello\n\n- [X] item 1"))
        new_state = reduce(state, ToggleTaskListItem(index=0))

        assert new_state.current.content == "Hello\n\n- [ ] item 1"

    def test_many_checkboxes(self, nested_tasks):
        state = DocumentsState(current=Document(content=nested_tasks))
        new_state = reduce(state, ToggleTaskListItem(index=6))

        assert new_state.current.content == (
            nested_tasks[: nested_tasks.rindex("[X]")]
            + "[ ] follow up subtask #4321"
        )

    def test_no_task_list_item(self):
        doc = Document(content="Hello")
        state = DocumentsState(current=doc)

        new_state = reduce(state, ToggleTaskListItem(index=123))

        assert new_state is state
        assert new_state.current is doc
        assert new_state.current.last_modified_locally is None

    def test_not_strictly_a_task_list_item(self):
        doc = Document(content="[ ] foo")
        new_state = reduce(DocumentsState(current=doc), ToggleTaskListItem(index=0))

        assert new_state.current.content == "[ ] foo"
        assert new_state.current.last_modified_locally is None

    def test_noop_toggle_resets_force_update(self):
        doc = Document(content="Hello")
        state = DocumentsState(current=doc, force_update=True)

        new_state = reduce(state, ToggleTaskListItem(index=0))

        assert new_state.force_update is False
        assert new_state.current is doc


# =============================================================================
# Replacing the current document
# =============================================================================


class TestReplaceCurrentDocument:
    def test_force_update_current_document(self):
        doc1 = Document(uuid="1234")
        doc2 = Document(uuid="5678")

        state = reduce(None, LoadSuccess(document=doc1, secret="secret"))
        assert state.current.uuid == "1234"

        state = reduce(state, ForceUpdateCurrentDocument(document=doc2))

        assert state.current.uuid == "5678"
        assert state.force_update is True

    def test_update_current_document(self):
        doc1 = Document(uuid="1234")
        doc2 = Document(uuid="5678")

        state = reduce(None, LoadSuccess(document=doc1, secret="secret"))
        state = reduce(state, UpdateCurrentDocument(document=doc2))

        assert state.current.uuid == "5678"
        assert state.force_update is False

    def test_force_update_lasts_one_action(self):
        state = reduce(None, ForceUpdateCurrentDocument(document=Document(content="a")))
        assert state.force_update is True

        state = reduce(state, UpdateContent(content="b"))
        assert state.force_update is False

        state = reduce(state, UpdateTemplate(template="letter"))
        assert state.force_update is False

    def test_every_document_action_resets_force_update(self):
        forced = reduce(None, ForceUpdateCurrentDocument(document=Document(content="- [ ] a")))
        for action in [
            LoadDefault(),
            LoadSuccess(document=Document(), secret="s"),
            UpdateTemplate(template="report"),
            UpdateContent(content="x"),
            ToggleTaskListItem(index=0),
            UpdateCurrentDocument(document=Document()),
        ]:
            assert reduce(forced, action).force_update is False


# =============================================================================
# Unknown actions
# =============================================================================


class TestUnknownActions:
    def test_signals_pass_through(self):
        state = DocumentsState(current=Document(content="foo"))

        assert reduce(state, Synchronize()) is state
        assert reduce(state, LocalPersist()) is state

    def test_arbitrary_objects_pass_through(self):
        state = DocumentsState()

        assert reduce(state, {}) is state
        assert reduce(state, object()) is state

    @pytest.mark.parametrize(
        "action_type",
        [
            ActionType.LOAD_SUCCESS,
            ActionType.UPDATE_CONTENT,
            ActionType.UPDATE_TEMPLATE,
            ActionType.TOGGLE_TASK_LIST_ITEM,
            ActionType.FORCE_UPDATE_CURRENT_DOCUMENT,
            ActionType.UPDATE_CURRENT_DOCUMENT,
        ],
    )
    def test_document_type_without_payload_passes_through(self, action_type):
        state = DocumentsState(current=Document(content="- [ ] foo"))

        assert reduce(state, Action(type=action_type)) is state
