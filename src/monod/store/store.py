"""Synchronous action dispatcher owning the documents state.

The store is the only writer of the state slice.  Collaborators (sync,
local persistence, notifications) are plain callables that receive every
action after it was reduced, together with the resulting state, and may
answer with follow-up actions.  Follow-ups are dispatched immediately,
depth-first, before the next action of the original batch, so emission
order is exactly the order in which actions are recorded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from monod.store.actions import Action
from monod.store.reducer import reduce
from monod.store.state import DocumentsState

logger = logging.getLogger(__name__)

Collaborator = Callable[[Action, DocumentsState], Iterable[Action] | None]


class Store:
    """Holds the documents state and dispatches actions against it.

    Args:
        state: Initial state. Defaults to a fresh ``DocumentsState``.
        collaborators: Callables notified of every dispatched action.
    """

    def __init__(
        self,
        state: DocumentsState | None = None,
        collaborators: Iterable[Collaborator] = (),
    ) -> None:
        self._state = state if state is not None else DocumentsState()
        self._collaborators: list[Collaborator] = list(collaborators)
        self._actions: list[Action] = []

    @property
    def state(self) -> DocumentsState:
        return self._state

    @property
    def actions(self) -> list[Action]:
        """Every action dispatched so far, in dispatch order."""
        return list(self._actions)

    def clear_actions(self) -> None:
        self._actions.clear()

    def subscribe(self, collaborator: Collaborator) -> None:
        self._collaborators.append(collaborator)

    def dispatch(self, *actions: Action) -> list[Action]:
        """Dispatch *actions* in order, including collaborator follow-ups.

        Returns:
            The actions processed by this call, follow-ups included.
        """
        processed: list[Action] = []
        for action in actions:
            self._dispatch_one(action, processed)
        return processed

    def _dispatch_one(self, action: Action, processed: list[Action]) -> None:
        logger.debug("Dispatching %s", action.type)
        self._state = reduce(self._state, action)
        self._actions.append(action)
        processed.append(action)

        for collaborator in list(self._collaborators):
            follow_ups = collaborator(action, self._state)
            if not follow_ups:
                continue
            for follow_up in follow_ups:
                self._dispatch_one(follow_up, processed)
