"""Documents state, its reducer and the store dispatching actions."""

from monod.store.actions import Action, ActionType
from monod.store.reducer import reduce
from monod.store.state import DocumentsState, NewDocument, Synchronized, initial_state
from monod.store.store import Collaborator, Store

__all__ = [
    "Action",
    "ActionType",
    "Collaborator",
    "DocumentsState",
    "NewDocument",
    "Store",
    "Synchronized",
    "initial_state",
    "reduce",
]
