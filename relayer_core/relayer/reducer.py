from __future__ import annotations

from relayer_core.relayer.actions import Action, ActionType
from relayer_core.relayer.state import RelayerState, union_by

ORDER_KEY = "orderHash"


def relayer_reducer(state: RelayerState | None, action: Action) -> RelayerState:
    """Return the state that results from applying action to state."""
    if state is None:
        state = RelayerState()

    if action.type == ActionType.ADD_ORDERS:
        return state.model_copy(update={"orders": union_by(state.orders, action.payload, ORDER_KEY)})
    if action.type == ActionType.SET_PRODUCTS:
        return state.model_copy(update={"products": tuple(action.payload)})
    if action.type == ActionType.SET_TOKENS:
        return state.model_copy(update={"tokens": tuple(action.payload)})

    return state
