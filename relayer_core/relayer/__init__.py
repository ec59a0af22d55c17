from relayer_core.relayer.actions import Action, ActionType, add_orders, set_products, set_tokens
from relayer_core.relayer.reducer import relayer_reducer
from relayer_core.relayer.state import RelayerState, union_by
from relayer_core.relayer.store import RelayerStore

__all__ = [
    "Action",
    "ActionType",
    "RelayerState",
    "RelayerStore",
    "add_orders",
    "relayer_reducer",
    "set_products",
    "set_tokens",
    "union_by",
]
