from relayer_core import decimals
from relayer_core.ethereum import EthereumClient, Web3EthereumClient, normalize_address
from relayer_core.exceptions import AccountUnavailableError, NoFillableOrdersError, RelayerCoreError
from relayer_core.relayer import (
    Action,
    ActionType,
    RelayerState,
    RelayerStore,
    add_orders,
    relayer_reducer,
    set_products,
    set_tokens,
)
from relayer_core.zeroex import ClientConfig, TxOptions, ZeroExClient, ZeroExClientFactory

__all__ = [
    "AccountUnavailableError",
    "Action",
    "ActionType",
    "ClientConfig",
    "EthereumClient",
    "NoFillableOrdersError",
    "RelayerCoreError",
    "RelayerState",
    "RelayerStore",
    "TxOptions",
    "Web3EthereumClient",
    "ZeroExClient",
    "ZeroExClientFactory",
    "add_orders",
    "decimals",
    "normalize_address",
    "relayer_reducer",
    "set_products",
    "set_tokens",
]
