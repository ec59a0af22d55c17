from relayer_core.zeroex.client import ZeroExClient, ZeroExClientFactory
from relayer_core.zeroex.config import ClientConfig, load_client_config
from relayer_core.zeroex.constants import MAX, NULL_ADDRESS, ORDER_FIELDS, ZERO
from relayer_core.zeroex.models import SignerType, TxOptions, pick_order_fields
from relayer_core.zeroex.wrappers import (
    ContractWrappers,
    ContractWrappersFactory,
    EtherTokenWrapper,
    ExchangeWrapper,
    ForwarderWrapper,
    SignatureUtils,
)

__all__ = [
    "MAX",
    "NULL_ADDRESS",
    "ORDER_FIELDS",
    "ZERO",
    "ClientConfig",
    "ContractWrappers",
    "ContractWrappersFactory",
    "EtherTokenWrapper",
    "ExchangeWrapper",
    "ForwarderWrapper",
    "SignatureUtils",
    "SignerType",
    "TxOptions",
    "ZeroExClient",
    "ZeroExClientFactory",
    "load_client_config",
    "pick_order_fields",
]
