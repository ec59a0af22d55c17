from relayer_core.ethereum.addresses import normalize_address
from relayer_core.ethereum.client import EthereumClient, Web3EthereumClient

__all__ = [
    "EthereumClient",
    "Web3EthereumClient",
    "normalize_address",
]
