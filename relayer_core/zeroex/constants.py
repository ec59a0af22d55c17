from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import Final

from relayer_core.decimals import MAX_UINT256

NULL_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"
ZERO: Final[Decimal] = Decimal(0)
MAX: Final[Decimal] = MAX_UINT256

# Used when the protocol library does not know the ether token for the network
WETH_MAINNET_ADDRESS: Final[str] = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"

ORDER_FIELDS: Final[tuple[str, ...]] = (
    "exchangeAddress",
    "expirationTimeSeconds",
    "feeRecipientAddress",
    "makerAddress",
    "makerAssetAmount",
    "makerAssetData",
    "makerFee",
    "salt",
    "senderAddress",
    "signature",
    "takerAddress",
    "takerAssetAmount",
    "takerAssetData",
    "takerFee",
)

EXCHANGE_ADDRESS_CACHE_KEY: Final[str] = "0x:v2:exchange:address"
ZRX_TOKEN_ADDRESS_CACHE_KEY: Final[str] = "0x:v2:exchange:ZRX:address"
WETH_TOKEN_ADDRESS_CACHE_KEY: Final[str] = "0x:v2:ether-token:WETH:address"
FILLED_TAKER_AMOUNT_CACHE_KEY: Final[str] = "0x:v2:exchange:order:filled:{}"

ADDRESS_CACHE_TTL: Final[timedelta] = timedelta(hours=24)
FILLED_AMOUNT_CACHE_TTL: Final[timedelta] = timedelta(seconds=60)
