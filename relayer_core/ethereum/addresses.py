from __future__ import annotations

from typing import Any

from beartype import beartype
from eth_utils import add_0x_prefix, remove_0x_prefix


@beartype
def normalize_address(address: Any) -> str:
    """
    Return the lower-case, 0x-prefixed form of an account address.

    Accepts anything with a string form (checksummed strings, web3 address
    objects) and is idempotent.
    """
    return add_0x_prefix(remove_0x_prefix(str(address).strip().lower()))
