from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field

from relayer_core.zeroex.constants import ORDER_FIELDS


class SignerType(str, Enum):
    """How the signing wallet prefixes and formats an order hash signature."""

    DEFAULT = "DEFAULT"
    LEDGER = "LEDGER"
    METAMASK = "METAMASK"


@beartype
class TxOptions(BaseModel):
    """Transaction options forwarded to the protocol library."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    should_validate: bool = True
    gas_price: Decimal | None = Field(default=None, ge=0)
    gas_limit: int | None = Field(default=None, gt=0)
    nonce: int | None = Field(default=None, ge=0)

    def as_params(self, **overrides: Any) -> dict[str, Any]:
        """Return the options as keyword arguments, dropping unset values."""
        params = self.model_dump()
        params.update(overrides)
        return {key: value for key, value in params.items() if value is not None}


@beartype
def pick_order_fields(order: Mapping[str, Any]) -> dict[str, Any]:
    """Return only the signed-order fields of an order record, dropping relayer metadata."""
    return {field: order[field] for field in ORDER_FIELDS if field in order}
