from decimal import Decimal, InvalidOperation
from typing import Any, Final

from beartype import beartype

# Largest value representable by a uint256 contract argument
MAX_UINT256: Final[Decimal] = Decimal(2**256 - 1)


@beartype
def to_decimal(value: Any) -> Decimal:
    """
    Convert a value to a Decimal with strict error handling.

    Floats are converted via string representation to preserve literal value.
    Raises ValueError for invalid strings.
    """
    if isinstance(value, bool):
        raise TypeError("Cannot convert type bool to Decimal")

    if isinstance(value, Decimal):
        return value

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        return Decimal(str(value))

    if isinstance(value, str):
        if not value:
            raise ValueError("Cannot convert empty string to Decimal")
        try:
            return Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal string: {value}") from e

    raise TypeError(f"Cannot convert type {type(value).__name__} to Decimal")


@beartype
def to_amount(value: Any) -> Decimal:
    """
    Convert a value to a Decimal usable as an on-chain token amount.

    Amounts are expressed in base units, so they must be whole numbers in the
    uint256 range.
    """
    amount = to_decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value}")
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {value}")
    if amount != amount.to_integral_value():
        raise ValueError(f"Amount must be expressed in whole base units: {value}")
    if amount > MAX_UINT256:
        raise ValueError(f"Amount exceeds uint256 range: {value}")
    return amount
