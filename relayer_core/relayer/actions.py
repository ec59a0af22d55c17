from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from beartype import beartype


class ActionType(str, Enum):
    ADD_ORDERS = "ADD_ORDERS"
    SET_PRODUCTS = "SET_PRODUCTS"
    SET_TOKENS = "SET_TOKENS"


@dataclass(frozen=True)
class Action:
    """A state change request; type is usually an ActionType but any tag is accepted."""

    type: ActionType | str
    payload: Any = None


@beartype
def add_orders(orders: Sequence[Mapping[str, Any]]) -> Action:
    return Action(ActionType.ADD_ORDERS, tuple(orders))


@beartype
def set_products(products: Sequence[Mapping[str, Any]]) -> Action:
    return Action(ActionType.SET_PRODUCTS, tuple(products))


@beartype
def set_tokens(tokens: Sequence[Mapping[str, Any]]) -> Action:
    return Action(ActionType.SET_TOKENS, tuple(tokens))
