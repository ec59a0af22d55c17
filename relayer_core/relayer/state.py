from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from beartype import beartype
from pydantic import BaseModel, ConfigDict

Record = Mapping[str, Any]


class RelayerState(BaseModel):
    """Client-side view of the relayer: its order book, products and tokens."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    orders: tuple[Record, ...] = ()
    products: tuple[Record, ...] = ()
    tokens: tuple[Record, ...] = ()


@beartype
def union_by(existing: Iterable[Record], incoming: Iterable[Record], key: str) -> tuple[Record, ...]:
    """
    Stable union of two record sequences keyed by a field.

    The first record seen for a key value wins and keeps its position; later
    records with the same value are dropped. Records without the field all
    share the key None.
    """
    seen: set[Hashable] = set()
    merged: list[Record] = []
    for records in (existing, incoming):
        for record in records:
            value = record.get(key)
            if value in seen:
                continue
            seen.add(value)
            merged.append(record)
    return tuple(merged)
