# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Iterable, List, Optional


class Unit(str, Enum):
    KG = "kg"
    G = "g"


class CatalogSealed(RuntimeError):
    pass


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid unit price: {value!r}") from exc


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    unit_price: Decimal
    unit: Unit

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError(f"item id must be a positive integer, got {self.id!r}")
        price = _as_decimal(self.unit_price)
        if not price.is_finite() or price < 0:
            raise ValueError(f"unit price must be non-negative, got {self.unit_price!r}")
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "unit_price", price)
        object.__setattr__(self, "unit", Unit(self.unit))


class Catalog:
    """In-memory item store keyed by item id.

    Filled once during startup, then sealed; pricing only ever reads from it.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: Dict[int, Item] = {}
        self._sealed = False
        if items is not None:
            self.bulk_add(items)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def add(self, item: Item) -> None:
        if self._sealed:
            raise CatalogSealed(f"catalog is read-only, cannot add item {item.id}")
        self._items[item.id] = item

    def bulk_add(self, items: Iterable[Item]) -> None:
        for item in items:
            self.add(item)

    def get(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    def items(self) -> List[Item]:
        return [self._items[key] for key in sorted(self._items)]

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)
