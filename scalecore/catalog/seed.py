# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from scalecore.api.schemas.catalog import ItemRecordList
from scalecore.catalog.store import Catalog, Item, Unit

logger = logging.getLogger(__name__)


def _item(item_id: int, unit_price: str, unit: Unit) -> Item:
    return Item(id=item_id, name=f"item{item_id}", unit_price=unit_price, unit=unit)


DEFAULT_ITEMS: List[Item] = [
    _item(1, "1.45", Unit.KG),
    _item(2, "1.23", Unit.KG),
    _item(3, "2.35", Unit.G),
    _item(4, "4.56", Unit.KG),
    _item(5, "1.34", Unit.KG),
    _item(6, "5.67", Unit.KG),
    _item(7, "2.34", Unit.G),
    _item(8, "3.45", Unit.KG),
    _item(9, "9.1", Unit.KG),
    _item(10, "1", Unit.G),
    _item(11, "2.13", Unit.G),
    _item(12, "2.64", Unit.KG),
    _item(13, "2.85", Unit.KG),
    _item(14, "2.71", Unit.KG),
    _item(15, "1.49", Unit.KG),
    _item(16, "1.78", Unit.G),
    _item(17, "1.59", Unit.KG),
    _item(18, "3.55", Unit.G),
    _item(19, "4.05", Unit.KG),
]


def load_items(path: Path) -> List[Item]:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"catalog file {path} is not readable") from exc

    try:
        records = ItemRecordList.validate_json(raw)
    except ValidationError as exc:
        raise ValueError(f"catalog file {path} is invalid: {exc.error_count()} error(s)") from exc

    return [
        Item(id=rec.id, name=rec.name, unit_price=rec.unitPrice, unit=Unit(rec.unit))
        for rec in records
    ]


def build_catalog(path: Optional[Path] = None) -> Catalog:
    items = load_items(path) if path else DEFAULT_ITEMS
    catalog = Catalog(items)
    catalog.seal()
    logger.info("catalog:loaded", extra={"items": len(catalog), "source": str(path or "builtin")})
    return catalog
