# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from decimal import Decimal

import pytest

from scalecore.catalog.store import Catalog, CatalogSealed, Item, Unit

pytestmark = pytest.mark.unit


def test_item_coerces_price_and_unit():
    item = Item(id=1, name="item1", unit_price=1.45, unit="kg")

    assert item.unit_price == Decimal("1.45")
    assert item.unit is Unit.KG


@pytest.mark.parametrize(
    "kwargs",
    [
        {"id": 0, "name": "x", "unit_price": "1", "unit": "kg"},
        {"id": True, "name": "x", "unit_price": "1", "unit": "kg"},
        {"id": 1, "name": "x", "unit_price": "-0.01", "unit": "kg"},
        {"id": 1, "name": "x", "unit_price": "abc", "unit": "kg"},
        {"id": 1, "name": "x", "unit_price": "1", "unit": "lb"},
    ],
)
def test_item_rejects_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        Item(**kwargs)


def test_bulk_add_later_duplicate_wins():
    catalog = Catalog()
    catalog.bulk_add(
        [
            Item(id=1, name="first", unit_price="1", unit=Unit.KG),
            Item(id=2, name="other", unit_price="2", unit=Unit.G),
            Item(id=1, name="second", unit_price="3", unit=Unit.KG),
        ]
    )

    assert len(catalog) == 2
    assert catalog.get(1).name == "second"


def test_get_missing_returns_none():
    catalog = Catalog([Item(id=5, name="item5", unit_price="1.34", unit=Unit.KG)])

    assert catalog.get(6) is None
    assert 5 in catalog
    assert 6 not in catalog


def test_items_sorted_by_id():
    catalog = Catalog(
        [
            Item(id=3, name="c", unit_price="1", unit=Unit.KG),
            Item(id=1, name="a", unit_price="1", unit=Unit.KG),
        ]
    )

    assert [item.id for item in catalog.items()] == [1, 3]


def test_sealed_catalog_is_read_only():
    catalog = Catalog([Item(id=1, name="a", unit_price="1", unit=Unit.KG)])
    catalog.seal()

    with pytest.raises(CatalogSealed):
        catalog.add(Item(id=2, name="b", unit_price="1", unit=Unit.KG))
    assert catalog.sealed
    assert catalog.get(1) is not None
