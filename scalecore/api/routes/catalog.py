# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from scalecore.api.schemas.catalog import CatalogItemOut, CatalogListOut
from scalecore.api.unit_contract import normalize_price, to_wire_number
from scalecore.catalog.store import Catalog, Item
from scalecore.services.errors import UnknownItem

router = APIRouter(prefix="/catalog", tags=["catalog"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def _item_out(item: Item) -> CatalogItemOut:
    return CatalogItemOut(
        id=item.id,
        name=item.name,
        unitPrice=to_wire_number(item.unit_price),
        unit=item.unit.value,
        kgPrice=to_wire_number(normalize_price(item.unit_price, item.unit)),
    )


@router.get("/items", response_model=CatalogListOut)
def list_items(catalog: Catalog = Depends(get_catalog)):
    items = [_item_out(item) for item in catalog.items()]
    return CatalogListOut(items=items, count=len(items))


@router.get("/items/{item_id}", response_model=CatalogItemOut)
def get_item(item_id: int, catalog: Catalog = Depends(get_catalog)):
    item = catalog.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=UnknownItem(item_id).as_detail())
    return _item_out(item)
