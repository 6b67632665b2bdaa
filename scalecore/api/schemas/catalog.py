# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Pydantic schemas for catalog seed files and catalog listings.
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class ItemRecord(BaseModel):
    id: int = Field(..., gt=0)
    name: str
    unitPrice: Decimal = Field(..., ge=0)
    unit: Literal["kg", "g"]


ItemRecordList = TypeAdapter(List[ItemRecord])


class CatalogItemOut(BaseModel):
    id: int
    name: str
    unitPrice: Union[int, float]
    unit: str
    kgPrice: Union[int, float]


class CatalogListOut(BaseModel):
    items: List[CatalogItemOut]
    count: int
