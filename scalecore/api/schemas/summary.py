# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Pydantic schemas for the summary endpoint: the action envelope coming in and
the calculate/query results going out.
"""
from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel

CALCULATE = "calculate"
QUERY = "query"


class ActionEnvelope(BaseModel):
    # "calculate" | "query"; any other action is accepted and yields no result
    action: str
    datas: str


class PriceQuoteOut(BaseModel):
    itemId: int
    kgPrice: Union[int, float]


class SummaryResponse(BaseModel):
    action: str
    result: Union[int, float, List[PriceQuoteOut], None] = None
