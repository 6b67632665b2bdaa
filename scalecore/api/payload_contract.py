# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List

from scalecore.catalog.store import Unit
from scalecore.services.errors import MalformedPayload

ENTRY_SEPARATOR = ";"
FIELD_SEPARATOR = ","

_INT_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class LineEntry:
    item_id: int
    quantity: Decimal
    unit: Unit


def _parse_id(raw: str, index: int) -> int:
    cleaned = raw.strip()
    if not _INT_RE.fullmatch(cleaned):
        raise MalformedPayload("invalid_item_id", {"index": index, "value": raw})
    return int(cleaned)


def _parse_quantity(raw: str, index: int) -> Decimal:
    cleaned = raw.strip()
    try:
        if cleaned in ("", ".", "-.", "+."):
            raise InvalidOperation()
        if cleaned.startswith("."):
            cleaned = "0" + cleaned
        qty = Decimal(cleaned)
    except InvalidOperation:
        raise MalformedPayload("invalid_quantity", {"index": index, "value": raw})
    if not qty.is_finite():
        raise MalformedPayload("invalid_quantity", {"index": index, "value": raw})
    return qty


def _parse_unit(raw: str, index: int) -> Unit:
    try:
        return Unit(raw.strip())
    except ValueError:
        raise MalformedPayload("unsupported_unit", {"index": index, "value": raw})


def parse_calculate_payload(datas: str) -> List[LineEntry]:
    if not isinstance(datas, str) or not datas.strip():
        raise MalformedPayload("empty_payload", {"datas": datas})

    entries: List[LineEntry] = []
    for index, raw_entry in enumerate(datas.split(ENTRY_SEPARATOR)):
        parts = raw_entry.split(FIELD_SEPARATOR)
        if len(parts) != 3:
            raise MalformedPayload(
                "invalid_entry",
                {"index": index, "entry": raw_entry, "expected_fields": 3, "got_fields": len(parts)},
            )
        raw_id, raw_qty, raw_unit = parts
        entries.append(
            LineEntry(
                item_id=_parse_id(raw_id, index),
                quantity=_parse_quantity(raw_qty, index),
                unit=_parse_unit(raw_unit, index),
            )
        )
    return entries


def parse_query_payload(datas: str) -> List[int]:
    if not isinstance(datas, str) or not datas.strip():
        raise MalformedPayload("empty_payload", {"datas": datas})
    return [_parse_id(raw, index) for index, raw in enumerate(datas.split(FIELD_SEPARATOR))]
