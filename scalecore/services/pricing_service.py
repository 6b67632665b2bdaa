# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Union

from scalecore.api.payload_contract import parse_calculate_payload, parse_query_payload
from scalecore.api.schemas.summary import CALCULATE, QUERY, ActionEnvelope
from scalecore.api.unit_contract import normalize_price, normalize_weight, precise_round, to_wire_number
from scalecore.catalog.store import Catalog, Item
from scalecore.services.errors import UnknownItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceQuote:
    item_id: int
    kg_price: Decimal

    def as_wire(self) -> Dict[str, Any]:
        return {"itemId": self.item_id, "kgPrice": to_wire_number(self.kg_price)}


Envelope = Union[ActionEnvelope, Mapping[str, Any]]
ProcessResult = Union[Decimal, List[PriceQuote], None]


def envelope_action(envelope: Envelope) -> Any:
    if isinstance(envelope, ActionEnvelope):
        return envelope.action
    if isinstance(envelope, Mapping):
        return envelope.get("action")
    return None


class PricingEngine:
    """Totals baskets and quotes per-kilogram prices against a catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def _lookup(self, item_id: int) -> Item:
        item = self._catalog.get(item_id)
        if item is None:
            raise UnknownItem(item_id)
        return item

    def calculate(self, datas: str) -> Decimal:
        """Total a basket given as "id,quantity,unit;id,quantity,unit".

        Each quantity is brought to kilograms and each item price to a
        per-kilogram price before multiplying. The sum is precise-rounded.
        """
        entries = parse_calculate_payload(datas)

        total = Decimal("0")
        for entry in entries:
            item = self._lookup(entry.item_id)
            kg_quantity = normalize_weight(entry.quantity, entry.unit)
            kg_price = normalize_price(item.unit_price, item.unit)
            total += kg_price * kg_quantity

        rounded = precise_round(total)
        logger.debug(
            "pricing:calculate",
            extra={"entries": len(entries), "raw_total": str(total), "total": str(rounded)},
        )
        return rounded

    def query(self, datas: str) -> List[PriceQuote]:
        """Quote the per-kilogram price of each id in "id,id,...", in input order."""
        ids = parse_query_payload(datas)
        quotes = []
        for item_id in ids:
            item = self._lookup(item_id)
            quotes.append(PriceQuote(item_id=item.id, kg_price=normalize_price(item.unit_price, item.unit)))
        logger.debug("pricing:query", extra={"ids": len(ids)})
        return quotes

    def process(self, envelope: Envelope) -> ProcessResult:
        action = envelope_action(envelope)
        if isinstance(action, str) and action not in (CALCULATE, QUERY):
            # datas is never looked at for actions we do not handle
            logger.debug("pricing:unknown_action", extra={"action": action})
            return None

        if not isinstance(envelope, ActionEnvelope):
            envelope = ActionEnvelope.model_validate(envelope)

        if envelope.action == CALCULATE:
            return self.calculate(envelope.datas)
        return self.query(envelope.datas)
