# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

MALFORMED_PAYLOAD = "malformed_payload"
UNKNOWN_ITEM = "unknown_item"


class PricingError(Exception):
    code = "pricing_error"

    def __init__(self, message: str, fields: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = dict(fields or {})

    def as_detail(self) -> Dict[str, Any]:
        return {"error": self.code, "message": self.message, "fields": self.fields}


class MalformedPayload(PricingError):
    code = MALFORMED_PAYLOAD


class UnknownItem(PricingError):
    code = UNKNOWN_ITEM

    def __init__(self, item_id: int) -> None:
        super().__init__("item_not_found", {"item_id": item_id})
        self.item_id = item_id
