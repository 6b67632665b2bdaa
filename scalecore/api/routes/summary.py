# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from scalecore.api.schemas.summary import ActionEnvelope, SummaryResponse
from scalecore.api.unit_contract import to_wire_number
from scalecore.services.dispatcher import Dispatcher
from scalecore.services.errors import UNKNOWN_ITEM

router = APIRouter(tags=["summary"])
logger = logging.getLogger(__name__)


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


def wire_result(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [quote.as_wire() for quote in value]
    return to_wire_number(value)


@router.post("/summary", response_model=SummaryResponse)
def summary(envelope: ActionEnvelope, dispatcher: Dispatcher = Depends(get_dispatcher)):
    outcome = dispatcher.try_dispatch(envelope)
    if not outcome.ok:
        status_code = 404 if outcome.error_code == UNKNOWN_ITEM else 400
        logger.info("summary:rejected", extra={"action": envelope.action, "error": outcome.error_code})
        raise HTTPException(
            status_code=status_code,
            detail={
                "error": outcome.error_code,
                "message": outcome.error_message,
                "fields": dict(outcome.fields),
            },
        )
    return {"action": outcome.action, "result": wire_result(outcome.value)}
