# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from scalecore.api.routes.catalog import router as catalog_router
from scalecore.api.routes.summary import router as summary_router
from scalecore.catalog.seed import build_catalog
from scalecore.catalog.store import Catalog
from scalecore.config.settings import Settings
from scalecore.services.dispatcher import Dispatcher
from scalecore.services.pricing_service import PricingEngine

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": {"error": "validation_error", "fields": fields}},
    )


def build_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if catalog is None:
        catalog = build_catalog(settings.catalog_path)
    elif not catalog.sealed:
        catalog.seal()

    app = FastAPI(title="scalecore")
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.dispatcher = Dispatcher(PricingEngine(catalog))

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(summary_router)
    app.include_router(catalog_router)

    logger.info("app:ready", extra={"items": len(catalog)})
    return app
