# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_scalecore_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("SCALECORE_CATALOG", "SCALECORE_LOG_LEVEL", "SCALECORE_HOST", "SCALECORE_PORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def catalog():
    from scalecore.catalog.seed import build_catalog

    return build_catalog()


@pytest.fixture()
def engine(catalog):
    from scalecore.services.pricing_service import PricingEngine

    return PricingEngine(catalog)


@pytest.fixture()
def dispatcher(engine):
    from scalecore.services.dispatcher import Dispatcher

    return Dispatcher(engine)


@pytest.fixture()
def client(catalog):
    from fastapi.testclient import TestClient

    from scalecore.api.http import build_app
    from scalecore.config.settings import Settings

    app = build_app(Settings(), catalog=catalog)
    with TestClient(app) as test_client:
        yield test_client
