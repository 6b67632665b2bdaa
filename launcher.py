# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import argparse
import copy
import json
import sys
from typing import List, Optional

import uvicorn

from scalecore.api.http import build_app
from scalecore.api.routes.summary import wire_result
from scalecore.catalog.seed import build_catalog
from scalecore.config.settings import Settings
from scalecore.logging import configure_logging, log
from scalecore.services.dispatcher import Dispatcher
from scalecore.services.pricing_service import PricingEngine


def _uvicorn_log_config_no_tty() -> dict:
    """Disable uvicorn color auto-detection so output stays clean when piped."""
    config = copy.deepcopy(uvicorn.config.LOGGING_CONFIG)
    for formatter_name in ("default", "access"):
        formatter = config.get("formatters", {}).get(formatter_name)
        if formatter is not None:
            formatter["use_colors"] = False
    return config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scalecore", description="Basket pricing with kg/g normalization")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind host (default: SCALECORE_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port to run on (default: SCALECORE_PORT)")

    run = sub.add_parser("run", help="Dispatch one action and print the result as JSON")
    run.add_argument("action", help="calculate | query")
    run.add_argument("datas", help='e.g. "1,1,kg;2,400,g" or "1,2,3"')
    return parser


def _serve(settings: Settings, host: Optional[str], port: Optional[int]) -> int:
    app = build_app(settings)
    uvicorn.run(
        app,
        host=host or settings.host,
        port=port or settings.port,
        log_config=_uvicorn_log_config_no_tty(),
    )
    return 0


def _run_once(settings: Settings, action: str, datas: str) -> int:
    dispatcher = Dispatcher(PricingEngine(build_catalog(settings.catalog_path)))
    outcome = dispatcher.try_dispatch({"action": action, "datas": datas})
    if not outcome.ok:
        log.warning("run:rejected %s", outcome.error_code)
        error = {"error": outcome.error_code, "message": outcome.error_message, "fields": dict(outcome.fields)}
        print(json.dumps(error), file=sys.stderr)
        return 2
    print(json.dumps({"action": outcome.action, "result": wire_result(outcome.value)}))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if args.command == "serve":
        return _serve(settings, args.host, args.port)
    return _run_once(settings, args.action, args.datas)


if __name__ == "__main__":
    sys.exit(main())
