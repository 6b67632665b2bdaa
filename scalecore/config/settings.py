# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    catalog_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        catalog = (env.get("SCALECORE_CATALOG") or "").strip()
        raw_port = (env.get("SCALECORE_PORT") or "").strip()
        try:
            port = int(raw_port) if raw_port else DEFAULT_PORT
        except ValueError as exc:
            raise ValueError(f"SCALECORE_PORT must be an integer, got {raw_port!r}") from exc

        return cls(
            catalog_path=Path(catalog).expanduser() if catalog else None,
            log_level=(env.get("SCALECORE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
            host=(env.get("SCALECORE_HOST") or DEFAULT_HOST).strip(),
            port=port,
        )
