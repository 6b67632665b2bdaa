# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from scalecore.services.errors import PricingError
from scalecore.services.pricing_service import Envelope, PricingEngine, ProcessResult, envelope_action


@dataclass(frozen=True)
class DispatchResult:
    action: str
    value: ProcessResult = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error_code is None


class Dispatcher:
    def __init__(self, engine: PricingEngine) -> None:
        self._engine = engine

    def dispatch(self, envelope: Envelope) -> ProcessResult:
        return self._engine.process(envelope)

    def try_dispatch(self, envelope: Envelope) -> DispatchResult:
        """Route like dispatch() but report pricing errors in the result."""
        try:
            value = self._engine.process(envelope)
        except PricingError as exc:
            return DispatchResult(
                action=envelope_action(envelope),
                error_code=exc.code,
                error_message=exc.message,
                fields=exc.fields,
            )
        return DispatchResult(action=envelope_action(envelope), value=value)
