from __future__ import annotations

"""Per-run evaluation context.

One context is built per assessment and shared by every audit in it. It
carries the run settings, per-audit option overrides, the message bundle used
for display strings, and the memoization cache for computed metrics.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..contracts.artifacts import Settings
from ..i18n.bundle import MessageBundle, get_bundle
from .caches.computed_cache import ComputedCache


@dataclass
class EvaluationContext:
    settings: Settings = field(default_factory=Settings)
    # audit id -> option overrides, merged over the audit's defaults
    options: Dict[str, Mapping[str, Any]] = field(default_factory=dict)
    bundle: Optional[MessageBundle] = None
    cache: ComputedCache = field(default_factory=ComputedCache)
    context_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if self.bundle is None:
            self.bundle = get_bundle(self.settings.locale)

    def options_for(self, audit_id: str) -> Optional[Mapping[str, Any]]:
        return self.options.get(audit_id)

    def cancel(self) -> int:
        """Abort the run: in-flight metric requests raise CancelledError."""
        return self.cache.cancel()

    @property
    def cancelled(self) -> bool:
        return self.cache.cancelled
