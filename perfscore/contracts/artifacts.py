from __future__ import annotations

"""Gathered inputs and run settings.

Traces and devtools logs are opaque to the engine; they are handed to the
metric provider untouched. Both are keyed by collection pass name.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import MissingArtifact
from .choices import FormFactor, ThrottlingMethod

DEFAULT_PASS = "defaultPass"


class Artifacts(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    traces: Dict[str, Any] = Field(default_factory=dict)
    devtools_logs: Dict[str, Any] = Field(default_factory=dict, alias="devtoolsLogs")
    # None means "not reported"; resolves to mobile.
    tested_as_mobile_device: Optional[bool] = Field(default=None, alias="TestedAsMobileDevice")

    def has(self, name: str) -> bool:
        """True when the named artifact was gathered.

        ``tested_as_mobile_device`` counts as gathered even when None, since
        the classification is allowed to be absent.
        """
        if name not in type(self).model_fields:
            return False
        if name == "tested_as_mobile_device":
            return True
        return bool(getattr(self, name))

    def for_pass(self, pass_name: str = DEFAULT_PASS) -> Tuple[Any, Any]:
        """Return ``(trace, devtools_log)`` gathered during ``pass_name``."""
        if pass_name not in self.traces:
            raise MissingArtifact("traces", f"No trace gathered for pass {pass_name!r}")
        if pass_name not in self.devtools_logs:
            raise MissingArtifact("devtools_logs", f"No devtools log gathered for pass {pass_name!r}")
        return self.traces[pass_name], self.devtools_logs[pass_name]


class Settings(BaseModel):
    """Run settings forwarded to metric providers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = "en-US"
    throttling_method: ThrottlingMethod = "simulate"
    form_factor: FormFactor = "mobile"
