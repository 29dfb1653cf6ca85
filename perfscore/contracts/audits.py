from __future__ import annotations

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .choices import ArtifactName, ScoreDisplayMode


class AuditDescriptor(BaseModel):
    """Static metadata for one audit.

    ``title`` and ``description`` are message ids; they are resolved against
    the context's message bundle when a report is built.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    title: str
    description: str
    score_display_mode: ScoreDisplayMode = "numeric"
    required_artifacts: Tuple[ArtifactName, ...] = ()
    default_options: Dict[str, Any] = Field(default_factory=dict)
