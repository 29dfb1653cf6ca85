from __future__ import annotations

"""Result contracts produced by audits and the facade."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .choices import NumericUnit, ScoreDisplayMode


class ResultModel(BaseModel):
    """Base class for result contracts (strict, immutable)."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class AuditResult(ResultModel):
    score: float = Field(..., ge=0.0, le=1.0)
    numeric_value: float = Field(..., ge=0.0)
    numeric_unit: NumericUnit = "millisecond"
    display_value: str


class AuditReport(ResultModel):
    """An AuditResult joined with the audit's localized metadata."""

    id: str
    title: str
    description: str
    score_display_mode: ScoreDisplayMode
    score: float
    numeric_value: float
    numeric_unit: NumericUnit
    display_value: str
    required_artifacts: List[str] = Field(default_factory=list)
