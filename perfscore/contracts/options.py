from __future__ import annotations

"""Score calibration options.

Each audit ships default options; the host may override any subset through the
evaluation context. Overrides are merged recursively over the defaults and the
result is re-validated, so a bad override fails at configuration time instead
of producing a degenerate curve.

Option keys accept both the snake_case field names and the camelCase names
used by existing audit configs (``scorePODR`` / ``scoreMedian``).
"""

import copy
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.errors import InvalidConfiguration


class ScoreParameters(BaseModel):
    """Two calibration points of the log-normal curve (milliseconds)."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    # Point of diminishing returns: scores near the top of the curve.
    low_threshold: float = Field(..., gt=0, alias="scorePODR")
    # Scores exactly 0.5.
    median_threshold: float = Field(..., gt=0, alias="scoreMedian")

    @model_validator(mode="after")
    def _low_below_median(self) -> "ScoreParameters":
        if not self.low_threshold < self.median_threshold:
            raise ValueError(
                f"low_threshold ({self.low_threshold}) must be < median_threshold ({self.median_threshold})"
            )
        return self


class ScoreOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    mobile: ScoreParameters = Field(
        default_factory=lambda: ScoreParameters(low_threshold=2000, median_threshold=4000)
    )
    desktop: ScoreParameters = Field(
        default_factory=lambda: ScoreParameters(low_threshold=800, median_threshold=1600)
    )

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "ScoreOptions":
        """Return a new ScoreOptions with ``overrides`` merged over this one."""
        if not overrides:
            return self
        base = self.model_dump()
        merged = _merge_dicts(base, _normalize_override(overrides))
        return load_score_options(merged)


def load_score_options(raw: Any) -> ScoreOptions:
    """Validate ``raw`` (mapping or ScoreOptions) into ScoreOptions.

    Raises :class:`InvalidConfiguration` instead of pydantic's ValidationError.
    """
    if isinstance(raw, ScoreOptions):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidConfiguration(f"Score options must be a mapping, got {type(raw).__name__}")
    try:
        return ScoreOptions.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidConfiguration(f"Invalid score options: {exc}") from exc


_ALIASES = {
    field.alias: name
    for name, field in ScoreParameters.model_fields.items()
    if field.alias
}


def _normalize_override(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for form_factor, params in overrides.items():
        if isinstance(params, ScoreParameters):
            out[form_factor] = params.model_dump()
        elif isinstance(params, Mapping):
            out[form_factor] = {_ALIASES.get(k, k): v for k, v in params.items()}
        else:
            out[form_factor] = params
    return out


def _merge_dicts(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result
