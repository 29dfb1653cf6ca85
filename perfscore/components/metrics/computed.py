from __future__ import annotations

"""Computed metrics.

A :class:`ComputedMetric` turns a provider callable into a memoized request:
the first request for a given input in a context runs the provider, every
other request for the same input (from any audit) awaits that same run.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Hashable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...contracts.artifacts import Settings
from ...core.errors import PerfScoreError, UpstreamComputationFailure
from ...registries.metrics import MetricProvider, get_metric_provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class MetricInput:
    trace: Any
    devtools_log: Any
    settings: Settings

    def cache_key(self) -> Hashable:
        # Traces are large and unhashable; identity is enough within one context.
        return (id(self.trace), id(self.devtools_log), self.settings)


class MetricResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    timing: float = Field(..., ge=0.0, allow_inf_nan=False)


class ComputedMetric:
    def __init__(self, metric_id: str, provider: MetricProvider) -> None:
        self.metric_id = metric_id
        self.provider = provider

    async def request(self, data: MetricInput, context) -> MetricResult:
        key = (self.metric_id, data.cache_key())
        return await context.cache.get_or_compute(
            key,
            lambda: self._compute(data, context),
            keep_alive=data,
        )

    async def _compute(self, data: MetricInput, context) -> MetricResult:
        logger.debug("computing metric %s (context %s)", self.metric_id, context.context_id)
        try:
            raw = self.provider(data, context)
            if inspect.isawaitable(raw):
                raw = await raw
        except PerfScoreError:
            raise
        except Exception as exc:
            raise UpstreamComputationFailure(
                f"{self.metric_id} computation failed: {exc}", metric_id=self.metric_id
            ) from exc
        return self._coerce(raw)

    def _coerce(self, raw: Any) -> MetricResult:
        if isinstance(raw, MetricResult):
            return raw
        if not isinstance(raw, Mapping):
            raise UpstreamComputationFailure(
                f"{self.metric_id} provider returned {type(raw).__name__}, expected a mapping with 'timing'",
                metric_id=self.metric_id,
            )
        try:
            return MetricResult.model_validate(dict(raw))
        except ValidationError as exc:
            raise UpstreamComputationFailure(
                f"{self.metric_id} provider returned an invalid result: {exc}", metric_id=self.metric_id
            ) from exc


async def request_metric(metric_id: str, data: MetricInput, context) -> MetricResult:
    """Request ``metric_id`` for ``data`` through the context's cache."""
    return await ComputedMetric(metric_id, get_metric_provider(metric_id)).request(data, context)
