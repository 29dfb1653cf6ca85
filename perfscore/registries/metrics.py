from __future__ import annotations

"""Metric provider registry.

Trace analysis is not part of this package: the audit host registers a
provider for each metric id it can compute. A provider is called as
``provider(data, context)`` and returns (or resolves to) a mapping with a
``timing`` entry in milliseconds.
"""

from typing import Any, Callable, List, Optional

from ..core.errors import InvalidConfiguration
from .base import Registry

MetricProvider = Callable[..., Any]

METRIC_PROVIDERS: Registry[str, MetricProvider] = Registry("metric providers")


def register_metric_provider(
    metric_id: str,
    provider: Optional[MetricProvider] = None,
    *,
    replace: bool = False,
):
    """Register ``provider`` for ``metric_id``; usable as a decorator."""
    if provider is None:
        return METRIC_PROVIDERS.register(metric_id, replace=replace)
    METRIC_PROVIDERS.add(metric_id, provider, replace=replace)
    return provider


def unregister_metric_provider(metric_id: str) -> Optional[MetricProvider]:
    return METRIC_PROVIDERS.remove(metric_id)


def get_metric_provider(metric_id: str) -> MetricProvider:
    provider = METRIC_PROVIDERS.try_get(metric_id)
    if provider is None:
        raise InvalidConfiguration(f"No metric provider registered for {metric_id!r}")
    return provider


def list_metric_providers() -> List[str]:
    return sorted(METRIC_PROVIDERS.keys())
