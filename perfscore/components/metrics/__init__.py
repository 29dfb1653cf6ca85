"""Computed metrics requested through the evaluation context."""

from .computed import ComputedMetric, MetricInput, MetricResult, request_metric
from .first_meaningful_paint import METRIC_ID as FIRST_MEANINGFUL_PAINT, request_timing

__all__ = [
    "ComputedMetric",
    "MetricInput",
    "MetricResult",
    "request_metric",
    "FIRST_MEANINGFUL_PAINT",
    "request_timing",
]
