from __future__ import annotations

from ...contracts.artifacts import Artifacts
from .computed import MetricInput, request_metric

METRIC_ID = "first-meaningful-paint"


async def request_timing(artifacts: Artifacts, context) -> float:
    """First Meaningful Paint (ms) for the default pass of ``artifacts``."""
    trace, devtools_log = artifacts.for_pass()
    data = MetricInput(trace=trace, devtools_log=devtools_log, settings=context.settings)
    result = await request_metric(METRIC_ID, data, context)
    return result.timing
