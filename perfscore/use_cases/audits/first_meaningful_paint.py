from __future__ import annotations

"""First Meaningful Paint audit.

Scores when the primary content of a page became visible. Default calibration:

- mobile: HTTP Archive 75th/95th percentiles -> median 4000 ms, PODR 2000 ms;
- desktop: render-start quantiles -> median 1600 ms, PODR 800 ms.
"""

import logging

from ...components.metrics.first_meaningful_paint import METRIC_ID, request_timing
from ...components.options import resolve_options
from ...components.scoring import compute_log_normal_score
from ...contracts.artifacts import Artifacts
from ...contracts.audits import AuditDescriptor
from ...contracts.options import ScoreOptions
from ...contracts.results import AuditResult
from ...registries.audits import register_audit

logger = logging.getLogger(__name__)

DESCRIPTOR = AuditDescriptor(
    id=METRIC_ID,
    title="metrics.first_meaningful_paint.title",
    description="metrics.first_meaningful_paint.description",
    score_display_mode="numeric",
    # tested_as_mobile_device is declared so hosts gather it, but its absence
    # is not an error: an unreported classification scores as mobile.
    required_artifacts=("traces", "devtools_logs", "tested_as_mobile_device"),
    default_options=ScoreOptions().model_dump(),
)


@register_audit(DESCRIPTOR)
async def run(artifacts: Artifacts, context, options: ScoreOptions) -> AuditResult:
    timing = await request_timing(artifacts, context)
    params = resolve_options(artifacts.tested_as_mobile_device, options)
    score = compute_log_normal_score(timing, params.low_threshold, params.median_threshold)

    logger.info("%s: timing=%.1fms score=%.2f", DESCRIPTOR.id, timing, score)
    return AuditResult(
        score=score,
        numeric_value=timing,
        numeric_unit="millisecond",
        display_value=context.bundle.format("common.seconds", timeInMs=timing),
    )
