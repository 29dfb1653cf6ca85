"""Public entry points for audit hosts.

This module is the invocation surface for the engine: build a context, run one
or several audits against gathered artifacts, list what is registered.
Errors are not caught here; they reach the host unchanged.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..contracts.artifacts import Artifacts, Settings
from ..contracts.options import load_score_options
from ..contracts.results import AuditReport
from ..core.errors import InvalidConfiguration, MissingArtifact
from ..i18n.bundle import MessageBundle
from ..registries.audits import get_audit
from ..registries.audits import list_audits as _list_audits
from ..runtime.context import EvaluationContext
from . import audits as _builtin_audits  # noqa: F401  (registers built-ins)


def build_context(
    settings: Optional[Union[Settings, Mapping[str, Any]]] = None,
    options: Optional[Mapping[str, Mapping[str, Any]]] = None,
    bundle: Optional[MessageBundle] = None,
) -> EvaluationContext:
    """Create a fresh evaluation context (new, empty metric cache)."""
    if settings is None:
        settings = Settings()
    elif not isinstance(settings, Settings):
        try:
            settings = Settings.model_validate(dict(settings))
        except ValidationError as exc:
            raise InvalidConfiguration(f"Invalid settings: {exc}") from exc
    return EvaluationContext(settings=settings, options=dict(options or {}), bundle=bundle)


async def run_audit(
    audit_id: str,
    artifacts: Union[Artifacts, Mapping[str, Any]],
    context: EvaluationContext,
) -> AuditReport:
    entry = get_audit(audit_id)
    descriptor = entry.descriptor
    if not isinstance(artifacts, Artifacts):
        try:
            artifacts = Artifacts.model_validate(dict(artifacts))
        except ValidationError as exc:
            raise InvalidConfiguration(f"{audit_id}: malformed artifacts: {exc}") from exc

    for name in descriptor.required_artifacts:
        if not artifacts.has(name):
            raise MissingArtifact(name, f"{audit_id} requires artifact {name!r}")

    options = load_score_options(descriptor.default_options).merged(context.options_for(audit_id))
    result = await entry.run(artifacts, context, options)

    bundle = context.bundle
    return AuditReport(
        id=descriptor.id,
        title=bundle.format(descriptor.title),
        description=bundle.format(descriptor.description),
        score_display_mode=descriptor.score_display_mode,
        required_artifacts=list(descriptor.required_artifacts),
        **result.model_dump(),
    )


async def run_audits(
    audit_ids: Iterable[str],
    artifacts: Union[Artifacts, Mapping[str, Any]],
    context: EvaluationContext,
) -> Dict[str, AuditReport]:
    """Run audits concurrently in one context; the first failure propagates."""
    ids = list(audit_ids)
    reports = await asyncio.gather(*(run_audit(audit_id, artifacts, context) for audit_id in ids))
    return dict(zip(ids, reports))


def list_audits() -> List[str]:
    return _list_audits()
