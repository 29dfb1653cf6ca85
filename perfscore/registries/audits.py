from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, List, NamedTuple

from ..contracts.audits import AuditDescriptor
from ..core.errors import UnknownAudit
from .base import Registry

if TYPE_CHECKING:
    from ..contracts.artifacts import Artifacts
    from ..contracts.options import ScoreOptions
    from ..contracts.results import AuditResult
    from ..runtime.context import EvaluationContext

RunFn = Callable[["Artifacts", "EvaluationContext", "ScoreOptions"], Awaitable["AuditResult"]]


class AuditEntry(NamedTuple):
    descriptor: AuditDescriptor
    run: RunFn


AUDITS: Registry[str, AuditEntry] = Registry("audits")


def register_audit(descriptor: AuditDescriptor, *, replace: bool = False) -> Callable[[RunFn], RunFn]:
    """Decorator pairing ``descriptor`` with the decorated run function."""

    def deco(run: RunFn) -> RunFn:
        AUDITS.add(descriptor.id, AuditEntry(descriptor, run), replace=replace)
        return run

    return deco


def get_audit(audit_id: str) -> AuditEntry:
    entry = AUDITS.try_get(audit_id)
    if entry is None:
        raise UnknownAudit(f"Unknown audit {audit_id!r}. Registered: {sorted(AUDITS.keys())}")
    return entry


def list_audits() -> List[str]:
    return sorted(AUDITS.keys())
