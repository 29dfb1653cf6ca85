"""Pydantic contracts for options, inputs, metadata and results.

Keep imports explicit in most of the codebase:
    from perfscore.contracts.options import ScoreOptions
The names re-exported here are a convenience namespace.
"""

from .artifacts import DEFAULT_PASS, Artifacts, Settings
from .audits import AuditDescriptor
from .options import ScoreOptions, ScoreParameters, load_score_options
from .results import AuditReport, AuditResult

__all__ = [
    "DEFAULT_PASS",
    "Artifacts",
    "Settings",
    "AuditDescriptor",
    "ScoreOptions",
    "ScoreParameters",
    "load_score_options",
    "AuditReport",
    "AuditResult",
]
