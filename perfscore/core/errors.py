"""Engine exception types.

These keep the scoring engine host-agnostic: an audit host can map them to its
own reporting (error rows, HTTP responses, exit codes). None of them is ever
converted into a numeric score inside the engine.
"""

from __future__ import annotations

from typing import Optional


class PerfScoreError(Exception):
    """Base class for all engine errors."""


class UpstreamComputationFailure(PerfScoreError):
    """Raised when a metric provider could not produce a timing."""

    def __init__(self, message: str, *, metric_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.metric_id = metric_id


class InvalidConfiguration(PerfScoreError):
    """Raised for bad score options or an unregistered metric provider."""


class MissingArtifact(PerfScoreError):
    """Raised when a required artifact (or collection pass) is absent."""

    def __init__(self, artifact: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Required artifact {artifact!r} is missing")
        self.artifact = artifact


class UnknownAudit(PerfScoreError, KeyError):
    """Raised when an audit id is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown audit"
