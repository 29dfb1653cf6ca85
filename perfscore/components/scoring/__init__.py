"""Timing → score curves."""

from .log_normal import PODR_SCORE, compute_log_normal_score, log_normal_curve

__all__ = ["PODR_SCORE", "compute_log_normal_score", "log_normal_curve"]
