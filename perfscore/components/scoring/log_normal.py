from __future__ import annotations

"""Log-normal scoring curve.

The curve is the complementary CDF of a log-normal distribution fitted to two
calibration points:

- ``median_threshold`` scores exactly 0.5 (sets the location, ``mu``);
- ``low_threshold`` (point of diminishing returns) scores ``PODR_SCORE``
  (sets the shape, ``sigma``, through the standard-normal quantile).

Notes
-----
Scores are clamped to [0, 1] and rounded to two decimals so that reports are
stable across platforms' last-ulp differences.
"""

import math
from typing import Tuple

import numpy as np
from scipy.stats import norm

from ...core.errors import InvalidConfiguration
from ...core.rounding import round_half_up

# Score assigned to a timing equal to the low threshold.
PODR_SCORE = 0.9


def log_normal_curve(
    low_threshold: float,
    median_threshold: float,
    *,
    podr_score: float = PODR_SCORE,
) -> Tuple[float, float]:
    """Return ``(mu, sigma)`` of the log-normal fitted to the two thresholds."""
    _check_thresholds(low_threshold, median_threshold)
    if not 0.5 < podr_score < 1.0:
        raise InvalidConfiguration(f"podr_score must be in (0.5, 1), got {podr_score}")

    mu = float(np.log(median_threshold))
    z = float(norm.ppf(podr_score))
    sigma = (mu - float(np.log(low_threshold))) / z
    return mu, sigma


def compute_log_normal_score(
    timing: float,
    low_threshold: float,
    median_threshold: float,
    *,
    podr_score: float = PODR_SCORE,
) -> float:
    """Map a timing (ms) to a score in [0, 1]; larger timings never score higher."""
    timing = float(timing)
    if math.isnan(timing):
        raise ValueError("timing must be a number, got NaN")

    mu, sigma = log_normal_curve(low_threshold, median_threshold, podr_score=podr_score)
    if timing <= 0:
        return 1.0

    score = float(norm.sf((float(np.log(timing)) - mu) / sigma))
    score = min(1.0, max(0.0, score))
    return _clamp_to_2_decimals(score)


def _check_thresholds(low_threshold: float, median_threshold: float) -> None:
    if not (math.isfinite(low_threshold) and math.isfinite(median_threshold)):
        raise InvalidConfiguration("Score thresholds must be finite")
    if low_threshold <= 0 or median_threshold <= 0:
        raise InvalidConfiguration(
            f"Score thresholds must be positive, got low={low_threshold} median={median_threshold}"
        )
    if low_threshold >= median_threshold:
        raise InvalidConfiguration(
            f"low_threshold ({low_threshold}) must be < median_threshold ({median_threshold})"
        )


def _clamp_to_2_decimals(value: float) -> float:
    return round_half_up(value, 2)
