from __future__ import annotations

"""Pick the calibration for the environment a page was tested in."""

import logging
from typing import Any, Mapping, Optional, Union

from ..contracts.options import ScoreOptions, ScoreParameters, load_score_options
from ..core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

Classification = Optional[Union[bool, str]]


def resolve_options(
    is_mobile: Classification,
    configured: Union[ScoreOptions, Mapping[str, Any]],
) -> ScoreParameters:
    """Return ``configured.desktop`` only for an explicit non-mobile classification.

    ``False`` and ``"desktop"`` select desktop. Anything else, including an
    absent classification, falls back to mobile.
    """
    options = load_score_options(configured)
    form_factor = "desktop" if is_mobile is False or is_mobile == "desktop" else "mobile"
    params = getattr(options, form_factor)
    _check_params(params, form_factor)
    logger.debug("resolved %s score options: %s", form_factor, params)
    return params


def _check_params(params: ScoreParameters, form_factor: str) -> None:
    # Instances built with model_construct skip validation.
    low = params.low_threshold
    median = params.median_threshold
    if low <= 0 or median <= 0 or low >= median:
        raise InvalidConfiguration(
            f"{form_factor} score options need 0 < low_threshold < median_threshold, "
            f"got low={low} median={median}"
        )
