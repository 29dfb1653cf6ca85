"""perfscore: calibrated scoring for web-performance timing metrics.

Public entry points live in :mod:`perfscore.use_cases.facade`.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
