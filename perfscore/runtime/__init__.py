from .caches import ComputedCache
from .context import EvaluationContext

__all__ = ["ComputedCache", "EvaluationContext"]
