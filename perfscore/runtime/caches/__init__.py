from .computed_cache import ComputedCache

__all__ = ["ComputedCache"]
