"""Message bundles for display strings."""

from .bundle import MessageBundle, get_bundle, register_bundle

__all__ = ["MessageBundle", "get_bundle", "register_bundle"]
