from __future__ import annotations

"""Resource bundles and message formatting.

A :class:`MessageBundle` maps stable message ids to ``str.format`` templates.
Two custom format specs cover the time values audits display:

- ``{timeInMs:seconds}``: milliseconds shown as seconds, rounded to 0.1 s;
- ``{timeInMs:milliseconds}``: rounded to 10 ms, with thousands separators.

Bundles are looked up by locale; an unknown locale falls back to its language
(``en-GB`` -> ``en``) and then to ``en-US``.
"""

import string
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.rounding import round_half_up
from ..registries.base import Registry
from .strings import EN_US

DEFAULT_LOCALE = "en-US"


class MessageFormatter(string.Formatter):
    def format_field(self, value: Any, format_spec: str) -> str:
        if format_spec == "seconds":
            return f"{round_half_up(float(value) / 1000, 1):,.1f}"
        if format_spec == "milliseconds":
            return f"{round_half_up(float(value), -1):,.0f}"
        return super().format_field(value, format_spec)


_FORMATTER = MessageFormatter()


@dataclass(frozen=True)
class MessageBundle:
    locale: str
    messages: Mapping[str, str] = field(default_factory=dict)
    fallback: Optional["MessageBundle"] = None

    def template(self, message_id: str) -> str:
        if message_id in self.messages:
            return self.messages[message_id]
        if self.fallback is not None:
            return self.fallback.template(message_id)
        raise KeyError(f"{self.locale}: unknown message id {message_id!r}")

    def format(self, message_id: str, **params: Any) -> str:
        return _FORMATTER.format(self.template(message_id), **params)

    def with_messages(self, messages: Mapping[str, str]) -> "MessageBundle":
        """Return a bundle where ``messages`` override this bundle's entries."""
        return MessageBundle(self.locale, dict(messages), fallback=self)


BUNDLES: Registry[str, MessageBundle] = Registry("message bundles")
BUNDLES.add(DEFAULT_LOCALE, MessageBundle(DEFAULT_LOCALE, EN_US))


def register_bundle(locale: str, messages: Mapping[str, str], *, replace: bool = False) -> MessageBundle:
    """Register ``messages`` for ``locale``; missing ids fall back to en-US."""
    bundle = MessageBundle(locale, dict(messages), fallback=BUNDLES.get(DEFAULT_LOCALE))
    BUNDLES.add(locale, bundle, replace=replace)
    return bundle


def get_bundle(locale: Optional[str] = None) -> MessageBundle:
    locale = locale or DEFAULT_LOCALE
    for candidate in (locale, locale.split("-")[0]):
        bundle = BUNDLES.try_get(candidate)
        if bundle is not None:
            return bundle
    return BUNDLES.get(DEFAULT_LOCALE)
