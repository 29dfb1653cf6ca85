"""Engine registries.

Audits and metric providers are looked up by stable string ids. Adding a new
audit means writing a descriptor and a run function and registering them; no
subclassing is involved.
"""

from .audits import AuditEntry, get_audit, list_audits, register_audit
from .metrics import get_metric_provider, list_metric_providers, register_metric_provider, unregister_metric_provider

__all__ = [
    "AuditEntry",
    "get_audit",
    "list_audits",
    "register_audit",
    "get_metric_provider",
    "list_metric_providers",
    "register_metric_provider",
    "unregister_metric_provider",
]
