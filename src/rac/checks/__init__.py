"""Pre-flight checks for rac."""

from .runtime import current_node_version, ensure_supported_runtime, parse_major
from .updates import check_for_update, notify_update

__all__ = [
    "current_node_version",
    "ensure_supported_runtime",
    "parse_major",
    "check_for_update",
    "notify_update",
]
