"""Node runtime version gate."""

from __future__ import annotations

from typing import Optional

from ..config.settings import MIN_NODE_MAJOR
from ..errors import CommandError
from ..utils import command_output, err_console


def parse_major(version: str) -> int:
    """Return the leading numeric component of a version string.

    `v18.17.1` -> 18, `9.11.2` -> 9. Raises ValueError if it is not a number.
    """
    head = version.strip().lstrip("vV").split(".", 1)[0]
    return int(head)


def is_supported(version: str, minimum: int = MIN_NODE_MAJOR) -> bool:
    try:
        return parse_major(version) >= minimum
    except ValueError:
        return False


def current_node_version() -> Optional[str]:
    """Return the host's `node --version`, or None if Node is not installed."""
    try:
        return command_output(["node", "--version"]).lstrip("vV")
    except CommandError:
        return None


def ensure_supported_runtime(
    version: Optional[str], minimum: int = MIN_NODE_MAJOR
) -> None:
    """Exit with code 1 unless *version* is at least Node *minimum*."""
    if version is not None and is_supported(version, minimum):
        return
    running = (
        f"You are running Node {version}."
        if version is not None
        else "Node was not found on your PATH."
    )
    err_console.print(
        f"{running}\n"
        f"This tool requires Node {minimum} or higher.\n"
        "Please update your version of Node.",
        markup=False,
    )
    raise SystemExit(1)
