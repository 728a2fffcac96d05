"""Errors raised while scaffolding a project."""

from __future__ import annotations

from typing import List, Optional


class ScaffoldError(Exception):
    """Raise when a scaffolding stage fails and the run cannot continue"""


class CommandError(ScaffoldError):
    """Raise when an external command exits non-zero or cannot be started"""

    def __init__(
        self, command: List[str], returncode: Optional[int], message: str = ""
    ) -> None:
        self.command = command
        self.returncode = returncode
        if not message:
            message = (
                f"Command failed with exit code {returncode}: {' '.join(command)}"
            )
        super().__init__(message)


class ManifestError(ScaffoldError):
    """Raise when the project's package.json is missing or malformed"""
