"""Utility modules for rac."""

from .console import console, err_console
from .filesystem import remove_path
from .reporter import Reporter
from .subprocess_utils import command_output, run

__all__ = [
    "console",
    "err_console",
    "remove_path",
    "Reporter",
    "command_output",
    "run",
]
