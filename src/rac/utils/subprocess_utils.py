"""Subprocess utilities for running commands."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from ..errors import CommandError

logger = logging.getLogger(__name__)


def run(command: List[str], cwd: Optional[Path] = None) -> None:
    """Run a command and stream output to stdout."""
    logger.debug("Running: %s (cwd=%s)", " ".join(command), cwd or ".")
    try:
        process = subprocess.Popen(
            command,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except FileNotFoundError as e:
        raise CommandError(
            command, None, f"{command[0]}: command not found"
        ) from e
    assert process.stdout is not None
    for line in process.stdout:
        sys.stdout.write(line)
    code = process.wait()
    if code:
        raise CommandError(command, code)


def command_output(command: List[str]) -> str:
    """Run a command and return its stripped stdout."""
    try:
        return subprocess.check_output(command, text=True).strip()
    except FileNotFoundError as e:
        raise CommandError(
            command, None, f"{command[0]}: command not found"
        ) from e
    except subprocess.CalledProcessError as e:
        raise CommandError(command, e.returncode) from e
