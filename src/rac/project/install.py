"""Install the new project's dependencies with the host's package manager."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..utils import run

Which = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class PackageManager:
    name: str
    install_args: Tuple[str, ...] = ()

    @property
    def install_command(self) -> List[str]:
        return [self.name, *self.install_args]


# Preference order; the last entry is used when nothing is found on PATH
PACKAGE_MANAGERS: Tuple[PackageManager, ...] = (
    PackageManager("pnpm", ("i",)),
    PackageManager("yarn"),
    PackageManager("npm", ("i",)),
)


def detect_package_manager(which: Optional[Which] = None) -> PackageManager:
    """Return the first package manager available on PATH."""
    which = which or shutil.which
    for manager in PACKAGE_MANAGERS[:-1]:
        if which(manager.name):
            return manager
    return PACKAGE_MANAGERS[-1]


def install_packages(
    cwd: Optional[Path] = None, which: Optional[Which] = None
) -> PackageManager:
    """Run the detected package manager's install command, streaming its output."""
    manager = detect_package_manager(which)
    run(manager.install_command, cwd=cwd)
    return manager
