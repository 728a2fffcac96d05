"""File system utilities."""

from __future__ import annotations

import shutil
from pathlib import Path


def remove_path(path: Path) -> bool:
    """Delete a file or directory tree, like `rm -rf`.

    Returns False when there was nothing to delete.
    """
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    if path.exists() or path.is_symlink():
        path.unlink()
        return True
    return False
