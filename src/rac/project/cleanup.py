"""Prepare a freshly cloned template for use as a new project."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from ..config.settings import ENV_FILE
from ..utils import remove_path

logger = logging.getLogger(__name__)

# Template artifacts that should not carry over into the new project
CLEANUP_TARGETS: List[str] = [
    ".git",
    "pnpm-lock.yaml",
    "yarn.lock",
    "package-lock.json",
    "LICENSE",
    "README.md",
]


def enter_project(project_name: str) -> Path:
    """Change the working directory into the project and return its absolute path."""
    project_dir = (Path.cwd() / project_name).resolve()
    os.chdir(project_dir)
    return project_dir


def env_file_content(project_name: str) -> str:
    return f"VITE_APP_TITLE = '{project_name}'"


def write_env_file(project_dir: Path, project_name: str) -> Path:
    env_path = project_dir / ENV_FILE
    with open(env_path, "w", encoding="utf-8") as f:
        f.write(env_file_content(project_name))
    return env_path


def clean_project(project_dir: Path) -> List[str]:
    """Delete template artifacts; targets that are already gone are skipped.

    Returns the names that were actually removed.
    """
    removed: List[str] = []
    for name in CLEANUP_TARGETS:
        if remove_path(project_dir / name):
            removed.append(name)
    logger.debug("Removed from %s: %s", project_dir, ", ".join(removed) or "nothing")
    return removed


def init_project(project_name: str) -> Path:
    """Enter the project, write `.env`, and strip template artifacts."""
    project_dir = enter_project(project_name)
    write_env_file(project_dir, project_name)
    clean_project(project_dir)
    return project_dir
