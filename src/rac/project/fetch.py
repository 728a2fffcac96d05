"""Clone a template repository into the new project directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..utils import run


def clone_template(template_url: str, project_name: str, cwd: Optional[Path] = None) -> Path:
    """Run `git clone <url> <project_name>` and return the new directory."""
    run(["git", "clone", template_url, project_name], cwd=cwd)
    return (cwd or Path.cwd()) / project_name
