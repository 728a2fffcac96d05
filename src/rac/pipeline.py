"""Sequential scaffolding pipeline.

Each stage consumes the previous stage's output through a single RunContext.
Any exception moves the run to the absorbing FAILED stage and propagates to
the caller; nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .project import clone_template, init_project, install_packages, patch_manifest
from .project.install import PackageManager
from .utils import Reporter


class Stage(str, Enum):
    """Where a run currently is."""

    START = "start"
    VERSION_CHECKED = "version-checked"
    UPDATE_CHECKED = "update-checked"
    NAME_CHOSEN = "name-chosen"
    TEMPLATE_CHOSEN = "template-chosen"
    CLONED = "cloned"
    MANIFEST_PATCHED = "manifest-patched"
    CLEANED = "cleaned"
    INSTALLED = "installed"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunContext:
    """State carried between stages of a single run."""

    project_name: str = ""
    template_url: str = ""
    project_dir: Optional[Path] = None
    package_manager: Optional[PackageManager] = None
    stage: Stage = Stage.START

    def advance(self, stage: Stage) -> None:
        if self.stage in (Stage.DONE, Stage.FAILED):
            raise RuntimeError(f"Run already finished ({self.stage.value})")
        self.stage = stage


def scaffold(ctx: RunContext, reporter: Reporter) -> RunContext:
    """Clone, patch, clean and install the project described by *ctx*."""
    try:
        with reporter.step("Initializing...", "Complete initialization!"):
            project_dir = clone_template(ctx.template_url, ctx.project_name)
            ctx.advance(Stage.CLONED)
            patch_manifest(project_dir, ctx.project_name)
            ctx.advance(Stage.MANIFEST_PATCHED)
            ctx.project_dir = init_project(ctx.project_name)
            ctx.advance(Stage.CLEANED)

        with reporter.step(
            "Installing packages. This might take a couple of minutes...",
            "Complete installation!",
        ):
            ctx.package_manager = install_packages(cwd=ctx.project_dir)
            ctx.advance(Stage.INSTALLED)
    except BaseException:
        ctx.stage = Stage.FAILED
        raise

    ctx.advance(Stage.DONE)
    return ctx
