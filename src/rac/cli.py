"""CLI interface for rac - scaffold a React project from a template."""

from __future__ import annotations

import click

from . import __version__
from .checks import current_node_version, ensure_supported_runtime, notify_update
from .config import CATALOG
from .config.settings import PACKAGE_NAME
from .pipeline import RunContext, Stage, scaffold
from .project import prompt_project_name, prompt_template
from .utils import Reporter


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", prog_name=PACKAGE_NAME)
def cli() -> None:
    """Create a new React project from a template repository."""
    ctx = RunContext()
    ensure_supported_runtime(current_node_version())
    ctx.advance(Stage.VERSION_CHECKED)

    reporter = Reporter()
    try:
        reporter.info(f"[bold green]rac[/] v{__version__}")
        reporter.info()
        notify_update(reporter, __version__)
        ctx.advance(Stage.UPDATE_CHECKED)

        ctx.project_name = prompt_project_name()
        ctx.advance(Stage.NAME_CHOSEN)
        reporter.info()
        ctx.template_url = prompt_template(CATALOG, reporter)
        ctx.advance(Stage.TEMPLATE_CHOSEN)
        reporter.info()

        scaffold(ctx, reporter)
    except (click.Abort, click.exceptions.Exit):
        raise
    except Exception as e:
        ctx.stage = Stage.FAILED
        reporter.error(e)
        raise SystemExit(1)

    reporter.success("🎉 Job done!")
