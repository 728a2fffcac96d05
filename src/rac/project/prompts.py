"""Interactive prompts for the project name and template."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import click
from rich.markup import escape

from ..config import TemplateCatalogEntry
from ..config.settings import DEFAULT_PROJECT_NAME
from ..errors import ScaffoldError
from ..utils import Reporter


def validate_project_name(value: str, root: Optional[Path] = None) -> str:
    """Return the trimmed project name, or raise BadParameter so click re-asks."""
    name = value.strip()
    if not name:
        raise click.BadParameter("Please specify the project directory")
    if name.startswith("-"):
        raise click.BadParameter("The project directory cannot start with '-'")
    if ((root or Path(".")) / name).exists():
        raise click.BadParameter("The project directory already exists")
    return name


def prompt_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Ask for the directory to create, re-asking until it is valid."""
    return click.prompt(
        "Project Name",
        default=default,
        value_proc=validate_project_name,
    )


def prompt_template(
    catalog: Dict[str, TemplateCatalogEntry], reporter: Reporter
) -> str:
    """Ask which template to start from and return its repository URL."""
    if not catalog:
        raise ScaffoldError("No templates are configured")
    keys = list(catalog)
    reporter.info("Available templates:")
    for key, entry in catalog.items():
        reporter.info(f"  [bold cyan]{escape(key)}[/]  {escape(entry['name'])}")
    reporter.info()
    choice = click.prompt(
        "Target Template",
        type=click.Choice(keys),
        default=keys[0],
        show_choices=len(keys) > 1,
    )
    return catalog[choice]["url"]
