"""Template catalog configuration.

The catalog is an ordered mapping of template identifier to display name and
repository URL, bundled with the package as `templates.yml`. Adding a template
only requires a new entry in that file. The loaded catalog is memoized so
callers can treat it like a constant.
"""

from __future__ import annotations

import re
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, TypedDict, cast

import yaml


class TemplateCatalogEntry(TypedDict):
    """A template that can be offered to the user."""

    name: str  # Default: React + React Router + Vite + ...
    url: str  # https://github.com/wyx2333333/react-awesome-template


_CLONABLE_URL = re.compile(
    r"^(?:(?:https?|ssh|git|file)://\S+|[\w.-]+@[\w.-]+:\S+)$"
)


def is_clonable_url(url: str) -> bool:
    """Return True if git could plausibly clone from this URL."""
    return bool(_CLONABLE_URL.match(url))


def _parse_catalog_dict(data: dict[str, object]) -> Dict[str, TemplateCatalogEntry]:
    templates_section = data.get("templates", {})
    if not isinstance(templates_section, dict):
        raise ValueError("'templates' must be a mapping of identifier to template")
    out: Dict[str, TemplateCatalogEntry] = {}
    for key, value in templates_section.items():
        if not isinstance(value, dict):
            raise ValueError(f"Template {key!r} must be a mapping with 'name' and 'url'")
        value = cast(Dict[str, Any], value)
        name = value.get("name")
        url = value.get("url")
        if not isinstance(name, str) or not isinstance(url, str):
            raise ValueError(f"Template {key!r} needs a string 'name' and 'url'")
        if not is_clonable_url(url):
            raise ValueError(f"Template {key!r} has an unclonable url: {url}")
        out[str(key)] = TemplateCatalogEntry(name=name, url=url)
    return out


def load_catalog(path: Path) -> Dict[str, TemplateCatalogEntry]:
    """Load a template catalog from a YAML file path."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Template catalog {path} must be a mapping")
    return _parse_catalog_dict(data)


def load_bundled_catalog() -> Dict[str, TemplateCatalogEntry]:
    """Load the catalog shipped in the package resources."""
    content = files("rac.config").joinpath("templates.yml").read_text(encoding="utf-8")
    data = yaml.safe_load(content) or {}
    assert isinstance(data, dict)
    return _parse_catalog_dict(data)


@lru_cache(maxsize=1)
def get_catalog() -> Dict[str, TemplateCatalogEntry]:
    """Return the bundled template catalog (memoized)."""
    return load_bundled_catalog()


CATALOG = get_catalog()
