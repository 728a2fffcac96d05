"""Configuration for rac."""

from .catalog import (
    CATALOG,
    TemplateCatalogEntry,
    get_catalog,
    is_clonable_url,
    load_bundled_catalog,
    load_catalog,
)
from . import settings

__all__ = [
    "CATALOG",
    "TemplateCatalogEntry",
    "get_catalog",
    "is_clonable_url",
    "load_bundled_catalog",
    "load_catalog",
    "settings",
]
