"""rac - scaffold React projects from template repositories."""

__version__ = "1.0.0"
