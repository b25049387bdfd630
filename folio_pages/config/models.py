"""Typed dataclasses describing folio site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_PROJECT, PROJECTS_DIRNAME, PUBLIC_DIRNAME


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteSettings:
    """Resolved settings for loading and serving one project.

    Attributes
    ----------
    workspace_root : Path
        Directory holding ``projects/`` and ``public/``; ``/``-prefixed
        include directives resolve from here.
    project : str
        Name of the folder under ``projects/`` whose pages are loaded.
    watch : bool
        Reload pages and templates when a markdown file changes.
    host : str
        Interface the HTTP server binds to.
    port : int
        Port the HTTP server listens on.
    """

    workspace_root: Path = dc.field(default_factory=Path.cwd)
    project: str = DEFAULT_PROJECT
    watch: bool = False
    host: str = "127.0.0.1"
    port: int = 3000

    @property
    def projects_dir(self) -> Path:
        """Return the folder containing every project."""
        return self.workspace_root / PROJECTS_DIRNAME

    @property
    def project_dir(self) -> Path:
        """Return the folder of the selected project."""
        return self.projects_dir / self.project

    @property
    def public_dir(self) -> Path:
        """Return the folder of static assets served at the site root."""
        return self.workspace_root / PUBLIC_DIRNAME


__all__ = ["SiteConfigError", "SiteSettings"]
