"""Load and validate settings for loading and serving a folio project.

This subpackage reads an optional YAML settings file, applies command-line and
environment overrides, and produces a :class:`SiteSettings` dataclass that the
loaders, server, and CLI consume. The primary entry point is
:func:`load_settings`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_settings
>>> settings = load_settings(Path("folio.yaml"))  # doctest: +SKIP
>>> settings.project_dir  # doctest: +SKIP
PosixPath('/srv/site/projects/main')
"""

from .loader import load_settings
from .models import SiteConfigError, SiteSettings

__all__ = ["SiteConfigError", "SiteSettings", "load_settings"]
