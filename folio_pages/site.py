"""Hold the loaded pages and templates for the server and export commands.

:func:`load_site` runs both loaders for a project and packs the result into a
:class:`~folio_pages.models.SiteSnapshot`. :class:`SiteStore` keeps a
reference to the current snapshot and replaces it wholesale on reload, so a
request that already fetched a snapshot keeps rendering against a complete,
consistent set of maps.
"""

from __future__ import annotations

import collections
import threading
import typing as typ

from ._constants import MARKDOWN_SUFFIX
from .logging import get_logger
from .models import SiteSnapshot
from .pages import load_markdown_pages
from .templates import load_templates

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteSettings
    from .renderer import MarkdownRenderer

logger = get_logger("site")

Fingerprint = frozenset[tuple[str, int, int]]


def load_site(
    settings: SiteSettings, *, renderer: MarkdownRenderer | None = None
) -> SiteSnapshot:
    """Load pages and templates for ``settings.project_dir`` into a snapshot."""
    project_dir = settings.project_dir
    logger.info("Loading markdown pages from %s", project_dir)
    pages = load_markdown_pages(project_dir, settings.workspace_root, renderer=renderer)
    logger.info("Loaded %d pages", len(pages))

    logger.info("Loading templates")
    templates = load_templates(project_dir, renderer=renderer)
    logger.info("Loaded %d templates", len(templates))

    counts = collections.Counter(page.slug for page in pages)
    for slug, count in sorted(counts.items()):
        if count > 1:
            logger.warning(
                "Slug '/%s' is defined by %d pages; the last one loaded wins",
                slug,
                count,
            )
    return SiteSnapshot.build(pages, templates)


def markdown_fingerprint(root: Path) -> Fingerprint:
    """Return ``(path, mtime_ns, size)`` for every markdown file under ``root``."""
    if not root.is_dir():
        return frozenset()
    entries: set[tuple[str, int, int]] = set()
    for path in root.rglob(f"*{MARKDOWN_SUFFIX}"):
        try:
            stat = path.stat()
        except FileNotFoundError:
            continue
        if path.is_file():
            entries.add((str(path), stat.st_mtime_ns, stat.st_size))
    return frozenset(entries)


class SiteStore:
    """Own the current site snapshot and rebuild it when sources change."""

    def __init__(
        self, settings: SiteSettings, *, renderer: MarkdownRenderer | None = None
    ) -> None:
        """Load the initial snapshot for ``settings``.

        Parameters
        ----------
        settings : SiteSettings
            Workspace and project to load.
        renderer : MarkdownRenderer, optional
            Converter shared by both loaders; defaults to the site renderer.

        Raises
        ------
        FrontMatterError
            If a page or template has malformed front matter.
        """
        self.settings = settings
        self._renderer = renderer
        self._lock = threading.Lock()
        self._fingerprint = markdown_fingerprint(settings.project_dir)
        self._snapshot = load_site(settings, renderer=renderer)

    @property
    def snapshot(self) -> SiteSnapshot:
        """Return the snapshot requests should render against."""
        return self._snapshot

    def reload(self) -> SiteSnapshot:
        """Rebuild the snapshot from disk and swap it in."""
        with self._lock:
            return self._reload_locked(markdown_fingerprint(self.settings.project_dir))

    def refresh_if_changed(self) -> bool:
        """Reload when any markdown file under the project changed.

        The new fingerprint is recorded before loading, so a change that
        fails to load is not retried until the sources change again.

        Returns
        -------
        bool
            ``True`` when a reload happened.
        """
        with self._lock:
            current = markdown_fingerprint(self.settings.project_dir)
            if current == self._fingerprint:
                return False
            logger.info("Markdown change detected, reloading pages and templates")
            self._fingerprint = current
            self._reload_locked(current)
            return True

    def _reload_locked(self, fingerprint: Fingerprint) -> SiteSnapshot:
        snapshot = load_site(self.settings, renderer=self._renderer)
        self._snapshot = snapshot
        self._fingerprint = fingerprint
        return snapshot


__all__ = ["SiteStore", "load_site", "markdown_fingerprint"]
