"""Load markdown pages from a project's ``pages/`` tree into page records.

Every ``*.md`` file below ``<project>/pages`` (at any depth) becomes one
:class:`~folio_pages.models.PageRecord`. Front matter is split from the body,
include directives are expanded, and the result is converted to HTML.

Note that HTML blocks inside markdown must be flush-left; indented HTML is
treated as a code block by the markdown parser.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.pages import load_markdown_pages
>>> pages = load_markdown_pages(Path("projects/main"), Path("."))  # doctest: +SKIP
>>> [page.slug for page in pages]  # doctest: +SKIP
['', 'about', 'work/photography']
"""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePath

from ._constants import (
    DEFAULT_NAV_COLOR,
    DEFAULT_TEMPLATE,
    MARKDOWN_SUFFIX,
    PAGE_MAIN_CLASS,
    PAGES_DIRNAME,
)
from .front_matter import split_front_matter
from .includes import resolve_includes
from .logging import get_logger
from .models import PageRecord
from .renderer import MarkdownRenderer, render_markdown

logger = get_logger("pages")

# Keys consumed by PageRecord attributes; everything else is passed through.
RESERVED_KEYS = frozenset(
    {"slug", "template", "title", "navColor", "mainClass", "background", "html"}
)


def find_markdown_files(pages_dir: Path) -> list[Path]:
    """Return every markdown file below ``pages_dir`` in sorted traversal order.

    Symlinked directories are not descended into.
    """
    if not pages_dir.is_dir():
        return []
    results: list[Path] = []
    for entry in sorted(pages_dir.iterdir(), key=lambda path: path.name):
        if entry.is_dir() and not entry.is_symlink():
            results.extend(find_markdown_files(entry))
        elif entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
            results.append(entry)
    return results


def default_slug(relative_path: PurePath) -> str:
    """Derive a slug from a path relative to the pages root.

    >>> from pathlib import PurePosixPath, PureWindowsPath
    >>> default_slug(PurePosixPath("subroute/subpage.md"))
    'subroute/subpage'
    >>> default_slug(PureWindowsPath("subroute\\\\subpage.md"))
    'subroute/subpage'
    """
    text = relative_path.as_posix()
    if text.endswith(MARKDOWN_SUFFIX):
        text = text[: -len(MARKDOWN_SUFFIX)]
    return text


def _resolve_slug(metadata: typ.Mapping[str, typ.Any], fallback: str) -> str:
    if "slug" not in metadata:
        return fallback
    value = metadata["slug"]
    return "" if value is None else str(value)


def _optional_text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def build_page_record(
    file_path: Path,
    pages_dir: Path,
    workspace_root: Path,
    *,
    renderer: MarkdownRenderer | None = None,
) -> PageRecord:
    """Build a page record for one markdown file.

    Parameters
    ----------
    file_path : Path
        Markdown file to load.
    pages_dir : Path
        Root of the pages tree; the default slug is relative to it.
    workspace_root : Path
        Root used by ``/``-prefixed include directives.
    renderer : MarkdownRenderer, optional
        Converter for the resolved body; defaults to the site renderer.

    Returns
    -------
    PageRecord
        Record with front-matter overrides and defaults applied.

    Raises
    ------
    FrontMatterError
        If the page's own front matter is malformed.
    """
    raw = file_path.read_text(encoding="utf-8")
    document = split_front_matter(raw, source=file_path)
    metadata = document.metadata

    body = resolve_includes(document.body, file_path, workspace_root)
    html = renderer.markdown(body) if renderer else render_markdown(body)

    relative = file_path.relative_to(pages_dir)
    slug = _resolve_slug(metadata, default_slug(relative))
    return PageRecord(
        slug=slug,
        title=_optional_text(metadata.get("title")) or file_path.stem,
        html=html,
        template=_optional_text(metadata.get("template")) or DEFAULT_TEMPLATE,
        nav_color=_optional_text(metadata.get("navColor")) or DEFAULT_NAV_COLOR,
        main_class=PAGE_MAIN_CLASS,
        background=_optional_text(metadata.get("background")),
        source=file_path,
        extra={
            key: value for key, value in metadata.items() if key not in RESERVED_KEYS
        },
    )


def load_markdown_pages(
    project_dir: Path,
    workspace_root: Path,
    *,
    renderer: MarkdownRenderer | None = None,
) -> list[PageRecord]:
    """Load every markdown page of a project.

    Parameters
    ----------
    project_dir : Path
        Project directory holding a ``pages/`` folder.
    workspace_root : Path
        Root used by ``/``-prefixed include directives.
    renderer : MarkdownRenderer, optional
        Converter for page bodies; defaults to the site renderer.

    Returns
    -------
    list[PageRecord]
        One record per markdown file in traversal order. An absent ``pages/``
        folder yields an empty list.
    """
    pages_dir = project_dir / PAGES_DIRNAME
    if not pages_dir.is_dir():
        logger.info("No pages directory at %s", pages_dir)
        return []

    pages = [
        build_page_record(path, pages_dir, workspace_root, renderer=renderer)
        for path in find_markdown_files(pages_dir)
    ]
    for page in pages:
        logger.debug("  - /%s (%s)", page.slug, page.template)
    return pages


__all__ = [
    "RESERVED_KEYS",
    "build_page_record",
    "default_slug",
    "find_markdown_files",
    "load_markdown_pages",
]
