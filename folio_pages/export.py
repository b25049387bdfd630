"""Write every page of a site snapshot to disk as static HTML."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .logging import get_logger
from .render import render_page

if typ.TYPE_CHECKING:
    from .models import SiteSnapshot

logger = get_logger("export")


def page_output_path(output_dir: Path, slug: str) -> Path:
    """Return where the page served under ``slug`` is written.

    >>> page_output_path(Path("dist"), "").as_posix()
    'dist/index.html'
    >>> page_output_path(Path("dist"), "work/photos").as_posix()
    'dist/work/photos/index.html'
    """
    cleaned = slug.strip("/")
    if not cleaned:
        return output_dir / "index.html"
    return output_dir.joinpath(*cleaned.split("/"), "index.html")


def export_site(snapshot: SiteSnapshot, output_dir: Path) -> list[Path]:
    """Render each page in ``snapshot`` into ``output_dir``.

    Parameters
    ----------
    snapshot : SiteSnapshot
        Loaded pages and templates.
    output_dir : Path
        Destination folder; created when missing.

    Returns
    -------
    list[Path]
        Written files, ordered by slug.

    Raises
    ------
    ValueError
        If a slug would place a file outside ``output_dir``.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    root = output_dir.resolve()
    written: list[Path] = []
    for slug in sorted(snapshot.pages):
        page = snapshot.pages[slug]
        target = page_output_path(output_dir, slug)
        if not target.resolve().is_relative_to(root):
            msg = f"Slug '{slug}' escapes the output directory."
            raise ValueError(msg)
        html = render_page(page, snapshot.templates)
        if not html.endswith("\n"):
            html += "\n"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug("Rendered /%s -> %s", slug, target)
        written.append(target)
    return written


__all__ = ["export_site", "page_output_path"]
