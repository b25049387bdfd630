"""FastAPI application serving rendered pages and static assets.

One catch-all route maps the request path to a slug, renders the matching
page into its template, and answers 200, or 404 with a fixed error page.
Files under ``public/`` win over pages with the same path, and the workspace
``projects/`` tree is exposed under ``/projects`` so project-local images and
stylesheets are reachable from the browser.

Example
-------
>>> from folio_pages.config import load_settings
>>> from folio_pages.server import create_app
>>> from folio_pages.site import SiteStore
>>> app = create_app(SiteStore(load_settings()))  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from .error_pages import render_not_found
from .front_matter import FrontMatterError
from .logging import get_logger
from .render import render_page

if typ.TYPE_CHECKING:
    from .site import SiteStore

logger = get_logger("server")


def request_slug(path: str) -> str:
    """Return the slug for a request path, dropping one leading and trailing slash.

    >>> request_slug("/work/photos/")
    'work/photos'
    >>> request_slug("/")
    ''
    """
    return path.removeprefix("/").removesuffix("/")


def public_file(public_dir: Path, path: str) -> Path | None:
    """Return the static file under ``public_dir`` matching ``path``, if any.

    Directories are never served and paths escaping ``public_dir`` are
    ignored.
    """
    relative = path.lstrip("/")
    if not relative or not public_dir.is_dir():
        return None
    root = public_dir.resolve()
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def _refresh(store: SiteStore) -> None:
    try:
        store.refresh_if_changed()
    except (OSError, UnicodeDecodeError, FrontMatterError):
        logger.exception("Reload failed; serving the previous pages")


def create_app(store: SiteStore) -> FastAPI:
    """Create the FastAPI application serving ``store``'s pages.

    Parameters
    ----------
    store : SiteStore
        Loaded pages and templates. When ``store.settings.watch`` is set the
        store is checked for markdown changes before every request.

    Returns
    -------
    FastAPI
        Application ready to hand to ``uvicorn``.
    """
    settings = store.settings
    app = FastAPI(title="folio", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.store = store

    if settings.projects_dir.is_dir():
        app.mount(
            "/projects",
            StaticFiles(directory=settings.projects_dir),
            name="projects",
        )

    @app.get("/{full_path:path}", response_model=None)
    def serve(full_path: str) -> Response:
        asset = public_file(settings.public_dir, full_path)
        if asset is not None:
            return FileResponse(asset)

        if settings.watch:
            _refresh(store)

        slug = request_slug(full_path)
        snapshot = store.snapshot
        page = snapshot.get_page(slug)
        if page is None:
            return HTMLResponse(render_not_found(slug), status_code=404)
        try:
            html = render_page(page, snapshot.templates)
        except Exception:
            logger.exception("Server render error for /%s", slug)
            return PlainTextResponse("Server render error", status_code=500)
        return HTMLResponse(html, status_code=200)

    return app


__all__ = ["create_app", "public_file", "request_slug"]
