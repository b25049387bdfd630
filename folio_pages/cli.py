"""Cyclopts CLI entrypoint for serving and exporting folio sites.

The ``folio`` console script defined here loads a project's markdown pages and
templates, serves them over HTTP (optionally reloading when markdown changes),
exports them as static HTML, and indexes image folders into ``folder.json``.
Every option can also be supplied through ``FOLIO_*`` environment variables.

Examples
--------
Serve the ``main`` project with hot reload:

>>> from folio_pages.cli import app
>>> app(["serve", "--watch"])  # doctest: +SKIP

Export the ``write`` project into ``dist``:

>>> app(["build", "--project", "write", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import uvicorn
from cyclopts import App, Parameter

from .config import SiteSettings, load_settings
from .export import export_site
from .image_index import write_image_index
from .logging import configure_logging, get_logger
from .server import create_app
from .site import SiteStore, load_site

app = App(
    name="folio",
    config=cyclopts.config.Env("FOLIO_", command=False),  # type: ignore[unknown-argument]
)

logger = get_logger("cli")

ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to a YAML settings file", env_var="FOLIO_CONFIG")
]
WorkspaceOption = typ.Annotated[
    Path | None,
    Parameter(
        help="Workspace root holding projects/ and public/", env_var="FOLIO_WORKSPACE"
    ),
]
ProjectOption = typ.Annotated[
    str | None,
    Parameter(help="Project folder under projects/", env_var="FOLIO_PROJECT"),
]
VerboseOption = typ.Annotated[bool, Parameter(help="Log every loaded page")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _settings(
    config: Path | None,
    workspace: Path | None,
    project: str | None,
    **overrides: typ.Any,
) -> SiteSettings:
    return load_settings(config, workspace_root=workspace, project=project, **overrides)


@app.command(help="Serve rendered pages over HTTP.")
def serve(
    *,
    config: ConfigOption = None,
    workspace: WorkspaceOption = None,
    project: ProjectOption = None,
    watch: typ.Annotated[
        bool | None,
        Parameter(help="Reload when markdown files change", env_var="FOLIO_WATCH"),
    ] = None,
    host: typ.Annotated[
        str | None, Parameter(help="Interface to bind", env_var="HOST")
    ] = None,
    port: typ.Annotated[
        int | None, Parameter(help="Port to listen on", env_var="PORT")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Load the project and serve it with uvicorn until interrupted.

    Parameters
    ----------
    config : Path or None, optional
        YAML settings file (``FOLIO_CONFIG``).
    workspace : Path or None, optional
        Workspace root; defaults to the settings file's folder or the cwd.
    project : str or None, optional
        Project folder under ``projects/`` (``FOLIO_PROJECT``).
    watch : bool or None, optional
        Reload pages and templates when markdown changes (``FOLIO_WATCH``).
    host : str or None, optional
        Interface to bind (``HOST``).
    port : int or None, optional
        Port to listen on (``PORT``, default ``3000``).
    verbose : bool, optional
        Log every loaded slug.
    """
    configure_logging(verbose=verbose)
    settings = _settings(
        config, workspace, project, watch=watch, host=host, port=port
    )
    store = SiteStore(settings)
    if settings.watch:
        logger.info("Watching %s for markdown changes", settings.project_dir)
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(create_app(store), host=settings.host, port=settings.port)


@app.command(help="Render every page to static HTML files.")
def build(
    *,
    output_dir: typ.Annotated[
        Path, Parameter(help="Folder receiving the HTML", env_var="FOLIO_OUTPUT_DIR")
    ] = Path("dist"),
    config: ConfigOption = None,
    workspace: WorkspaceOption = None,
    project: ProjectOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Export each page to ``<output_dir>/<slug>/index.html``.

    Parameters
    ----------
    output_dir : Path, optional
        Destination folder (``FOLIO_OUTPUT_DIR``, default ``dist``).
    config : Path or None, optional
        YAML settings file (``FOLIO_CONFIG``).
    workspace : Path or None, optional
        Workspace root.
    project : str or None, optional
        Project folder under ``projects/``.
    verbose : bool, optional
        Log every loaded slug.
    """
    configure_logging(verbose=verbose)
    settings = _settings(config, workspace, project)
    for path in export_site(load_site(settings), output_dir):
        print(f"wrote {_format_path(path)}")


@app.command(help="List the pages a project defines.")
def pages(
    *,
    config: ConfigOption = None,
    workspace: WorkspaceOption = None,
    project: ProjectOption = None,
) -> None:
    """Print each slug with the template it renders into."""
    configure_logging()
    snapshot = load_site(_settings(config, workspace, project))
    for slug in sorted(snapshot.pages):
        page = snapshot.pages[slug]
        marker = "" if page.template in snapshot.templates else " (missing template)"
        print(f"/{slug} ({page.template}){marker}")


@app.command(help="Index an image folder into a JSON file.")
def index_images(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Image folder to index", env_var="FOLIO_IMAGE_ROOT")
    ] = Path("public/img"),
    output: typ.Annotated[
        Path, Parameter(help="JSON file to write", env_var="FOLIO_IMAGE_INDEX")
    ] = Path("public/folder.json"),
) -> None:
    """Write the ``tree``/``flat``/``path`` index of ``root`` to ``output``."""
    configure_logging()
    written = write_image_index(root, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
