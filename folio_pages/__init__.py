"""Render a personal website from markdown pages and HTML templates.

This package loads a project's ``pages/`` and ``templates/`` folders, resolves
``{{include:'...'}}`` directives, converts page bodies to HTML, and renders
each page into its template by placeholder substitution. The ``folio``
console script serves the result over HTTP or exports it as static files.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``load_markdown_pages`` / ``load_templates`` / ``render_page``: the
  loading and rendering pipeline.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .pages import load_markdown_pages
from .render import render_page
from .templates import load_templates

__all__ = ["app", "load_markdown_pages", "load_templates", "main", "render_page"]
