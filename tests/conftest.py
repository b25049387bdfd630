"""Shared fixtures for folio_pages tests.

Every test builds its own workspace below ``tmp_path``: a ``projects/main``
project with ``pages/`` and ``templates/`` folders plus a ``public/`` folder.
The ``write`` fixture creates files (and their parents) inside it.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from folio_pages.config import SiteSettings

WriteFile = typ.Callable[[Path, str], Path]


@pytest.fixture
def write() -> WriteFile:
    """Return a helper that writes UTF-8 text, creating parent folders."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return an empty workspace root containing the ``main`` project folder."""
    root = tmp_path / "site"
    (root / "projects" / "main").mkdir(parents=True)
    return root


@pytest.fixture
def project_dir(workspace: Path) -> Path:
    """Return the ``main`` project folder inside the workspace."""
    return workspace / "projects" / "main"


@pytest.fixture
def pages_dir(project_dir: Path) -> Path:
    """Return the pages folder of the ``main`` project (not yet created)."""
    return project_dir / "pages"


@pytest.fixture
def templates_dir(project_dir: Path) -> Path:
    """Return the templates folder of the ``main`` project (not yet created)."""
    return project_dir / "templates"


@pytest.fixture
def settings(workspace: Path) -> SiteSettings:
    """Return settings pointing at the temporary workspace."""
    return SiteSettings(workspace_root=workspace)
