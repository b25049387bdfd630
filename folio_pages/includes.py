"""Resolve ``{{include:'path'}}`` directives in pages and templates.

Page includes are spliced in textually before markdown conversion and are
resolved recursively: a path starting with ``/`` is looked up from the
workspace root, anything else relative to the directory of the file being
processed. Template includes only look inside the templates directory, are not
recursive, and each included body is converted to HTML on its own so the
surrounding template keeps its literal HTML and placeholders.

Example
-------
>>> from folio_pages.includes import INCLUDE_PATTERN
>>> INCLUDE_PATTERN.search("Hi {{include:'nav.md'}}").group(1)
'nav.md'
"""

from __future__ import annotations

import os
import re
import typing as typ
from pathlib import Path

from .front_matter import FrontMatterError, strip_front_matter
from .logging import get_logger
from .renderer import render_markdown

INCLUDE_PATTERN = re.compile(r"""\{\{include:['"]([^'"]+)['"]\}\}""")

logger = get_logger("includes")


def missing_include_marker(include_path: str) -> str:
    """Return the HTML comment substituted for an include that does not exist."""
    return f"<!-- Include not found: {include_path} -->"


def failed_include_marker(include_path: str) -> str:
    """Return the HTML comment substituted for an include that could not be read."""
    return f"<!-- Error including: {include_path} -->"


def _normalize(path: str | os.PathLike[str]) -> Path:
    """Return an absolute, lexically normalized path (symlinks untouched)."""
    return Path(os.path.abspath(path))


def _read_include(resolved: Path) -> str:
    text = resolved.read_text(encoding="utf-8")
    return strip_front_matter(text, source=resolved)


def resolve_page_include_path(
    include_path: str, current_file: Path, workspace_root: Path
) -> Path:
    """Return the file an include directive inside ``current_file`` refers to.

    Parameters
    ----------
    include_path : str
        Path written inside the directive.
    current_file : Path
        File containing the directive.
    workspace_root : Path
        Root used for paths starting with ``/``.

    Returns
    -------
    Path
        Absolute, normalized path of the include target.
    """
    if include_path.startswith("/"):
        return _normalize(workspace_root / include_path.lstrip("/"))
    return _normalize(current_file.parent / include_path)


def resolve_includes(
    content: str,
    current_file: Path,
    workspace_root: Path,
    visited: set[Path] | None = None,
) -> str:
    """Expand include directives in ``content`` recursively.

    Parameters
    ----------
    content : str
        Markdown text that may contain include directives.
    current_file : Path
        File ``content`` was read from; relative includes resolve from its
        directory.
    workspace_root : Path
        Root directory for includes whose path starts with ``/``.
    visited : set[Path], optional
        Files already expanded during this resolution. Callers resolving a
        new page should leave it unset; the set is threaded through the
        recursive calls so each file is expanded at most once.

    Returns
    -------
    str
        ``content`` with every directive replaced by the included body, a
        ``<!-- Include not found: ... -->`` marker, or an
        ``<!-- Error including: ... -->`` marker.

    Notes
    -----
    When ``current_file`` is already in ``visited`` the content is returned
    unexpanded, which breaks circular include chains.
    """
    visited = set() if visited is None else visited
    current = _normalize(current_file)
    if current in visited:
        logger.warning("Circular include detected: %s", current)
        return content
    visited.add(current)

    def _replace(match: re.Match[str]) -> str:
        include_path = match.group(1)
        resolved = resolve_page_include_path(include_path, current, workspace_root)
        if not resolved.exists():
            logger.warning(
                "Include file not found: %s (resolved: %s)", include_path, resolved
            )
            return missing_include_marker(include_path)
        try:
            included = _read_include(resolved)
        except (OSError, UnicodeDecodeError, FrontMatterError) as exc:
            logger.error("Error reading include file %s: %s", include_path, exc)
            return failed_include_marker(include_path)
        return resolve_includes(included, resolved, workspace_root, visited)

    return INCLUDE_PATTERN.sub(_replace, content)


def resolve_template_includes(
    content: str,
    templates_dir: Path,
    *,
    convert: typ.Callable[[str], str] = render_markdown,
) -> str:
    """Expand include directives in template HTML.

    Parameters
    ----------
    content : str
        Template body containing HTML, placeholders, and include directives.
    templates_dir : Path
        Directory every include path is resolved against; a leading ``/`` is
        ignored rather than pointing at the workspace root.
    convert : Callable[[str], str], optional
        Converter applied to each included body; defaults to the site
        markdown renderer.

    Returns
    -------
    str
        Template text with each directive replaced by converted HTML or a
        comment marker. Included files are not scanned for further includes.
    """

    def _replace(match: re.Match[str]) -> str:
        include_path = match.group(1)
        resolved = _normalize(templates_dir / include_path.lstrip("/"))
        if not resolved.exists():
            logger.warning("Template include not found: %s", include_path)
            return missing_include_marker(include_path)
        try:
            included = _read_include(resolved)
        except (OSError, UnicodeDecodeError, FrontMatterError) as exc:
            logger.error("Error reading template include %s: %s", include_path, exc)
            return failed_include_marker(include_path)
        return convert(included)

    return INCLUDE_PATTERN.sub(_replace, content)


__all__ = [
    "INCLUDE_PATTERN",
    "failed_include_marker",
    "missing_include_marker",
    "resolve_includes",
    "resolve_page_include_path",
    "resolve_template_includes",
]
