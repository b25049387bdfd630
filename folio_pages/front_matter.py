r"""Split YAML front matter from markdown and template sources.

Pages, templates, and included partials may open with a ``---`` delimited YAML
block. This module separates that block from the body, parses it with
``ruamel.yaml``, and returns a small dataclass the loaders consume.

Example
-------
>>> from folio_pages.front_matter import split_front_matter
>>> document = split_front_matter("---\ntitle: About\n---\nHello")
>>> document.metadata["title"], document.body
('About', 'Hello')
>>> split_front_matter("No metadata here").metadata
{}
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONT_MATTER_DELIMITER = "---"
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a front-matter block cannot be parsed into a mapping."""


@dc.dataclass(slots=True)
class FrontMatterDocument:
    """Front-matter metadata and the body that follows it.

    Attributes
    ----------
    metadata : dict[str, Any]
        Parsed front-matter keys; empty when the source has no block.
    body : str
        Text following the closing delimiter, or the whole source.
    """

    metadata: dict[str, typ.Any]
    body: str


def _load_yaml(text: str, source: Path | None) -> dict[str, typ.Any]:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    location = f" in {source}" if source else ""
    try:
        loaded = loader.load(text)
    except YAMLError as exc:
        msg = f"Malformed front matter{location}: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        msg = f"Front matter{location} must be a mapping, got {type(loaded).__name__}."
        raise FrontMatterError(msg)
    return {str(key): value for key, value in loaded.items()}


def split_front_matter(text: str, *, source: Path | None = None) -> FrontMatterDocument:
    """Separate a leading YAML block from ``text``.

    Parameters
    ----------
    text : str
        Raw file contents.
    source : Path, optional
        File the text came from; only used in error messages.

    Returns
    -------
    FrontMatterDocument
        Parsed metadata and the remaining body. Sources without a complete
        ``---`` block yield empty metadata and the unchanged text.

    Raises
    ------
    FrontMatterError
        If the block is not valid YAML or does not describe a mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return FrontMatterDocument(metadata={}, body=text)
    metadata = _load_yaml(match.group("yaml"), source)
    return FrontMatterDocument(metadata=metadata, body=text[match.end() :])


def strip_front_matter(text: str, *, source: Path | None = None) -> str:
    """Return ``text`` without its front matter when it opens with a delimiter."""
    if not text.startswith(FRONT_MATTER_DELIMITER):
        return text
    return split_front_matter(text, source=source).body


__all__ = [
    "FRONT_MATTER_DELIMITER",
    "FRONT_MATTER_PATTERN",
    "FrontMatterDocument",
    "FrontMatterError",
    "split_front_matter",
    "strip_front_matter",
]
