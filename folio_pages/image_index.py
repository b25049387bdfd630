"""Index an image folder into the ``folder.json`` consumed by gallery pages.

The index has three views of the same tree:

``tree``
    Nested ``{"name", "type", "children"}`` nodes mirroring the folders.
``flat``
    Folder path (relative, ``/``-separated) to the file names it directly
    contains. Only subfolders are listed; loose files in the root are not.
``path``
    File name to the folder holding it. A name found in several folders maps
    to a list of folders instead of a single string.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.image_index import write_image_index
>>> write_image_index(Path("public/img"), Path("public/folder.json"))  # doctest: +SKIP
PosixPath('public/folder.json')
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
from pathlib import Path

from .logging import get_logger

IGNORED_NAMES = frozenset({".DS_Store"})

logger = get_logger("image_index")

TreeNode = dict[str, typ.Any]


def _entries(directory: Path) -> list[Path]:
    return [
        entry
        for entry in sorted(directory.iterdir(), key=lambda path: path.name)
        if entry.name not in IGNORED_NAMES
    ]


def _is_folder(entry: Path) -> bool:
    return entry.is_dir() and not entry.is_symlink()


def build_tree(directory: Path) -> TreeNode:
    """Return the nested folder/file tree rooted at ``directory``."""
    children: list[TreeNode] = []
    for entry in _entries(directory):
        if _is_folder(entry):
            children.append(build_tree(entry))
        elif entry.is_file():
            children.append({"name": entry.name, "type": "file"})
    return {"name": directory.name, "type": "folder", "children": children}


@dc.dataclass(slots=True)
class _PathIndex:
    """Accumulates the ``flat`` and ``path`` views during traversal."""

    root: Path
    flat: dict[str, list[str]] = dc.field(default_factory=dict)
    paths: dict[str, str | list[str]] = dc.field(default_factory=dict)

    def record_file(self, name: str, folder: str) -> None:
        existing = self.paths.get(name)
        if existing is None:
            self.paths[name] = folder
            return
        logger.warning(
            "Duplicate filename '%s'; its path will be stored as a list "
            "(existing: %s, new: %s)",
            name,
            existing,
            self.root / folder,
        )
        if isinstance(existing, list):
            existing.append(folder)
        else:
            self.paths[name] = [existing, folder]

    def walk(self, directory: Path, relative: str) -> None:
        files: list[str] = []
        for entry in _entries(directory):
            if _is_folder(entry):
                self.walk(entry, f"{relative}/{entry.name}")
            elif entry.is_file():
                files.append(entry.name)
                self.record_file(entry.name, relative)
        if files:
            self.flat[relative] = files


def build_image_index(root: Path) -> dict[str, typ.Any]:
    """Return the ``tree``, ``flat``, and ``path`` views of ``root``.

    Parameters
    ----------
    root : Path
        Image folder to index.

    Returns
    -------
    dict[str, Any]
        Mapping with ``tree``, ``flat``, and ``path`` keys.

    Raises
    ------
    FileNotFoundError
        If ``root`` is not a directory.
    """
    if not root.is_dir():
        msg = f"Image folder '{root}' not found."
        raise FileNotFoundError(msg)

    index = _PathIndex(root=root)
    for entry in _entries(root):
        if _is_folder(entry):
            index.walk(entry, entry.name)
    return {"tree": build_tree(root), "flat": index.flat, "path": index.paths}


def write_image_index(root: Path, output: Path) -> Path:
    """Index ``root`` and write the JSON document to ``output``."""
    index = build_image_index(root)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(
        json.dumps(index, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    return output


__all__ = ["IGNORED_NAMES", "build_image_index", "build_tree", "write_image_index"]
