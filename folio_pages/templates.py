"""Load layout templates from a project's ``templates/`` folder.

Templates are markdown files that already contain literal HTML and
``{{placeholder}}`` tokens, so their bodies are never run through the markdown
parser. Only the partials they include are converted.
"""

from __future__ import annotations

from pathlib import Path

from ._constants import MARKDOWN_SUFFIX, TEMPLATES_DIRNAME
from .front_matter import split_front_matter
from .includes import resolve_template_includes
from .logging import get_logger
from .models import TemplateRecord
from .renderer import MarkdownRenderer, render_markdown

logger = get_logger("templates")


def load_template(
    file_path: Path, *, renderer: MarkdownRenderer | None = None
) -> TemplateRecord:
    """Read one template file, resolving its includes against its own folder."""
    raw = file_path.read_text(encoding="utf-8")
    document = split_front_matter(raw, source=file_path)
    convert = renderer.markdown if renderer else render_markdown
    html = resolve_template_includes(document.body, file_path.parent, convert=convert)
    return TemplateRecord(
        name=file_path.name[: -len(MARKDOWN_SUFFIX)],
        html=html,
        metadata=document.metadata,
    )


def load_templates(
    project_dir: Path, *, renderer: MarkdownRenderer | None = None
) -> dict[str, TemplateRecord]:
    """Return templates keyed by file name without the ``.md`` extension.

    Parameters
    ----------
    project_dir : Path
        Project directory holding a ``templates/`` folder. Only files directly
        inside that folder are loaded.
    renderer : MarkdownRenderer, optional
        Converter for included partials; defaults to the site renderer.

    Returns
    -------
    dict[str, TemplateRecord]
        Loaded templates; empty when the folder does not exist.
    """
    templates_dir = project_dir / TEMPLATES_DIRNAME
    templates: dict[str, TemplateRecord] = {}
    if not templates_dir.is_dir():
        logger.info("No templates directory at %s", templates_dir)
        return templates

    for entry in sorted(templates_dir.iterdir(), key=lambda path: path.name):
        if not (entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)):
            continue
        template = load_template(entry, renderer=renderer)
        templates[template.name] = template
        logger.debug("  - template %s", template.name)
    return templates


__all__ = ["load_template", "load_templates"]
