"""Unit tests for loading layout templates."""

from __future__ import annotations

import typing as typ

from folio_pages.templates import load_templates

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    WriteFile = cabc.Callable[[Path, str], Path]


def test_missing_templates_directory_yields_empty_mapping(project_dir: Path) -> None:
    """No templates folder means no templates, not an error."""
    assert load_templates(project_dir) == {}


def test_only_top_level_markdown_files_are_loaded(
    project_dir: Path, templates_dir: Path, write: WriteFile
) -> None:
    """Nested folders and other extensions are ignored."""
    write(templates_dir / "homeWithTopNav.md", "<main>{{main}}</main>")
    write(templates_dir / "bare.md", "{{main}}")
    write(templates_dir / "partials" / "nav.md", "nav")
    write(templates_dir / "readme.txt", "notes")

    templates = load_templates(project_dir)

    assert sorted(templates) == ["bare", "homeWithTopNav"]
    assert templates["bare"].name == "bare"


def test_template_body_is_not_converted(
    project_dir: Path, templates_dir: Path, write: WriteFile
) -> None:
    """Template HTML and placeholders are kept exactly as written."""
    body = "# {{title}}\n<main class=\"{{mainClass}}\">{{main}}</main>\n"
    write(templates_dir / "page.md", f"---\nauthor: me\n---\n{body}")

    template = load_templates(project_dir)["page"]

    assert template.html == body
    assert template.metadata == {"author": "me"}


def test_template_includes_are_rendered(
    project_dir: Path, templates_dir: Path, write: WriteFile
) -> None:
    """Included partials are converted to HTML at substitution time."""
    write(templates_dir / "page.md", "<nav>{{include:'partials/nav.md'}}</nav>{{main}}")
    write(templates_dir / "partials" / "nav.md", "---\nlabel: nav\n---\n[Home](/)")

    template = load_templates(project_dir)["page"]

    assert template.html == '<nav><p><a href="/">Home</a></p></nav>{{main}}'
