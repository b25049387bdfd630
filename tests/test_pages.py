"""Unit tests for loading markdown pages into page records."""

from __future__ import annotations

import typing as typ
from pathlib import PurePosixPath

import pytest

from folio_pages._constants import DEFAULT_TEMPLATE, PAGE_MAIN_CLASS
from folio_pages.front_matter import FrontMatterError
from folio_pages.pages import default_slug, load_markdown_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from folio_pages.models import PageRecord

    WriteFile = cabc.Callable[[Path, str], Path]


def _by_slug(pages: list[PageRecord]) -> dict[str, PageRecord]:
    return {page.slug: page for page in pages}


def test_missing_pages_directory_yields_no_pages(
    project_dir: Path, workspace: Path
) -> None:
    """An absent pages folder is a normal empty site."""
    assert load_markdown_pages(project_dir, workspace) == []


def test_slugs_mirror_relative_paths(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Slugs drop the extension and use forward slashes at any depth."""
    write(pages_dir / "about.md", "About")
    write(pages_dir / "work" / "photos.md", "Photos")
    write(pages_dir / "work" / "analog" / "day.md", "Day")
    write(pages_dir / "notes.txt", "ignored")

    slugs = [page.slug for page in load_markdown_pages(project_dir, workspace)]

    assert slugs == ["about", "work/analog/day", "work/photos"]


def test_symlinked_directories_are_not_followed(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """A link back to an ancestor folder neither loops nor duplicates pages."""
    write(pages_dir / "work" / "photos.md", "Photos")
    (pages_dir / "work" / "loop").symlink_to(pages_dir, target_is_directory=True)

    slugs = [page.slug for page in load_markdown_pages(project_dir, workspace)]

    assert slugs == ["work/photos"]


def test_default_slug_strips_only_the_markdown_suffix() -> None:
    """Dots inside names are preserved."""
    assert default_slug(PurePosixPath("v1.2/notes.md")) == "v1.2/notes"


def test_front_matter_slug_overrides_path(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """A front-matter slug always wins, including the empty home slug."""
    write(pages_dir / "home.md", '---\nslug: ""\n---\nWelcome')
    write(pages_dir / "long" / "path.md", "---\nslug: short\n---\nShort")
    write(pages_dir / "blank.md", "---\nslug:\n---\nBlank")

    pages = _by_slug(load_markdown_pages(project_dir, workspace))

    assert set(pages) == {"", "short"}
    assert pages[""].source is not None
    assert pages["short"].source == pages_dir / "long" / "path.md"


def test_defaults_are_applied(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Template, title, nav colour, and layout class fall back to defaults."""
    write(pages_dir / "contact.md", "Say hi")

    (page,) = load_markdown_pages(project_dir, workspace)

    assert page.template == DEFAULT_TEMPLATE
    assert page.title == "contact"
    assert page.nav_color == "black"
    assert page.main_class == PAGE_MAIN_CLASS
    assert page.background is None
    assert page.extra == {}


def test_front_matter_fields_and_pass_through_keys(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Known keys populate attributes; unknown keys land in ``extra``."""
    write(
        pages_dir / "gallery.md",
        "---\n"
        "title: Gallery\n"
        "template: fullBleed\n"
        "navColor: white\n"
        "background: /img/x.png\n"
        "mainClass: ignored\n"
        "gallery: analog\n"
        "order: 3\n"
        "---\n"
        "Pictures",
    )

    (page,) = load_markdown_pages(project_dir, workspace)

    assert page.title == "Gallery"
    assert page.template == "fullBleed"
    assert page.nav_color == "white"
    assert page.background == "/img/x.png"
    assert page.main_class == PAGE_MAIN_CLASS
    assert page.extra == {"gallery": "analog", "order": 3}


def test_empty_front_matter_values_fall_back(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Blank titles and templates are treated as unset."""
    write(pages_dir / "draft.md", '---\ntitle: ""\ntemplate: ""\n---\nDraft')

    (page,) = load_markdown_pages(project_dir, workspace)

    assert page.title == "draft"
    assert page.template == DEFAULT_TEMPLATE


def test_includes_are_resolved_before_markdown(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Included text is spliced in and then converted with the page."""
    write(pages_dir / "hello.md", "Hello {{include:'name.md'}}!")
    write(pages_dir / "name.md", "**World**")

    pages = _by_slug(load_markdown_pages(project_dir, workspace))

    assert pages["hello"].html == "<p>Hello <strong>World</strong>!</p>"


def test_markdown_dialect(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Newlines become breaks, headings get ids, and raw HTML passes through."""
    write(
        pages_dir / "dialect.md",
        "# Intro\n\n"
        "line one\nline two\n\n"
        '<div class="hero">Raw <em>html</em></div>\n\n'
        "| a | b |\n| --- | --- |\n| 1 | 2 |\n",
    )

    (page,) = load_markdown_pages(project_dir, workspace)

    assert '<h1 id="intro">Intro</h1>' in page.html
    assert "line one<br" in page.html
    assert '<div class="hero">Raw <em>html</em></div>' in page.html
    assert "<table>" in page.html


def test_fenced_code_is_highlighted(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Fenced code blocks are highlighted and labelled with their language."""
    write(pages_dir / "code.md", '```python\nprint("hi")\n```\n')

    (page,) = load_markdown_pages(project_dir, workspace)

    assert '<div class="codehilite" data-language="python">' in page.html


def test_malformed_page_front_matter_aborts_the_load(
    project_dir: Path, pages_dir: Path, workspace: Path, write: WriteFile
) -> None:
    """Front-matter errors in a page itself propagate to the caller."""
    write(pages_dir / "ok.md", "fine")
    write(pages_dir / "broken.md", "---\ntitle: [oops\n---\nBody")

    with pytest.raises(FrontMatterError):
        load_markdown_pages(project_dir, workspace)
