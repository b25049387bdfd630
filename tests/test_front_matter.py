"""Unit tests for splitting YAML front matter from page sources."""

from __future__ import annotations

import pytest

from folio_pages.front_matter import (
    FrontMatterError,
    split_front_matter,
    strip_front_matter,
)


def test_source_without_front_matter_is_returned_unchanged() -> None:
    """Text without a leading delimiter yields empty metadata."""
    document = split_front_matter("# Title\n\nBody\n")
    assert document.metadata == {}
    assert document.body == "# Title\n\nBody\n"


def test_front_matter_is_parsed_and_removed() -> None:
    """Keys are parsed and the body starts after the closing delimiter."""
    document = split_front_matter(
        "---\ntitle: About me\nnavColor: white\ntags: [a, b]\n---\nHello\n"
    )
    assert document.metadata == {
        "title": "About me",
        "navColor": "white",
        "tags": ["a", "b"],
    }
    assert document.body == "Hello\n"


def test_empty_front_matter_block_yields_empty_mapping() -> None:
    """An empty block is valid and produces no metadata."""
    document = split_front_matter("---\n---\nBody")
    assert document.metadata == {}
    assert document.body == "Body"


def test_empty_string_slug_is_preserved() -> None:
    """Quoted empty strings survive parsing so they can mark the home page."""
    document = split_front_matter('---\nslug: ""\n---\nHome')
    assert document.metadata == {"slug": ""}


def test_unterminated_block_is_treated_as_body() -> None:
    """Without a closing delimiter nothing is parsed."""
    text = "---\ntitle: draft\nstill writing"
    document = split_front_matter(text)
    assert document.metadata == {}
    assert document.body == text


def test_malformed_yaml_raises() -> None:
    """Invalid YAML is reported with the offending file."""
    with pytest.raises(FrontMatterError, match="Malformed front matter"):
        split_front_matter("---\ntitle: [unclosed\n---\nBody")


def test_non_mapping_front_matter_raises() -> None:
    """A YAML list is not accepted as front matter."""
    with pytest.raises(FrontMatterError, match="must be a mapping"):
        split_front_matter("---\n- one\n- two\n---\nBody")


def test_strip_front_matter_only_touches_delimited_sources() -> None:
    """Stripping returns the body for delimited text and the input otherwise."""
    assert strip_front_matter("---\ntitle: x\n---\nPartial") == "Partial"
    assert strip_front_matter("Partial") == "Partial"
