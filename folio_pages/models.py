"""Shared dataclasses passed between the loaders, renderer, and server."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path
from types import MappingProxyType

from ._constants import DEFAULT_NAV_COLOR, DEFAULT_TEMPLATE, PAGE_MAIN_CLASS


@dc.dataclass(slots=True)
class PageRecord:
    """A markdown page ready to be rendered into a template.

    Attributes
    ----------
    slug : str
        URL path (without leading slash) the page is served under; empty for
        the home page.
    title : str
        Value substituted for ``{{title}}``.
    html : str
        Body converted from markdown after include resolution.
    template : str
        Name of the template the page is rendered into.
    nav_color : str
        ``"black"`` selects the dark navigation classes; anything else the
        light ones.
    main_class : str
        Layout classes substituted for ``{{mainClass}}``.
    background : str or None
        Optional background image URL for ``{{backgroundStyle}}``.
    source : Path or None
        Markdown file the record was built from.
    extra : dict[str, Any]
        Front-matter keys without a dedicated attribute, passed through
        untouched.
    """

    slug: str
    title: str
    html: str
    template: str = DEFAULT_TEMPLATE
    nav_color: str = DEFAULT_NAV_COLOR
    main_class: str = PAGE_MAIN_CLASS
    background: str | None = None
    source: Path | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class TemplateRecord:
    """Layout HTML with placeholder tokens and its front-matter metadata."""

    name: str
    html: str
    metadata: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class SiteSnapshot:
    """Read-only page and template lookups produced by one load pass.

    Snapshots are never mutated; a reload builds a new one and swaps the
    reference held by :class:`~folio_pages.site.SiteStore`.
    """

    pages: typ.Mapping[str, PageRecord] = dc.field(
        default_factory=lambda: MappingProxyType({})
    )
    templates: typ.Mapping[str, TemplateRecord] = dc.field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls,
        pages: typ.Iterable[PageRecord],
        templates: typ.Mapping[str, TemplateRecord],
    ) -> SiteSnapshot:
        """Index ``pages`` by slug; later pages replace earlier duplicates."""
        by_slug: dict[str, PageRecord] = {}
        for page in pages:
            by_slug[page.slug] = page
        return cls(
            pages=MappingProxyType(by_slug),
            templates=MappingProxyType(dict(templates)),
        )

    def get_page(self, slug: str) -> PageRecord | None:
        """Return the page served under ``slug`` or ``None``."""
        return self.pages.get(slug)


__all__ = ["PageRecord", "SiteSnapshot", "TemplateRecord"]
