"""Render page records into their layout templates.

Rendering is plain placeholder substitution: the template HTML is taken as-is
and each known ``{{token}}`` is replaced, in a fixed order, at every
occurrence. Unknown tokens are left in the output.

Example
-------
>>> from folio_pages.models import PageRecord, TemplateRecord
>>> from folio_pages.render import render_page
>>> layout = TemplateRecord("base", '<body class="{{navColorClass}}">{{main}}</body>')
>>> page = PageRecord(slug="", title="Home", html="<p>hi</p>", template="base")
>>> render_page(page, {"base": layout})
'<body class="bg-black text-white"><p>hi</p></body>'
"""

from __future__ import annotations

import typing as typ

from ._constants import (
    DARK_NAV_CLASSES,
    DEFAULT_NAV_COLOR,
    DEFAULT_TEMPLATE,
    FALLBACK_MAIN_CLASS,
    FALLBACK_TITLE,
    LIGHT_NAV_CLASSES,
)
from .error_pages import render_missing_template

if typ.TYPE_CHECKING:
    from .models import PageRecord, TemplateRecord


def nav_color_class(nav_color: str | None) -> str:
    """Return the navigation classes for a page's ``navColor``."""
    return DARK_NAV_CLASSES if nav_color == DEFAULT_NAV_COLOR else LIGHT_NAV_CLASSES


def background_style(background: str | None) -> str:
    """Return the inline background style attribute, or ``""`` without one.

    >>> background_style("/img/x.png")
    'style="background-image: url(\\'/img/x.png\\');"'
    >>> background_style(None)
    ''
    """
    if not background:
        return ""
    return f"style=\"background-image: url('{background}');\""


def placeholder_values(page: PageRecord) -> list[tuple[str, str]]:
    """Return ``(token, replacement)`` pairs in substitution order."""
    return [
        ("{{main}}", page.html),
        ("{{title}}", page.title or FALLBACK_TITLE),
        ("{{navColorClass}}", nav_color_class(page.nav_color)),
        ("{{mainClass}}", page.main_class or FALLBACK_MAIN_CLASS),
        ("{{backgroundStyle}}", background_style(page.background)),
    ]


def render_page(page: PageRecord, templates: typ.Mapping[str, TemplateRecord]) -> str:
    """Render ``page`` into the template it names.

    Parameters
    ----------
    page : PageRecord
        Loaded page with rendered HTML body.
    templates : Mapping[str, TemplateRecord]
        Available templates keyed by name.

    Returns
    -------
    str
        The complete HTML document. When the template is unknown a minimal
        document naming the missing template and containing the page body is
        returned instead.
    """
    template_name = page.template or DEFAULT_TEMPLATE
    template = templates.get(template_name)
    if template is None:
        return render_missing_template(template_name, page.html)

    html = template.html
    for token, value in placeholder_values(page):
        html = html.replace(token, value)
    return html


__all__ = ["background_style", "nav_color_class", "placeholder_values", "render_page"]
