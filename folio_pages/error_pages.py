"""Fixed HTML documents for missing pages and missing templates.

The documents are Jinja templates held in memory, so rendering them never
touches the filesystem.
"""

from __future__ import annotations

import functools

from jinja2 import DictLoader, Environment
from markupsafe import Markup

NOT_FOUND_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <title>404 - Page Not Found</title>
  <link rel="stylesheet" href="/css/styles.css">
</head>
<body class="flex items-center justify-center h-screen bg-gray-100">
  <div class="text-center">
    <h1 class="text-6xl font-bold text-gray-800">404</h1>
    <p class="text-xl text-gray-600 mt-4">Page not found: /{{ slug }}</p>
    <a href="/" class="mt-8 inline-block px-6 py-3 bg-blue-500 text-white rounded hover:bg-blue-600">Go Home</a>
  </div>
</body>
</html>
"""

MISSING_TEMPLATE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <title>Template Not Found</title>
</head>
<body>
  <h1>Template "{{ template_name }}" not found</h1>
  <div>{{ body }}</div>
</body>
</html>
"""


@functools.cache
def _environment() -> Environment:
    return Environment(
        loader=DictLoader(
            {
                "not_found.jinja": NOT_FOUND_TEMPLATE,
                "missing_template.jinja": MISSING_TEMPLATE_TEMPLATE,
            }
        ),
        autoescape=True,
        keep_trailing_newline=True,
    )


def render_not_found(slug: str) -> str:
    """Return the 404 document naming the requested slug (escaped)."""
    return _environment().get_template("not_found.jinja").render(slug=slug)


def render_missing_template(template_name: str, body_html: str) -> str:
    """Return the degraded document used when a page names an unknown template.

    ``body_html`` is the page's already rendered body and is inserted
    verbatim, as is ``template_name``.
    """
    template = _environment().get_template("missing_template.jinja")
    return template.render(
        template_name=Markup(template_name), body=Markup(body_html)
    )


__all__ = ["render_missing_template", "render_not_found"]
