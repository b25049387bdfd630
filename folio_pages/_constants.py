"""Common literal values used across folio_pages.

These constants keep directory names, front-matter defaults, and placeholder
tokens centralized so loaders, the renderer, and tests can import the same
values without drifting. Intended for internal use within the folio_pages
package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.DEFAULT_TEMPLATE
'homeWithTopNav'
>>> _constants.PAGES_DIRNAME, _constants.TEMPLATES_DIRNAME
('pages', 'templates')
"""

PAGES_DIRNAME = "pages"
TEMPLATES_DIRNAME = "templates"
PROJECTS_DIRNAME = "projects"
PUBLIC_DIRNAME = "public"
MARKDOWN_SUFFIX = ".md"

DEFAULT_PROJECT = "main"
DEFAULT_TEMPLATE = "homeWithTopNav"
DEFAULT_NAV_COLOR = "black"
PAGE_MAIN_CLASS = "pt-[75px] m-0"

FALLBACK_TITLE = "Page"
FALLBACK_MAIN_CLASS = "p-8"
DARK_NAV_CLASSES = "bg-black text-white"
LIGHT_NAV_CLASSES = "bg-white text-black"
