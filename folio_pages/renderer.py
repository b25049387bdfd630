"""Markdown to HTML conversion shared by the page and template loaders."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')

# GitHub-flavoured dialect: fenced code, tables, newline => <br>, heading ids.
# Raw HTML is passed through untouched.
MARKDOWN_EXTENSIONS: tuple[str, ...] = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "nl2br",
    "toc",
)


class MarkdownRenderer:
    """Render markdown with the site's dialect and code highlighting."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: typ.Sequence[Extension | str] = (),
    ) -> None:
        """Initialize a renderer with a pygments style and optional extensions.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for fenced code blocks. Defaults to
            ``"monokai"``.
        extensions : Sequence[Extension | str], optional
            Additional Markdown extensions appended to the site dialect.
        """
        self.pygments_style = pygments_style
        self._extra_extensions = list(extensions)

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [*MARKDOWN_EXTENSIONS]
        extensions.extend(self._extra_extensions)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


_DEFAULT_RENDERER = MarkdownRenderer()


def render_markdown(text: str) -> str:
    """Convert ``text`` with the default site renderer."""
    return _DEFAULT_RENDERER.markdown(text)


__all__ = [
    "CODE_BLOCK_PATTERN",
    "MARKDOWN_EXTENSIONS",
    "MarkdownRenderer",
    "render_markdown",
]
