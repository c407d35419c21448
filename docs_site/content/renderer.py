"""Render page Markdown to HTML for the docs site.

Fenced code is highlighted by the ``codehilite`` extension. Each highlighted
block is then tagged with a ``data-language`` attribute taken from its fence,
so ``rust,no_run`` fences render as ``data-language="rust"`` and fences
without an info string as ``data-language="text"``. Indented code blocks are
highlighted too but carry the extra ``codehilite--indented`` class and no
language tag.

Example
-------
>>> from docs_site.content.renderer import PageRenderer
>>> html = PageRenderer().render("```python\\nprint(1)\\n```\\n")
>>> 'data-language="python"' in html
True
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension

BASE_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists", "toc")
FENCE_LINE = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<info>[^`]*)$")
FENCE_LANGUAGE = re.compile(r"[A-Za-z0-9_+#.-]+")
HIGHLIGHT_OPEN = '<div class="codehilite">'
HILITE_PROCESSOR = "hilite"
INDENTED_CSS_CLASS = "codehilite codehilite--indented"
DEFAULT_LANGUAGE = "text"


class PageRenderer:
    """Convert page Markdown into HTML with highlighted code blocks."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        *,
        extensions: cabc.Sequence[Extension] = (),
    ) -> None:
        """Create a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for highlighting. Defaults to ``"monokai"``.
        extensions : Sequence[Extension], optional
            Extra Markdown extensions, such as the versioned link rewriter.
        """
        self.pygments_style = pygments_style
        self.extensions = tuple(extensions)

    @property
    def stylesheet(self) -> str:
        """Return the CSS rules for highlighted blocks in ``pygments_style``."""
        formatter = HtmlFormatter(style=self.pygments_style, cssclass="codehilite")
        return formatter.get_style_defs(".codehilite")

    def render(self, text: str) -> str:
        """Return ``text`` rendered to HTML; blank input renders as ``""``."""
        prepared, languages = _prepare_fences(text)
        if not prepared.strip():
            return ""
        md = Markdown(
            extensions=[*BASE_EXTENSIONS, *self.extensions],
            extension_configs={
                "codehilite": {
                    "css_class": "codehilite",
                    "guess_lang": False,
                    "linenums": False,
                    "pygments_style": self.pygments_style,
                }
            },
        )
        # Indented blocks get their own class so only fenced blocks are tagged.
        indented = md.treeprocessors[HILITE_PROCESSOR]
        indented.config = {**indented.config, "css_class": INDENTED_CSS_CLASS}
        return _tag_languages(md.convert(prepared), languages)


def _prepare_fences(text: str) -> tuple[str, list[str]]:
    """Normalise fence lines and collect each fenced block's language.

    Opening fences lose their indentation (so fences nested in list items are
    still recognised) and any info string beyond the language token.
    """
    languages: list[str] = []
    lines: list[str] = []
    open_fence: str | None = None
    for line in text.splitlines():
        match = FENCE_LINE.match(line)
        if match is None:
            lines.append(line)
            continue
        fence = match.group("fence")
        info = match.group("info").strip()
        if open_fence is None:
            token = FENCE_LANGUAGE.match(info)
            language = token.group(0) if token else ""
            languages.append(language or DEFAULT_LANGUAGE)
            lines.append(f"{fence}{language}")
            open_fence = fence
        elif not info and fence[0] == open_fence[0] and len(fence) >= len(open_fence):
            lines.append(fence)
            open_fence = None
        else:
            lines.append(line)
    return "\n".join(lines) + "\n", languages


def _tag_languages(html: str, languages: list[str]) -> str:
    """Add ``data-language`` to the first ``len(languages)`` highlighted blocks."""
    if not languages:
        return html
    remaining = iter(languages)

    def _tag(_match: re.Match[str]) -> str:
        language = escape(next(remaining, DEFAULT_LANGUAGE), quote=True)
        return f'<div class="codehilite" data-language="{language}">'

    return re.sub(re.escape(HIGHLIGHT_OPEN), _tag, html, count=len(languages))


__all__ = ["PageRenderer"]
