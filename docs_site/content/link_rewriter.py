"""Rewrite relative markdown page links to versioned site URLs."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from .menu import page_href

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

MARKDOWN_SUFFIX = ".md"


def build_link_rewriter(version: str, slug: str | None) -> Extension:
    """Return a VersionedLinkExtension for pages under ``slug``'s directory."""
    base_dir = posixpath.dirname(slug) if slug else ""
    return VersionedLinkExtension(version, base_dir)


class VersionedLinkExtension(Extension):
    """Rewrite links between markdown sources into site URLs.

    Pages link to each other the way they sit on disk (``./setup.md``,
    ``../extensions/intro.md#hooks``). Rendering keeps those links working by
    turning them into ``/<version>/<slug>`` URLs within the version being
    served, so a page never links across versions by accident.
    """

    def __init__(self, version: str, base_dir: str) -> None:
        super().__init__()
        self.version = version
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the versioned-link treeprocessor on the Markdown instance."""
        processor = VersionedLinkTreeprocessor(md, self.version, self.base_dir)
        md.treeprocessors.register(processor, "docs_versioned_links", 15)


class VersionedLinkTreeprocessor(Treeprocessor):
    """Point relative ``.md`` anchors at the versioned page route."""

    def __init__(self, md: Markdown, version: str, base_dir: str) -> None:
        super().__init__(md)
        self.version = version
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self._rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the site URL for a relative markdown link, or None to keep it."""
        if not target or target.startswith(("#", "/")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc:
            return None
        if not parsed.path.endswith(MARKDOWN_SUFFIX):
            return None

        joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
        while joined.startswith("../"):
            joined = joined[3:]
        slug = joined[: -len(MARKDOWN_SUFFIX)]
        if slug in (".", "", "..") or slug.startswith("../"):
            return None

        url = page_href(self.version, slug)
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = [
    "VersionedLinkExtension",
    "VersionedLinkTreeprocessor",
    "build_link_rewriter",
]
