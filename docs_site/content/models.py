"""Shared dataclasses and errors used by the content store."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from docs_site._constants import NOT_FOUND_MESSAGE


class ContentError(RuntimeError):
    """Raised when documentation content cannot be read."""


class UnknownVersionError(ContentError):
    """Raised when a version has no content directory."""


class ContentFormatError(ContentError):
    """Raised when a YAML data file does not have the expected shape."""


@dc.dataclass(slots=True)
class MenuEntry:
    """A single navigation entry within a version's menu tree.

    Attributes
    ----------
    label : str
        Text shown in the navigation.
    slug : str | None
        Page slug the entry links to; ``None`` for pure groups.
    href : str | None
        Site URL for ``slug`` within the menu's version.
    children : list[MenuEntry]
        Nested entries, in menu order.
    """

    label: str
    slug: str | None = None
    href: str | None = None
    children: list[MenuEntry] = dc.field(default_factory=list)

    def contains(self, slug: str) -> bool:
        """Return True when ``slug`` is this entry or any descendant."""
        if self.slug == slug:
            return True
        return any(child.contains(slug) for child in self.children)

    def to_json(self) -> dict[str, typ.Any]:
        """Return a JSON-serializable mapping for this entry and its children."""
        return {
            "label": self.label,
            "slug": self.slug,
            "href": self.href,
            "children": [child.to_json() for child in self.children],
        }


@dc.dataclass(slots=True)
class Page:
    """A resolved documentation page for one (version, slug) pair."""

    version: str
    slug: str
    title: str
    source: str
    menu_entry: MenuEntry | None = None


@dc.dataclass(slots=True, frozen=True)
class Found:
    """Page lookup result carrying the resolved page."""

    page: Page


@dc.dataclass(slots=True, frozen=True)
class NotFound:
    """Page lookup result for a slug without content."""

    version: str
    slug: str
    message: str = NOT_FOUND_MESSAGE


PageLookup = Found | NotFound


__all__ = [
    "ContentError",
    "ContentFormatError",
    "Found",
    "MenuEntry",
    "NotFound",
    "Page",
    "PageLookup",
    "UnknownVersionError",
]
