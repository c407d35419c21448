"""Parse request paths into the route shapes the site serves.

Every request path is parsed once into one of five route variants. The
dispatcher matches on the variant, and the fallback resolver reuses
:func:`first_segment` so both read the version prefix the same way.

Examples
--------
>>> from docs_site.routing import parse_route
>>> parse_route("/")
HomeRoute()
>>> parse_route("/tree/3.0.json")
TreeRoute(version='3.0')
>>> parse_route("/3.0/extensions/hooks")
PageRoute(version='3.0', slug='extensions/hooks')
>>> parse_route("/cheatsheet") is None
True
"""

from __future__ import annotations

import dataclasses as dc
from urllib.parse import unquote

from docs_site._constants import CHEATSHEET_SLUG, INDEX_SLUG

TREE_SEGMENT = "tree"
TREE_SUFFIX = ".json"
TREE_FILENAME = f"{TREE_SEGMENT}{TREE_SUFFIX}"
CLASS_REFERENCE_SEGMENT = "class-reference"


@dc.dataclass(slots=True, frozen=True)
class HomeRoute:
    """``/``: redirect to the start page."""


@dc.dataclass(slots=True, frozen=True)
class TreeRoute:
    """``/tree/{version}.json``: the menu tree as JSON."""

    version: str


@dc.dataclass(slots=True, frozen=True)
class ClassReferenceRoute:
    """``/{version}/class-reference``."""

    version: str


@dc.dataclass(slots=True, frozen=True)
class CheatsheetRoute:
    """``/{version}/cheatsheet``."""

    version: str


@dc.dataclass(slots=True, frozen=True)
class PageRoute:
    """``/{version}/{slug}``; the slug may contain ``/``."""

    version: str
    slug: str


Route = HomeRoute | TreeRoute | ClassReferenceRoute | CheatsheetRoute | PageRoute


def first_segment(request_uri: str) -> str:
    """Return the decoded first path segment of a percent-encoded request URI.

    Only a literal ``?`` starts the query string; an encoded ``%3F`` belongs
    to the path.
    """
    path = request_uri.split("?", 1)[0]
    return unquote(path.lstrip("/").split("/", 1)[0])


def parse_route(path: str) -> Route | None:
    """Return the route variant for a decoded ``path``, or None if none fits.

    ``path`` carries no query string, so every character of it, ``?``
    included, is part of the route.

    A bare version with a trailing slash (``/3.0/``) maps to the version's
    ``index`` page. Anything else that does not fit a shape, including a
    single segment such as ``/cheatsheet``, returns ``None``.
    """
    if path in ("", "/"):
        return HomeRoute()

    head, sep, rest = path.lstrip("/").partition("/")
    if not head or not sep:
        return None

    if head == TREE_SEGMENT and rest.endswith(TREE_SUFFIX) and "/" not in rest:
        version = rest[: -len(TREE_SUFFIX)]
        if version:
            return TreeRoute(version)

    match rest.rstrip("/"):
        case "":
            return PageRoute(head, INDEX_SLUG)
        case str() as name if name == TREE_FILENAME:
            return TreeRoute(head)
        case str() as name if name == CLASS_REFERENCE_SEGMENT:
            return ClassReferenceRoute(head)
        case str() as name if name == CHEATSHEET_SLUG:
            return CheatsheetRoute(head)
        case slug:
            return PageRoute(head, slug)


__all__ = [
    "CheatsheetRoute",
    "ClassReferenceRoute",
    "HomeRoute",
    "PageRoute",
    "Route",
    "TreeRoute",
    "first_segment",
    "parse_route",
]
