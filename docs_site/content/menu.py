r"""Parse per-version menu definitions into navigation trees.

A menu file such as ``menu_docs.yml`` maps labels either to a page slug or to
a nested mapping that forms a group. A group may link to a page of its own
through the reserved ``_slug`` key:

.. code-block:: yaml

    Getting started:
        _slug: getting-started
        Installation: getting-started/installation
        Configuration: getting-started/configuration
    Cheatsheet: cheatsheet

Example
-------
>>> from docs_site.content.menu import build_menu
>>> menu = build_menu({"Intro": "intro", "Guides": {"Setup": "guides/setup"}}, "3.0")
>>> [entry.label for entry in menu]
['Intro', 'Guides']
>>> menu[1].children[0].href
'/3.0/guides/setup'
"""

from __future__ import annotations

import typing as typ

from .models import ContentFormatError, MenuEntry

GROUP_SLUG_KEY = "_slug"


def build_menu(payload: object, version: str) -> list[MenuEntry]:
    """Return the ordered menu tree described by ``payload``.

    Parameters
    ----------
    payload : object
        Parsed YAML document; ``None`` yields an empty menu.
    version : str
        Version the menu belongs to, used to build entry URLs.

    Returns
    -------
    list[MenuEntry]
        Top-level entries in file order.

    Raises
    ------
    ContentFormatError
        If the document (or any group) is not a mapping, or an entry value
        is neither a slug nor a group.
    """
    if payload is None:
        return []
    if not isinstance(payload, typ.Mapping):
        msg = "Menu definition must be a mapping of labels to slugs or groups."
        raise ContentFormatError(msg)
    return _build_entries(payload, version)


def _build_entries(payload: typ.Mapping[str, typ.Any], version: str) -> list[MenuEntry]:
    entries: list[MenuEntry] = []
    for label, value in payload.items():
        if label == GROUP_SLUG_KEY:
            continue
        match value:
            case str() | int() | float():
                slug = _normalize_slug(value)
                entries.append(
                    MenuEntry(label=str(label), slug=slug, href=page_href(version, slug))
                )
            case None:
                entries.append(MenuEntry(label=str(label)))
            case dict():
                group_slug = value.get(GROUP_SLUG_KEY)
                slug = _normalize_slug(group_slug) if group_slug else None
                entries.append(
                    MenuEntry(
                        label=str(label),
                        slug=slug,
                        href=page_href(version, slug) if slug else None,
                        children=_build_entries(value, version),
                    )
                )
            case _:
                msg = f"Menu entry '{label}' must be a slug or a nested group."
                raise ContentFormatError(msg)
    return entries


def _normalize_slug(value: object) -> str:
    return str(value).strip().strip("/")


def page_href(version: str, slug: str) -> str:
    """Return the site URL for ``slug`` within ``version``."""
    return f"/{version}/{slug}"


def find_submenu(menu: list[MenuEntry], slug: str | None) -> list[MenuEntry]:
    """Return the children of the top-level group that contains ``slug``."""
    if not slug:
        return []
    for entry in menu:
        if entry.contains(slug):
            return list(entry.children)
    return []


def find_entry(menu: list[MenuEntry], slug: str) -> MenuEntry | None:
    """Return the first entry, depth-first, that links to ``slug``."""
    for entry in menu:
        if entry.slug == slug:
            return entry
        match = find_entry(entry.children, slug)
        if match is not None:
            return match
    return None


def iter_slugs(menu: list[MenuEntry]) -> typ.Iterator[str]:
    """Yield every slug referenced by the menu, depth-first."""
    for entry in menu:
        if entry.slug:
            yield entry.slug
        yield from iter_slugs(entry.children)


__all__ = [
    "GROUP_SLUG_KEY",
    "build_menu",
    "find_entry",
    "find_submenu",
    "iter_slugs",
    "page_href",
]
