"""Content store: versions, pages, menus, and reference data sets."""

from .getter import ContentGetter, ContentSource
from .menu import build_menu
from .models import (
    ContentError,
    ContentFormatError,
    Found,
    MenuEntry,
    NotFound,
    Page,
    PageLookup,
    UnknownVersionError,
)
from .renderer import PageRenderer

__all__ = [
    "ContentError",
    "ContentFormatError",
    "ContentGetter",
    "ContentSource",
    "Found",
    "MenuEntry",
    "NotFound",
    "Page",
    "PageLookup",
    "PageRenderer",
    "UnknownVersionError",
    "build_menu",
]
