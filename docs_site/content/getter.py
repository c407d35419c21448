"""Filesystem content store for versioned documentation.

Content lives under the configured ``source_dir`` with one directory per
version::

    source/
        3.0/
            menu_docs.yml
            class_reference.yml
            cheatsheet.yml
            getting-started.md
            extensions/
                index.md
                hooks.md

:class:`ContentSource` is created once per application and hands out
:class:`ContentGetter` instances bound to a (version, slug) pair for a single
request. Every getter reads from disk; nothing is cached between requests.

Example
-------
>>> from pathlib import Path
>>> from docs_site.config import load_site_config
>>> from docs_site.content import ContentSource
>>> source = ContentSource(load_site_config(Path("site.yml")))  # doctest: +SKIP
>>> getter = source.getter("3.0", "extensions/hooks")  # doctest: +SKIP
>>> getter.get_title()  # doctest: +SKIP
'Hooks'
"""

from __future__ import annotations

import logging
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from docs_site._constants import (
    CHEATSHEET_RESOURCE,
    CLASS_REFERENCE_RESOURCE,
    INDEX_SLUG,
)

from .link_rewriter import build_link_rewriter
from .markdown_parser import MarkdownDocument, parse_document
from .menu import build_menu, find_entry, find_submenu
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

if typ.TYPE_CHECKING:
    from docs_site.config import SiteConfig

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"
_VERSION_PART = re.compile(r"(\d+)")


class ContentSource:
    """Hand out content getters rooted in the configured source directory."""

    def __init__(self, config: SiteConfig) -> None:
        self.config = config

    def getter(
        self, version: str | None = None, slug: str | None = None
    ) -> ContentGetter:
        """Return a getter bound to ``version`` and ``slug`` (both optional)."""
        return ContentGetter(self.config, version=version, slug=slug)


class ContentGetter:
    """Read versions, pages, menus, and data sets for one (version, slug).

    Operations that need a version raise :class:`ValueError` when the getter
    was created without one; :meth:`get_versions` is the only version-less
    query.
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        version: str | None = None,
        slug: str | None = None,
    ) -> None:
        self.config = config
        self.version = version
        self.slug = slug.strip("/") if slug else slug
        self._document: MarkdownDocument | None = None
        self._document_loaded = False
        self._document_path: str | None = None

    def get_versions(self) -> dict[str, str]:
        """Return every known version as a key -> label mapping.

        Uses the ``versions`` block of the site configuration when present,
        otherwise lists the version directories under ``source_dir``, newest
        first.

        Raises
        ------
        ContentError
            If versions must be discovered and ``source_dir`` does not exist.
        """
        if self.config.versions:
            return dict(self.config.versions)
        root = self.config.source_dir
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise ContentError(msg)
        keys = [
            child.name
            for child in root.iterdir()
            if child.is_dir() and not child.name.startswith((".", "_"))
        ]
        keys.sort(key=_version_sort_key, reverse=True)
        return {key: key for key in keys}

    def get_menu(self, name: str | None = None) -> list[MenuEntry]:
        """Return the navigation tree defined by the menu resource ``name``."""
        version = self._require_version()
        payload = self._load_yaml(name or self.config.menu_file)
        return build_menu(payload, version)

    def get_submenu(self) -> list[MenuEntry]:
        """Return the menu group relevant to the bound slug."""
        return find_submenu(self.get_menu(), self.slug)

    def get_json_menu(self, name: str | None = None) -> list[dict[str, typ.Any]]:
        """Return the menu tree as JSON-serializable dictionaries."""
        return [entry.to_json() for entry in self.get_menu(name)]

    def get_title(self) -> str:
        """Return the bound page's title, or an empty string when it is missing."""
        document = self._page_document()
        return document.title if document else ""

    def source(self) -> str:
        """Return the bound page rendered to HTML, or ``""`` when it is missing."""
        document = self._page_document()
        if document is None:
            return ""
        links = build_link_rewriter(self._require_version(), self._document_path)
        renderer = PageRenderer(self.config.pygments_style, extensions=[links])
        return renderer.render(document.body)

    def resolve_page(self) -> PageLookup:
        """Return ``Found(page)`` for content-bearing pages, else ``NotFound``."""
        version = self._require_version()
        slug = self.slug or INDEX_SLUG
        source = self.source()
        if not source:
            logger.debug("No content for page '%s' in version '%s'.", slug, version)
            return NotFound(version=version, slug=slug)
        return Found(
            Page(
                version=version,
                slug=slug,
                title=self.get_title(),
                source=source,
                menu_entry=find_entry(self.get_menu(), slug),
            )
        )

    def get_class_reference(self) -> list[typ.Any] | dict[str, typ.Any]:
        """Return the class reference data set for the bound version."""
        return self._load_data_set(CLASS_REFERENCE_RESOURCE)

    def get_cheatsheet(self) -> list[typ.Any] | dict[str, typ.Any]:
        """Return the cheatsheet data set for the bound version."""
        return self._load_data_set(CHEATSHEET_RESOURCE)

    def version_dir(self) -> Path:
        """Return the content directory of the bound version.

        Raises
        ------
        UnknownVersionError
            If the version token is not a plain directory name or the
            directory does not exist.
        """
        version = self._require_version()
        if version in (".", "..") or "/" in version or "\\" in version:
            msg = f"'{version}' is not a valid version token."
            raise UnknownVersionError(msg)
        path = self.config.source_dir / version
        if not path.is_dir():
            msg = f"No content directory for version '{version}'."
            raise UnknownVersionError(msg)
        return path

    def _require_version(self) -> str:
        if not self.version:
            msg = "This operation needs a getter bound to a version."
            raise ValueError(msg)
        return self.version

    def _page_path(self) -> Path | None:
        """Return the markdown file for the bound slug, if one exists."""
        try:
            root = self.version_dir().resolve()
        except UnknownVersionError as exc:
            logger.debug("Page lookup skipped: %s", exc)
            return None
        slug = self.slug or INDEX_SLUG
        candidates = (
            root / f"{slug}{PAGE_SUFFIX}",
            root / slug / f"{INDEX_SLUG}{PAGE_SUFFIX}",
        )
        for candidate in candidates:
            try:
                resolved = candidate.resolve()
            except (OSError, ValueError) as exc:
                logger.debug("Unusable slug '%s': %s", slug, exc)
                return None
            if not resolved.is_relative_to(root):
                logger.warning(
                    "Rejected slug '%s' outside version '%s'.", slug, self.version
                )
                return None
            if resolved.is_file():
                return resolved
        return None

    def _page_document(self) -> MarkdownDocument | None:
        if not self._document_loaded:
            path = self._page_path()
            if path is not None:
                text = path.read_text(encoding="utf-8")
                self._document = parse_document(text, slug=self.slug or INDEX_SLUG)
                root = self.version_dir().resolve()
                self._document_path = path.relative_to(root).with_suffix("").as_posix()
            self._document_loaded = True
        return self._document

    def _load_yaml(self, name: str) -> object:
        """Parse the YAML resource ``name`` of the bound version.

        Returns ``None`` when the file does not exist.
        """
        path = self.version_dir() / name
        if not path.is_file():
            logger.debug("Resource '%s' missing for version '%s'.", name, self.version)
            return None
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return loader.load(handle)
        except YAMLError as exc:
            msg = f"Could not parse '{path}': {exc}"
            raise ContentFormatError(msg) from exc

    def _load_data_set(self, name: str) -> list[typ.Any] | dict[str, typ.Any]:
        payload = self._load_yaml(name)
        match payload:
            case None:
                return []
            case list() | dict():
                return payload
            case _:
                msg = f"'{name}' must contain a list or a mapping."
                raise ContentFormatError(msg)


def _version_sort_key(token: str) -> tuple[tuple[int, int | str], ...]:
    """Order tokens like ``2.10`` after ``2.9`` by comparing numeric parts."""
    parts = (part for part in _VERSION_PART.split(token) if part)
    return tuple((0, int(part)) if part.isdigit() else (1, part) for part in parts)


__all__ = ["ContentGetter", "ContentSource"]
