"""Typed dataclasses describing the docs site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_site._constants import DEFAULT_INTERNAL_PREFIXES, MENU_RESOURCE


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved settings shared by every request the site serves.

    Attributes
    ----------
    default_version : str
        Version token used for redirects and for the 404 page navigation.
    start_page : str
        URL the home route redirects to, used verbatim.
    source_dir : Path
        Root directory holding one sub-directory of content per version.
    debug : bool
        Enables the synthetic ``local`` version and disables fallback
        handling so framework error pages show through.
    versions : dict[str, str]
        Optional explicit mapping of version key to display label. When empty
        the versions are discovered from ``source_dir``.
    menu_file : str
        Name of the per-version menu resource.
    internal_prefixes : tuple[str, ...]
        First path segments that belong to framework tooling; errors under
        them always pass through.
    site_name : str
        Product name shown in page titles.
    pygments_style : str
        Pygments style used to highlight code blocks in page sources.
    """

    default_version: str
    start_page: str
    source_dir: Path
    debug: bool = False
    versions: dict[str, str] = dc.field(default_factory=dict)
    menu_file: str = MENU_RESOURCE
    internal_prefixes: tuple[str, ...] = DEFAULT_INTERNAL_PREFIXES
    site_name: str = "Documentation"
    pygments_style: str = "monokai"

    def with_debug(self, debug: bool | None) -> SiteConfig:
        """Return a copy with ``debug`` overridden, or ``self`` for ``None``."""
        if debug is None or debug == self.debug:
            return self
        return dc.replace(self, debug=debug)


__all__ = ["SiteConfig", "SiteConfigError"]
