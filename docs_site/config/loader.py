"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_internal_prefixes,
    _build_versions,
    _coerce_bool,
    _default_start_page,
    _lookup,
    _optional_str,
    _resolve_source_dir,
)
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yml``). A relative ``source_dir`` inside the file is
        resolved against the file's directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``default_version`` is missing or a field has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yml"))  # doctest: +SKIP
    >>> config.default_version  # doctest: +SKIP
    '3.0'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_site_config(raw, base_dir=path.resolve().parent)


def build_site_config(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path | None = None
) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping."""
    default_version = _optional_str(_lookup(raw, "default_version"))
    if not default_version:
        msg = "Site configuration is missing 'default_version'."
        raise SiteConfigError(msg)

    start_page = _optional_str(_lookup(raw, "start_page"))
    if not start_page:
        start_page = _default_start_page(default_version)

    defaults = SiteConfig(
        default_version=default_version,
        start_page=start_page,
        source_dir=Path("source"),
    )
    return SiteConfig(
        default_version=default_version,
        start_page=start_page,
        source_dir=_resolve_source_dir(
            _lookup(raw, "source_dir"), base_dir or Path.cwd()
        ),
        debug=_coerce_bool(_lookup(raw, "debug"), key="debug"),
        versions=_build_versions(_lookup(raw, "versions")),
        menu_file=_optional_str(_lookup(raw, "menu_file")) or defaults.menu_file,
        internal_prefixes=_build_internal_prefixes(_lookup(raw, "internal_prefixes")),
        site_name=_optional_str(_lookup(raw, "site_name")) or defaults.site_name,
        pygments_style=(
            _optional_str(_lookup(raw, "pygments_style")) or defaults.pygments_style
        ),
    )


__all__ = ["build_site_config", "load_site_config"]
