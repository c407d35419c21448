"""Load and validate the docs site configuration YAML.

This subpackage parses the site's ``site.yml`` file, applies defaults, and
produces the :class:`SiteConfig` dataclass that the content store, the
request hooks, and the fallback resolver consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docs_site.config import load_site_config
>>> site = load_site_config(Path("config/site.yml"))  # doctest: +SKIP
>>> site.start_page  # doctest: +SKIP
'/3.0/'
"""

from .loader import build_site_config, load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "build_site_config",
    "load_site_config",
]
