"""Per-request context shared by the dispatcher and the template renderer."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_site._constants import LOCAL_VERSION

if typ.TYPE_CHECKING:
    from docs_site.config import SiteConfig
    from docs_site.content import ContentSource

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, frozen=True)
class RequestContext:
    """Values every template of one request can read.

    Attributes
    ----------
    path : str
        Raw request URI (path plus query string) of the request.
    config : SiteConfig
        Site configuration the request is served with.
    versions : dict[str, str]
        Known versions, key -> label, including ``local`` in debug mode.
    """

    path: str
    config: SiteConfig
    versions: dict[str, str]

    def template_globals(self) -> dict[str, typ.Any]:
        """Return the values exposed to every rendered template."""
        return {"config": self.config, "versions": self.versions}


def build_request_context(
    path: str, config: SiteConfig, content: ContentSource
) -> RequestContext:
    """Fetch the versions list and bundle it with the site configuration.

    Runs once per request before dispatch. In debug mode a ``local`` entry is
    added so local builds show up in the version switcher.
    """
    versions = content.getter().get_versions()
    if config.debug:
        versions[LOCAL_VERSION] = LOCAL_VERSION
    logger.debug("Request %s sees versions: %s", path, ", ".join(versions))
    return RequestContext(path=path, config=config, versions=versions)


__all__ = ["RequestContext", "build_request_context"]
