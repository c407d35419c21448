"""Decide what to show when a request fails.

The fallback resolver runs for every error raised while dispatching, and for
pages whose lookup came back empty. It picks one of three outcomes:

* :class:`Passthrough` for framework tooling routes, in debug mode, and for
  non-404 errors under a valid version prefix;
* :class:`Redirect` to the same URI prefixed with the default version when
  the first path segment is not a version, which is how ``/cheatsheet``
  becomes ``/3.0/cheatsheet``;
* :class:`Rendered` 404 page, navigated with the *default* version's menu,
  when a 404 happens under a valid version prefix.

Example
-------
>>> resolver = FallbackResolver(config, content, renderer)  # doctest: +SKIP
>>> resolver.resolve("/cheatsheet", 404)  # doctest: +SKIP
Redirect(location='/3.0/cheatsheet')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from http import HTTPStatus

from docs_site._constants import NOT_FOUND_SOURCE, NOT_FOUND_TITLE
from docs_site.context import RequestContext
from docs_site.routing import first_segment
from docs_site.versions import VersionResolver

if typ.TYPE_CHECKING:
    from docs_site.config import SiteConfig
    from docs_site.content import ContentSource
    from docs_site.rendering import TemplateRenderer

logger = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = "index.jinja"


@dc.dataclass(slots=True, frozen=True)
class Passthrough:
    """Leave the error to the framework's default handling."""


@dc.dataclass(slots=True, frozen=True)
class Redirect:
    """Send the client to ``location`` with a 302."""

    location: str


@dc.dataclass(slots=True, frozen=True)
class Rendered:
    """Respond with an already rendered body."""

    body: str
    status: int = HTTPStatus.NOT_FOUND


FallbackOutcome = Passthrough | Redirect | Rendered


class FallbackResolver:
    """Choose between passthrough, version redirect, and the 404 page."""

    def __init__(
        self,
        config: SiteConfig,
        content: ContentSource,
        renderer: TemplateRenderer,
    ) -> None:
        self.config = config
        self.content = content
        self.renderer = renderer

    def resolve(
        self,
        request_uri: str,
        code: int,
        context: RequestContext | None = None,
    ) -> FallbackOutcome:
        """Return the outcome for an error with status ``code`` on ``request_uri``.

        Parameters
        ----------
        request_uri : str
            Path of the failed request including its query string.
        code : int
            HTTP status the error would produce.
        context : RequestContext, optional
            Context built by the request hook; rebuilt for rendering when the
            hook never ran for this request.

        Returns
        -------
        FallbackOutcome
            The decision; only :class:`Rendered` carries a body.

        Notes
        -----
        Errors raised while fetching the versions list propagate: an
        unreadable content store is a configuration problem, not something
        this resolver can recover from.
        """
        segment = first_segment(request_uri)
        if segment in self.config.internal_prefixes or self.config.debug:
            return Passthrough()

        default_version = self.config.default_version
        getter = self.content.getter(default_version)
        resolver = VersionResolver(
            getter.get_versions(), default_version=default_version
        )

        if not resolver.is_known(segment):
            location = resolver.versioned_path(request_uri)
            logger.info("Redirecting unversioned %s to %s", request_uri, location)
            return Redirect(location)

        if code == HTTPStatus.NOT_FOUND:
            logger.info("Rendering 404 page for %s", request_uri)
            view_model = {
                "title": NOT_FOUND_TITLE,
                "source": NOT_FOUND_SOURCE,
                "menu": getter.get_menu(self.config.menu_file),
                "submenu": [],
                "current": None,
                "version": default_version,
            }
            if context is None:
                context = RequestContext(
                    path=request_uri,
                    config=self.config,
                    versions=getter.get_versions(),
                )
            body = self.renderer.render(NOT_FOUND_TEMPLATE, context, view_model)
            return Rendered(body)

        return Passthrough()


__all__ = [
    "FallbackOutcome",
    "FallbackResolver",
    "Passthrough",
    "Redirect",
    "Rendered",
]
