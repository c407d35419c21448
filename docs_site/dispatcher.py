"""Turn parsed routes into responses backed by the content store.

:class:`RouteDispatcher` matches on the route variant, queries a content
getter bound to the route's version (and slug), assembles the view-model the
route's template expects, and renders it. A page without content is not
raised as an exception: the dispatcher hands the :class:`NotFound` lookup
back to its caller, which decides between a redirect and the 404 page.
"""

from __future__ import annotations

import json
import logging
import typing as typ

from flask import Response, redirect

from docs_site._constants import (
    CHEATSHEET_SLUG,
    TREE_CONTENT_TYPE,
    TREE_STATUS,
)
from docs_site.content import Found, NotFound
from docs_site.routing import (
    CheatsheetRoute,
    ClassReferenceRoute,
    HomeRoute,
    PageRoute,
    Route,
    TreeRoute,
)

if typ.TYPE_CHECKING:
    from docs_site.config import SiteConfig
    from docs_site.content import ContentSource
    from docs_site.context import RequestContext
    from docs_site.rendering import TemplateRenderer

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "index.jinja"
CLASS_REFERENCE_TEMPLATE = "classreference.jinja"
CHEATSHEET_TEMPLATE = "cheatsheet.jinja"

DispatchResult = Response | str | NotFound


class RouteDispatcher:
    """Build the response for each of the five route shapes."""

    def __init__(
        self,
        config: SiteConfig,
        content: ContentSource,
        renderer: TemplateRenderer,
    ) -> None:
        self.config = config
        self.content = content
        self.renderer = renderer

    def dispatch(self, route: Route, context: RequestContext) -> DispatchResult:
        """Return the response for ``route``, or ``NotFound`` for empty pages."""
        match route:
            case HomeRoute():
                return self.home()
            case TreeRoute(version=version):
                return self.tree(version)
            case ClassReferenceRoute(version=version):
                return self.class_reference(version, context)
            case CheatsheetRoute(version=version):
                return self.cheatsheet(version, context)
            case PageRoute(version=version, slug=slug):
                return self.page(version, slug, context)
        msg = f"Unsupported route: {route!r}"
        raise TypeError(msg)

    def home(self) -> Response:
        """Redirect to the configured start page."""
        return redirect(self.config.start_page)

    def tree(self, version: str) -> Response:
        """Return the version's menu tree as JSON for client-side navigation.

        The response keeps its historical 201 status so existing consumers of
        the endpoint see no change.
        """
        getter = self.content.getter(version)
        menu = getter.get_json_menu(self.config.menu_file)
        response = Response(
            json.dumps(menu, indent=4),
            status=TREE_STATUS,
            content_type=TREE_CONTENT_TYPE,
        )
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    def page(self, version: str, slug: str, context: RequestContext) -> str | NotFound:
        """Render a documentation page, or return ``NotFound`` when it is empty."""
        getter = self.content.getter(version, slug)
        match getter.resolve_page():
            case NotFound() as missing:
                return missing
            case Found(page=page):
                view_model = {
                    "title": page.title,
                    "source": page.source,
                    "menu": getter.get_menu(self.config.menu_file),
                    "submenu": getter.get_submenu(),
                    "current": slug,
                    "version": version,
                }
                logger.debug("Rendering page '%s' for version '%s'.", slug, version)
                return self.renderer.render(PAGE_TEMPLATE, context, view_model)
        msg = "Unexpected page lookup result."
        raise TypeError(msg)

    def class_reference(self, version: str, context: RequestContext) -> str:
        """Render the class reference for ``version``."""
        getter = self.content.getter(version)
        view_model = {
            "title": f"{self.config.site_name} Class Reference",
            "menu": getter.get_menu(self.config.menu_file),
            "version": version,
            "classes": getter.get_class_reference(),
            "current": None,
        }
        return self.renderer.render(CLASS_REFERENCE_TEMPLATE, context, view_model)

    def cheatsheet(self, version: str, context: RequestContext) -> str:
        """Render the cheatsheet for ``version``, highlighting its menu entry."""
        getter = self.content.getter(version)
        view_model = {
            "title": f"{self.config.site_name} Cheatsheet",
            "menu": getter.get_menu(self.config.menu_file),
            "version": version,
            "cheatsheet": getter.get_cheatsheet(),
            "current": CHEATSHEET_SLUG,
        }
        return self.renderer.render(CHEATSHEET_TEMPLATE, context, view_model)


__all__ = ["DispatchResult", "RouteDispatcher"]
