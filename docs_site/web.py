"""Flask application wiring for the docs site.

:func:`create_app` builds the application: it registers the catch-all docs
blueprint, the request hook that builds the per-request
:class:`~docs_site.context.RequestContext`, and the error handler that sends
every failure through the :class:`~docs_site.fallback.FallbackResolver`.
:func:`run_server` serves it with Flask's development server in debug mode
and with Waitress otherwise.

Examples
--------
>>> from pathlib import Path
>>> from docs_site.config import load_site_config
>>> from docs_site.web import create_app
>>> app = create_app(load_site_config(Path("config/site.yml")))  # doctest: +SKIP
>>> app.test_client().get("/").status_code  # doctest: +SKIP
302
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from http import HTTPStatus
from pathlib import Path
from urllib.parse import quote

from flask import Blueprint, Flask, Response, abort, current_app, g, redirect, request
from waitress import serve
from werkzeug.exceptions import HTTPException

from docs_site._constants import NOT_FOUND_MESSAGE
from docs_site.config import SiteConfig, load_site_config
from docs_site.content import ContentSource, NotFound
from docs_site.context import RequestContext, build_request_context
from docs_site.dispatcher import RouteDispatcher
from docs_site.fallback import (
    FallbackOutcome,
    FallbackResolver,
    Passthrough,
    Redirect,
    Rendered,
)
from docs_site.rendering import TemplateRenderer
from docs_site.routing import parse_route

logger = logging.getLogger(__name__)

EXTENSION_KEY = "docs_site"
CONFIG_ENV_VAR = "DOCS_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/site.yml")
DEFAULT_THREADS = 4
# RFC 3986 path characters that are kept literal when re-encoding a path.
PATH_SAFE_CHARS = "/:@!$&'()*+,;="

docs_bp = Blueprint("docs", __name__)


@dc.dataclass(slots=True)
class DocsServices:
    """Collaborators shared by every request of one application."""

    config: SiteConfig
    content: ContentSource
    renderer: TemplateRenderer
    dispatcher: RouteDispatcher
    fallback: FallbackResolver


def create_app(
    config: SiteConfig | None = None, *, templates_dir: Path | None = None
) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    config : SiteConfig, optional
        Site configuration. When ``None`` the file named by ``DOCS_CONFIG``
        (default ``config/site.yml``) is loaded, which lets
        ``flask --app docs_site.web run`` work without arguments.
    templates_dir : Path, optional
        Override for the Jinja templates directory.

    Returns
    -------
    Flask
        The configured application.
    """
    if config is None:
        config = load_site_config(Path(os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))

    app = Flask(__name__, static_folder="static", template_folder=None)
    app.debug = config.debug
    logger.info(
        "Creating docs app (default version %s, debug %s).",
        config.default_version,
        config.debug,
    )

    content = ContentSource(config)
    renderer = TemplateRenderer(
        templates_dir=templates_dir, pygments_style=config.pygments_style
    )
    app.extensions[EXTENSION_KEY] = DocsServices(
        config=config,
        content=content,
        renderer=renderer,
        dispatcher=RouteDispatcher(config, content, renderer),
        fallback=FallbackResolver(config, content, renderer),
    )

    app.register_blueprint(docs_bp)
    app.before_request(initialize_request_context)
    app.register_error_handler(Exception, handle_error)
    logger.debug("Registered docs blueprint, request hook, and error handler.")
    return app


def _services() -> DocsServices:
    return typ.cast("DocsServices", current_app.extensions[EXTENSION_KEY])


def _request_uri() -> str:
    """Return the percent-encoded request path with its query string.

    Werkzeug decodes the path, so it is re-encoded here; an encoded ``%3F``
    stays part of the path instead of starting a query string.
    """
    path = quote(request.path, safe=PATH_SAFE_CHARS)
    query = request.query_string.decode("latin-1")
    return f"{path}?{query}" if query else path


def initialize_request_context() -> None:
    """Build the request context once, before any route handler runs."""
    services = _services()
    g.docs_context = build_request_context(
        _request_uri(), services.config, services.content
    )


def _current_context() -> RequestContext | None:
    return g.get("docs_context")


@docs_bp.get("/", defaults={"path": ""})
@docs_bp.get("/<path:path>")
def serve_docs(path: str) -> Response | str:  # noqa: ARG001
    """Parse the request path and dispatch it to the matching route."""
    services = _services()
    context: RequestContext = g.docs_context
    route = parse_route(request.path)
    if route is None:
        logger.debug("No route shape matches %s.", request.path)
        return _not_found(services, context, NOT_FOUND_MESSAGE)

    result = services.dispatcher.dispatch(route, context)
    if isinstance(result, NotFound):
        return _not_found(services, context, result.message)
    return result


def _not_found(
    services: DocsServices, context: RequestContext, message: str
) -> Response:
    """Run the fallback decision for a missing page, aborting on passthrough."""
    outcome = services.fallback.resolve(context.path, HTTPStatus.NOT_FOUND, context)
    response = _outcome_response(outcome)
    if response is None:
        abort(HTTPStatus.NOT_FOUND, description=message)
    return response


def handle_error(error: Exception) -> Response | HTTPException:
    """Send a failed request through the fallback resolver.

    HTTP errors keep their status code; any other exception counts as a 500.
    On passthrough, HTTP errors are returned unchanged and other exceptions
    are re-raised so Flask's own handling (debugger or 500 page) applies.
    """
    services = _services()
    if isinstance(error, HTTPException):
        code = error.code or HTTPStatus.INTERNAL_SERVER_ERROR
    else:
        code = HTTPStatus.INTERNAL_SERVER_ERROR
    outcome = services.fallback.resolve(_request_uri(), code, _current_context())
    response = _outcome_response(outcome)
    if response is not None:
        return response
    if isinstance(error, HTTPException):
        return error
    logger.warning(
        "Passing %s on %s to the framework.", type(error).__name__, _request_uri()
    )
    raise error


def _outcome_response(outcome: FallbackOutcome) -> Response | None:
    """Return the HTTP response for ``outcome``; ``None`` means passthrough."""
    match outcome:
        case Redirect(location=location):
            return redirect(location)
        case Rendered(body=body, status=status):
            return Response(body, status=status, mimetype="text/html")
        case Passthrough():
            return None
    msg = f"Unexpected fallback outcome: {outcome!r}"
    raise TypeError(msg)


def run_server(
    app: Flask, *, host: str = "127.0.0.1", port: int = 8000, debug: bool = False
) -> None:
    """Serve ``app`` with Flask's dev server in debug mode, Waitress otherwise."""
    if debug:
        logger.info("Starting Flask development server on %s:%s (debug).", host, port)
        app.run(host=host, port=port, debug=True)
        return
    logger.info("Starting Waitress on %s:%s.", host, port)
    serve(app, host=host, port=port, threads=DEFAULT_THREADS)


__all__ = [
    "DocsServices",
    "create_app",
    "docs_bp",
    "handle_error",
    "initialize_request_context",
    "run_server",
]
