"""Cyclopts CLI entrypoint for serving and checking the versioned docs site.

The ``docs`` console script defined here serves the site, lists the versions
the content store knows about, and checks every version's menu for entries
whose page is missing. Typical usage is ``docs serve --debug`` while writing
docs locally and ``docs check`` in CI before publishing new content.

Examples
--------
Serve the site from the default configuration:

>>> from docs_site.cli import main
>>> main()  # doctest: +SKIP

Check menus against a custom configuration file:

>>> from docs_site.cli import app
>>> app(["check", "--config", "config/site.yml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import ContentSource
from .content.menu import iter_slugs, page_href
from .routing import PageRoute, parse_route
from .web import create_app, run_server

DEFAULT_CONFIG = Path("config/site.yml")

app = App(name="docs", config=cyclopts.config.Env("DOCS_", command=False))  # type: ignore[unknown-argument]


@app.command(help="Serve the documentation site over HTTP.")
def serve(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    host: typ.Annotated[str, Parameter(help="Interface to bind")] = "127.0.0.1",
    port: typ.Annotated[int, Parameter(help="Port to listen on")] = 8000,
    debug: typ.Annotated[
        bool | None,
        Parameter(help="Override the config's debug flag"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level (DEBUG, INFO, WARNING, ...)")
    ] = "INFO",
) -> None:
    """Serve the docs site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yml`` configuration file (overridable via
        ``DOCS_CONFIG``).
    host : str, optional
        Interface to bind; defaults to ``127.0.0.1``.
    port : int, optional
        Port to listen on; defaults to ``8000``.
    debug : bool or None, optional
        When set, overrides the ``debug`` flag of the configuration file.
        Debug mode uses Flask's development server, otherwise Waitress.
    log_level : str, optional
        Root logging level passed to :func:`logging.basicConfig`.

    Returns
    -------
    None
        Blocks until the server stops.
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    site_config = load_site_config(config).with_debug(debug)
    flask_app = create_app(site_config)
    run_server(flask_app, host=host, port=port, debug=site_config.debug)


@app.command(help="List the documentation versions the content store knows.")
def versions(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print ``key: label`` for every known version, marking the default."""
    site_config = load_site_config(config)
    known = ContentSource(site_config).getter().get_versions()
    for key, label in known.items():
        marker = " (default)" if key == site_config.default_version else ""
        print(f"{key}: {label}{marker}")


@app.command(help="Report menu entries that point at missing pages.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Check every version's menu against the pages on disk.

    Returns
    -------
    None
        Prints one line per missing page and exits with status 1 when any
        are missing.
    """
    site_config = load_site_config(config)
    source = ContentSource(site_config)
    missing: list[str] = []
    for version in source.getter().get_versions():
        menu = source.getter(version).get_menu(site_config.menu_file)
        for slug in iter_slugs(menu):
            if not isinstance(parse_route(page_href(version, slug)), PageRoute):
                continue
            if not source.getter(version, slug).source():
                missing.append(f"{version}/{slug}")
    for entry in missing:
        print(f"missing {entry}")
    if missing:
        sys.exit(1)
    print("all menu entries resolve")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
