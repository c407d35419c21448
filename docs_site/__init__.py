"""Versioned documentation site.

This package serves product documentation per release: it resolves a
requested version and slug to rendered content, builds navigation menus per
version, and falls back to a version-prefixed redirect or a rendered 404 page
when a version or page is missing.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``create_app``: Flask application factory.

Examples
--------
>>> from docs_site import app
>>> app(["serve", "--debug"])  # doctest: +SKIP
>>> from docs_site import create_app
>>> create_app().test_client().get("/").status_code  # doctest: +SKIP
302
"""

from __future__ import annotations

from .cli import app, main
from .web import create_app

__all__ = ["app", "create_app", "main"]
