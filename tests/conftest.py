"""Shared fixtures for the docs site test suite.

The fixtures build a small versioned content tree under ``tmp_path`` so every
test reads real files through the same code paths the server uses:

* ``3.0`` is the default version with a grouped menu, a cheatsheet, a class
  reference, and pages that link to each other;
* ``2.2`` is an older version with a flat menu and a single page.

Usage
-----
Request ``site_config`` for a :class:`~docs_site.config.SiteConfig` rooted in
the tree, ``content`` for a :class:`~docs_site.content.ContentSource`, or
``client`` for a Flask test client. Pass ``debug=True`` through
``make_config`` when a test needs debug behaviour.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from docs_site.config import SiteConfig, build_site_config
from docs_site.content import ContentSource
from docs_site.web import create_app

if typ.TYPE_CHECKING:
    from flask import Flask
    from flask.testing import FlaskClient

MENU_30 = """\
Getting started:
    _slug: getting-started
    Installation: getting-started/installation
    Configuration: getting-started/configuration
Extensions:
    Hooks: extensions/hooks
Cheatsheet: cheatsheet
Class reference: class-reference
"""

MENU_22 = """\
Introduction: introduction
"""

PAGES_30 = {
    "getting-started/index.md": (
        "# Getting Started\n\nRead [installation](installation.md) first.\n"
    ),
    "getting-started/installation.md": (
        "---\ntitle: Installing the toolkit\n---\n"
        "Install it, then continue with [configuration](./configuration.md#files).\n"
    ),
    "getting-started/configuration.md": (
        "# Configuration\n\n```python\nsettings = {'debug': False}\n```\n"
    ),
    "extensions/hooks.md": (
        "# Hooks\n\nSee [setup](../getting-started/installation.md).\n"
    ),
    "index.md": "# Welcome\n\nStart with the getting started guide.\n",
}

CHEATSHEET_30 = """\
- title: Console
  items:
    - code: bin/console cache:clear
      description: Clear the cache
"""

CLASS_REFERENCE_30 = """\
- name: Kernel
  namespace: App
  description: Boots the application
"""


def write_tree(root: Path) -> Path:
    """Write the sample content tree under ``root`` and return ``root``."""
    v30 = root / "3.0"
    for relative, text in PAGES_30.items():
        path = v30 / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (v30 / "menu_docs.yml").write_text(MENU_30, encoding="utf-8")
    (v30 / "cheatsheet.yml").write_text(CHEATSHEET_30, encoding="utf-8")
    (v30 / "class_reference.yml").write_text(CLASS_REFERENCE_30, encoding="utf-8")

    v22 = root / "2.2"
    v22.mkdir(parents=True)
    (v22 / "menu_docs.yml").write_text(MENU_22, encoding="utf-8")
    (v22 / "introduction.md").write_text(
        "# Introduction\n\nThe 2.2 series.\n", encoding="utf-8"
    )
    return root


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Return a populated content directory."""
    return write_tree(tmp_path / "source")


@pytest.fixture
def make_config(source_dir: Path) -> typ.Callable[..., SiteConfig]:
    """Return a factory that builds configs over ``source_dir``."""

    def _make(**overrides: object) -> SiteConfig:
        raw: dict[str, object] = {
            "default_version": "3.0",
            "start_page": "/3.0/getting-started",
            "source_dir": str(source_dir),
            "versions": {"3.0": "3.0", "2.2": "2.2"},
        }
        raw.update(overrides)
        return build_site_config(raw, base_dir=source_dir.parent)

    return _make


@pytest.fixture
def site_config(make_config: typ.Callable[..., SiteConfig]) -> SiteConfig:
    """Return the non-debug site configuration."""
    return make_config()


@pytest.fixture
def content(site_config: SiteConfig) -> ContentSource:
    """Return a content source over the sample tree."""
    return ContentSource(site_config)


@pytest.fixture
def app(site_config: SiteConfig) -> Flask:
    """Return the Flask application for the non-debug configuration."""
    return create_app(site_config)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Return a test client for ``app``."""
    return app.test_client()
