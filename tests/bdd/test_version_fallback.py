"""Behaviour tests for the version redirect and 404 fallback.

The scenarios in ``version_fallback.feature`` request unversioned paths,
missing pages under an older version, and the same paths in debug mode, then
check the redirect target or the rendered 404 page.

Usage
-----
Run ``pytest tests/bdd/test_version_fallback.py -v``. The shared steps and the
``scenario_state`` fixture live in ``tests/bdd/conftest.py``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from pytest_bdd import parsers, scenarios, then

if typ.TYPE_CHECKING:
    from werkzeug.test import TestResponse

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "version_fallback.feature"
)
scenarios(FEATURE_FILE)


def _response(scenario_state: dict[str, object]) -> TestResponse:
    return typ.cast("TestResponse", scenario_state["response"])


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return BeautifulSoup(_response(scenario_state).get_data(as_text=True), "html.parser")


@then(parsers.parse('the response redirects to "{location}"'))
def then_redirects(location: str, scenario_state: dict[str, object]) -> None:
    """Verify the response is a 302 to ``location``."""
    response = _response(scenario_state)
    assert response.status_code == 302, "expected a redirect"
    assert response.headers["Location"] == location


@then("the response is not a redirect")
def then_not_redirect(scenario_state: dict[str, object]) -> None:
    """Verify no Location header was sent."""
    assert "Location" not in _response(scenario_state).headers


@then(parsers.parse('the "{label}" menu entry is highlighted'))
def then_menu_entry_highlighted(label: str, scenario_state: dict[str, object]) -> None:
    """Verify the active menu entry carries ``label``."""
    active = _soup(scenario_state).select_one("nav.docs-menu li.is-active > a")
    assert active is not None, "expected an active menu entry"
    assert active.get_text(strip=True) == label


@then(parsers.parse('the page heading reads "{heading}"'))
def then_heading(heading: str, scenario_state: dict[str, object]) -> None:
    """Verify the first heading of the page body."""
    node = _soup(scenario_state).select_one("article.docs-page h1")
    assert node is not None, "expected a heading in the page body"
    assert node.get_text(strip=True) == heading


@then(parsers.parse('the navigation comes from version "{version}"'))
def then_navigation_version(version: str, scenario_state: dict[str, object]) -> None:
    """Verify every menu link points into ``version``."""
    soup = _soup(scenario_state)
    hrefs = [a.get("href") for a in soup.select("nav.docs-menu a")]
    assert hrefs, "expected menu links on the 404 page"
    assert all(str(href).startswith(f"/{version}/") for href in hrefs), (
        f"expected every menu link under /{version}/, got {hrefs}"
    )
