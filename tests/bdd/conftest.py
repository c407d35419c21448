"""Shared pytest-bdd steps for the docs site scenarios.

The steps build a Flask app over the sample content tree from
``tests/conftest.py`` and keep the response in ``scenario_state`` so each
feature module only defines the assertions specific to it.
"""

from __future__ import annotations

import typing as typ

import pytest
from pytest_bdd import given, parsers, then, when

from docs_site.web import create_app

if typ.TYPE_CHECKING:
    from werkzeug.test import TestResponse

    from docs_site.config import SiteConfig


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a docs site with versions "{first}" and "{second}"'))
def given_docs_site(first: str, second: str, scenario_state: dict[str, object]) -> None:
    """Record the versions the site advertises; the first is the default."""
    scenario_state["overrides"] = {
        "default_version": first,
        "start_page": f"/{first}/getting-started",
        "versions": {first: first, second: second},
    }


@given("debug mode is enabled")
def given_debug_mode(scenario_state: dict[str, object]) -> None:
    """Enable debug mode for the site under test."""
    overrides = typ.cast("dict[str, object]", scenario_state["overrides"])
    overrides["debug"] = True


@when(parsers.parse('I request "{path}"'))
def when_request(
    path: str,
    scenario_state: dict[str, object],
    make_config: typ.Callable[..., SiteConfig],
) -> None:
    """Issue a GET request against a freshly built app."""
    overrides = typ.cast("dict[str, object]", scenario_state["overrides"])
    app = create_app(make_config(**overrides))
    scenario_state["response"] = app.test_client().get(path)


@then(parsers.parse("the response status is {status:d}"))
def then_status(status: int, scenario_state: dict[str, object]) -> None:
    """Verify the response status code."""
    response = typ.cast("TestResponse", scenario_state["response"])
    assert response.status_code == status, (
        f"expected status {status}, got {response.status_code}"
    )
