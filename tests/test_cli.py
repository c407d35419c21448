"""Tests for the ``docs`` command-line entry points.

The commands are called as plain functions so the tests exercise their
behaviour without going through argument parsing. ``run_server`` is patched
out so ``serve`` never binds a socket.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_site import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture


@pytest.fixture
def config_path(tmp_path: Path, source_dir: Path) -> Path:
    """Write a ``site.yml`` pointing at the sample content tree."""
    path = tmp_path / "config" / "site.yml"
    path.parent.mkdir()
    path.write_text(
        f"""
default_version: "3.0"
start_page: /3.0/getting-started
source_dir: {source_dir}
versions:
  "3.0": "3.0 (stable)"
  "2.2": "2.2"
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_serve_builds_app_and_runs_server(
    config_path: Path, mocker: MockerFixture
) -> None:
    """``serve`` hands the configured app to the server runner."""
    run_server = mocker.patch("docs_site.cli.run_server")
    mocker.patch("docs_site.cli.logging.basicConfig")

    cli.serve(config=config_path, host="0.0.0.0", port=9000)  # noqa: S104

    run_server.assert_called_once()
    args, kwargs = run_server.call_args
    assert kwargs == {"host": "0.0.0.0", "port": 9000, "debug": False}  # noqa: S104
    app = args[0]
    assert app.test_client().get("/").headers["Location"] == "/3.0/getting-started"


def test_serve_debug_flag_overrides_config(
    config_path: Path, mocker: MockerFixture
) -> None:
    """``--debug`` switches the app and server into debug mode."""
    run_server = mocker.patch("docs_site.cli.run_server")
    mocker.patch("docs_site.cli.logging.basicConfig")

    cli.serve(config=config_path, debug=True)

    args, kwargs = run_server.call_args
    assert kwargs["debug"] is True
    assert args[0].debug is True


def test_versions_lists_keys_and_labels(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``versions`` prints each key with its label and marks the default."""
    cli.versions(config=config_path)

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["3.0: 3.0 (stable) (default)", "2.2: 2.2"]


def test_check_passes_when_every_page_exists(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Menu entries served by dedicated routes are not reported as missing."""
    cli.check(config=config_path)
    assert capsys.readouterr().out.strip() == "all menu entries resolve"


def test_check_reports_missing_pages(
    config_path: Path, source_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``check`` lists missing pages and exits with status 1."""
    (source_dir / "2.2" / "introduction.md").unlink()

    with pytest.raises(SystemExit) as excinfo:
        cli.check(config=config_path)

    assert excinfo.value.code == 1
    assert "missing 2.2/introduction" in capsys.readouterr().out
