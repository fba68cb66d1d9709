"""Tests for the static export CLI command."""

from __future__ import annotations

import click
import pytest

from moneytracker.cli import export_static_site


def test_export_writes_index_html(app, tmp_path):
    runner = app.test_cli_runner()
    output = tmp_path / "site"

    result = runner.invoke(args=["moneytracker-export", "--output", str(output)])

    assert result.exit_code == 0, result.output
    index = output / "index.html"
    assert index.exists()
    assert f"Export written: {index}" in result.output

    served = app.test_client().get("/").data
    assert index.read_bytes() == served


def test_export_defaults_to_configured_dir(app, tmp_path):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["moneytracker-export"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "index.html").exists()


def test_export_fails_on_bad_render(app, tmp_path):
    @app.before_request
    def _break():
        return "unavailable", 503

    with pytest.raises(click.ClickException, match="503"):
        export_static_site(app, tmp_path / "site")
    assert not (tmp_path / "site").exists()
