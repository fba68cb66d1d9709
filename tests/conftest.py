"""Pytest configuration and shared fixtures for MoneyTracker tests."""

from __future__ import annotations

import re

import pytest

from moneytracker import create_app


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """Keep log files and exports out of the working tree."""

    monkeypatch.setenv("MONEYTRACKER_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("MONEYTRACKER_EXPORT_DIR", str(tmp_path / "out"))
    monkeypatch.delenv("MONEYTRACKER_DEV_MODE", raising=False)
    monkeypatch.delenv("MONEYTRACKER_SECRET_KEY", raising=False)
    monkeypatch.delenv("MONEYTRACKER_TAILWIND_CDN", raising=False)


@pytest.fixture
def app():
    return create_app("testing")


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def landing_html(client) -> str:
    response = client.get("/")
    assert response.status_code == 200
    return response.data.decode("utf-8")


def region(html: str, name: str) -> str:
    """Return the markup of the element tagged ``data-region="name"``."""

    match = re.search(
        rf'<(header|section|footer)[^>]*data-region="{name}"[^>]*>(.*?)</\1>',
        html,
        re.DOTALL,
    )
    assert match is not None, f"region {name!r} not rendered"
    return match.group(2)


def main_content(html: str) -> str:
    match = re.search(r"<main>(.*)</main>", html, re.DOTALL)
    assert match is not None
    return match.group(1)
