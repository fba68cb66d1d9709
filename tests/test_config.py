"""Tests for configuration resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from moneytracker import create_app
from moneytracker.config import BaseConfig, DevConfig, TestConfig, _env_bool


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_env_bool_truthy(monkeypatch, value):
    monkeypatch.setenv("MONEYTRACKER_FLAG", value)
    assert _env_bool("MONEYTRACKER_FLAG") is True


@pytest.mark.parametrize("value", ["0", "false", "off", ""])
def test_env_bool_falsy(monkeypatch, value):
    monkeypatch.setenv("MONEYTRACKER_FLAG", value)
    assert _env_bool("MONEYTRACKER_FLAG", default=True) is False


def test_env_bool_default_when_unset(monkeypatch):
    monkeypatch.delenv("MONEYTRACKER_FLAG", raising=False)
    assert _env_bool("MONEYTRACKER_FLAG", default=True) is True


def test_defaults(tmp_path):
    config = BaseConfig()
    assert config.DEV_MODE is True
    assert config.SECRET_KEY == "replace-me"
    assert config.DATA_DIR == (tmp_path / "instance").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.EXPORT_DIR == Path(tmp_path / "out")
    assert config.TAILWIND_CDN == BaseConfig.DEFAULT_TAILWIND_CDN


def test_non_dev_mode_requires_secret(monkeypatch):
    monkeypatch.setenv("MONEYTRACKER_DEV_MODE", "false")
    with pytest.raises(ValueError, match="MONEYTRACKER_SECRET_KEY"):
        BaseConfig()

    monkeypatch.setenv("MONEYTRACKER_SECRET_KEY", "s3cret")
    assert BaseConfig().SECRET_KEY == "s3cret"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("development", DevConfig),
        ("testing", TestConfig),
        ("TESTING", TestConfig),
        ("unknown", BaseConfig),
        (None, BaseConfig),
    ],
)
def test_create_app_resolves_config(name, expected):
    app = create_app(name)
    assert type(app.config["MONEYTRACKER_CONFIG"]) is expected
    assert app.config["SITE_LANG"] == "ja"
    assert "home" in app.blueprints
    assert "home" in app.extensions


def test_test_config_not_collected_by_pytest():
    assert TestConfig.__test__ is False
