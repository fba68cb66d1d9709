"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "MoneyTracker"
    SITE_TITLE = "MoneyTracker - 家計簿アプリ"
    SITE_DESCRIPTION = "収支を記録して家計を管理しよう"
    SITE_LANG = "ja"
    DEFAULT_TAILWIND_CDN = "https://cdn.tailwindcss.com"
    EXPORT_FILENAME = "index.html"

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("MONEYTRACKER_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("MONEYTRACKER_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.EXPORT_DIR = Path(os.getenv("MONEYTRACKER_EXPORT_DIR", "out")).expanduser()
        self.TAILWIND_CDN = os.getenv("MONEYTRACKER_TAILWIND_CDN", self.DEFAULT_TAILWIND_CDN)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("MONEYTRACKER_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("MONEYTRACKER_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration used by the test suite and the static export."""

    DEBUG = False
    TESTING = True
    __test__ = False
