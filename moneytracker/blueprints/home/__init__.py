"""Home blueprint package."""

from __future__ import annotations

from flask import Blueprint, Flask

from .icons import IconSet, default_icon_set

bp = Blueprint(
    "home",
    __name__,
    template_folder="../../templates",
)


def init_app(app: Flask, icons: IconSet | None = None) -> None:
    """Attach the icon set used by the landing page to the Flask application."""

    state = app.extensions.setdefault("home", {})
    state["icons"] = icons or default_icon_set()


from . import routes  # noqa: E402,F401 - ensure routes register

__all__ = ["bp", "init_app"]
