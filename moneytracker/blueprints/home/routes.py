"""Home routes."""

from __future__ import annotations

from flask import current_app, render_template

from . import bp
from .content import page_copy
from .icons import DOT_PATTERN_URI, IconSet, default_icon_set
from .layout import layout_classes


def _resolve_icon_set() -> IconSet:
    state = current_app.extensions.get("home", {})
    icons = state.get("icons")
    if icons is not None:
        return icons
    return default_icon_set()


def render_landing_page() -> str:
    """Render the landing page document from the fixed copy and layout tables.

    Takes no input and touches nothing outside the template engine, so two
    calls under the same application always return identical markup.
    """

    icons = _resolve_icon_set()
    return render_template(
        "home/index.html",
        icon=icons.render,
        layout=layout_classes(),
        dot_pattern=DOT_PATTERN_URI,
        **page_copy(),
    )


@bp.get("/")
def landing_page():
    """Render the MoneyTracker landing page."""

    return render_landing_page()
