"""Inline SVG icon sets used by the landing page templates."""

from __future__ import annotations

from typing import Mapping, Protocol

from markupsafe import Markup

# Heroicons v2, 24/outline.
HEROICONS_OUTLINE: dict[str, str] = {
    "chart-bar": (
        "M3 13.125C3 12.504 3.504 12 4.125 12h2.25c.621 0 1.125.504 1.125 1.125v6.75"
        "C7.5 20.496 6.996 21 6.375 21h-2.25A1.125 1.125 0 0 1 3 19.875v-6.75Z"
        "M9.75 8.625c0-.621.504-1.125 1.125-1.125h2.25c.621 0 1.125.504 1.125 1.125v11.25"
        "c0 .621-.504 1.125-1.125 1.125h-2.25a1.125 1.125 0 0 1-1.125-1.125V8.625Z"
        "M16.5 4.125c0-.621.504-1.125 1.125-1.125h2.25C20.496 3 21 3.504 21 4.125v15.75"
        "c0 .621-.504 1.125-1.125 1.125h-2.25a1.125 1.125 0 0 1-1.125-1.125V4.125Z"
    ),
    "currency-dollar": (
        "M12 6v12m-3-2.818.879.659c1.171.879 3.07.879 4.242 0 1.172-.879 1.172-2.303 0-3.182"
        "C13.536 12.219 12.768 12 12 12c-.725 0-1.45-.22-2.003-.659-1.106-.879-1.106-2.303 0-3.182"
        "s2.9-.879 4.006 0l.415.33M21 12a9 9 0 1 1-18 0 9 9 0 0 1 18 0Z"
    ),
    "shield-check": (
        "M9 12.75 11.25 15 15 9.75m-3-7.036A11.959 11.959 0 0 1 3.598 6 11.99 11.99 0 0 0 3 9.749"
        "c0 5.592 3.824 10.29 9 11.623 5.176-1.332 9-6.03 9-11.622 0-1.31-.21-2.571-.598-3.751"
        "h-.152c-3.196 0-6.1-1.248-8.25-3.285Z"
    ),
    "device-phone-mobile": (
        "M10.5 1.5H8.25A2.25 2.25 0 0 0 6 3.75v16.5a2.25 2.25 0 0 0 2.25 2.25h7.5"
        "A2.25 2.25 0 0 0 18 20.25V3.75a2.25 2.25 0 0 0-2.25-2.25H13.5m-3 0V3h3V1.5m-3 0h3m-3 18.75h3"
    ),
    "arrow-right": "M13.5 4.5 21 12m0 0-7.5 7.5M21 12H3",
    "sparkles": (
        "M9.813 15.904 9 18.75l-.813-2.846a4.5 4.5 0 0 0-3.09-3.09L2.25 12l2.846-.813"
        "a4.5 4.5 0 0 0 3.09-3.09L9 5.25l.813 2.846a4.5 4.5 0 0 0 3.09 3.09L15.75 12l-2.846.813"
        "a4.5 4.5 0 0 0-3.09 3.09ZM18.259 8.715 18 9.75l-.259-1.035a3.375 3.375 0 0 0-2.455-2.456"
        "L14.25 6l1.036-.259a3.375 3.375 0 0 0 2.455-2.456L18 2.25l.259 1.035a3.375 3.375 0 0 0 2.456 2.456"
        "L21.75 6l-1.035.259a3.375 3.375 0 0 0-2.456 2.456ZM16.894 20.567 16.5 21.75l-.394-1.183"
        "a2.25 2.25 0 0 0-1.423-1.423L13.5 18.75l1.183-.394a2.25 2.25 0 0 0 1.423-1.423l.394-1.183"
        ".394 1.183a2.25 2.25 0 0 0 1.423 1.423l1.183.394-1.183.394a2.25 2.25 0 0 0-1.423 1.423Z"
    ),
    "rocket-launch": (
        "M15.59 14.37a6 6 0 0 1-5.84 7.38v-4.8m5.84-2.58a14.98 14.98 0 0 0 6.16-12.12"
        "A14.98 14.98 0 0 0 9.631 8.41m5.96 5.96a14.926 14.926 0 0 1-5.841 2.58m-.119-8.54"
        "a6 6 0 0 0-7.381 5.84h4.8m2.581-5.84a14.927 14.927 0 0 0-2.58 5.84m2.699 2.7"
        "c-.103.021-.207.041-.311.06a15.09 15.09 0 0 1-2.448-2.448 14.9 14.9 0 0 1 .06-.312"
        "m-2.24 2.39a4.493 4.493 0 0 0-1.757 4.306 4.493 4.493 0 0 0 4.306-1.758"
        "M16.5 9a1.5 1.5 0 1 1-3 0 1.5 1.5 0 0 1 3 0Z"
    ),
    "star": (
        "M11.48 3.499a.562.562 0 0 1 1.04 0l2.125 5.111a.563.563 0 0 0 .475.345l5.518.442"
        "c.499.04.701.663.321.988l-4.204 3.602a.563.563 0 0 0-.182.557l1.285 5.385"
        "a.562.562 0 0 1-.84.61l-4.725-2.885a.562.562 0 0 0-.586 0L6.982 20.54"
        "a.562.562 0 0 1-.84-.61l1.285-5.386a.562.562 0 0 0-.182-.557l-4.204-3.602"
        "a.562.562 0 0 1 .321-.988l5.518-.442a.563.563 0 0 0 .475-.345L11.48 3.5Z"
    ),
}

# 60x60 tile with a single faint dot, used behind the hero section.
DOT_PATTERN_URI = (
    "data:image/svg+xml,%3Csvg width='60' height='60' viewBox='0 0 60 60' "
    "xmlns='http://www.w3.org/2000/svg'%3E%3Cg fill='none' fill-rule='evenodd'%3E"
    "%3Cg fill='%23ffffff' fill-opacity='0.05'%3E%3Ccircle cx='30' cy='30' r='2'/%3E"
    "%3C/g%3E%3C/g%3E%3C/svg%3E"
)


class IconSet(Protocol):
    """Anything that can render a named glyph with the given classes."""

    def render(self, name: str, css_class: str = "") -> Markup:
        ...


class SvgPathIconSet:
    """Render icons from a mapping of name -> SVG path data."""

    def __init__(self, paths: Mapping[str, str], *, stroke_width: str = "1.5") -> None:
        self._paths = dict(paths)
        self._stroke_width = stroke_width

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._paths)

    def render(self, name: str, css_class: str = "") -> Markup:
        try:
            path = self._paths[name]
        except KeyError:
            raise KeyError(f"Unknown icon {name!r}") from None
        return Markup(
            '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" '
            'stroke-width="{width}" stroke="currentColor" aria-hidden="true" '
            'data-icon="{name}" class="{css}"><path stroke-linecap="round" '
            'stroke-linejoin="round" d="{path}"/></svg>'
        ).format(width=self._stroke_width, name=name, css=css_class, path=path)


def default_icon_set() -> SvgPathIconSet:
    return SvgPathIconSet(HEROICONS_OUTLINE)


__all__ = [
    "DOT_PATTERN_URI",
    "HEROICONS_OUTLINE",
    "IconSet",
    "SvgPathIconSet",
    "default_icon_set",
]
