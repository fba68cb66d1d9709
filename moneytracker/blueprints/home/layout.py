"""Responsive arrangement table for the landing page regions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Arrangement(str, Enum):
    STACKED = "stacked"
    ROW = "row"
    GRID_3 = "grid-3"


# Tailwind class fragments for each arrangement, without a breakpoint prefix.
_ARRANGEMENT_CLASSES: dict[Arrangement, tuple[str, ...]] = {
    Arrangement.STACKED: ("flex", "flex-col"),
    Arrangement.ROW: ("flex", "flex-row"),
    Arrangement.GRID_3: ("grid", "grid-cols-3"),
}

BREAKPOINTS = ("sm", "md", "lg")


@dataclass(frozen=True, slots=True)
class RegionLayout:
    """Narrow arrangement below ``breakpoint``, wide arrangement from it up."""

    breakpoint: str
    narrow: Arrangement
    wide: Arrangement

    def classes(self) -> str:
        narrow = _ARRANGEMENT_CLASSES[self.narrow]
        wide = _ARRANGEMENT_CLASSES[self.wide]
        parts = list(narrow)
        for css in wide:
            if css in narrow:
                continue
            parts.append(f"{self.breakpoint}:{css}")
        return " ".join(parts)


# Keyed by template region name.
REGION_LAYOUTS: dict[str, RegionLayout] = {
    "header_actions": RegionLayout("sm", Arrangement.ROW, Arrangement.ROW),
    "hero_actions": RegionLayout("sm", Arrangement.STACKED, Arrangement.ROW),
    "hero_stats": RegionLayout("sm", Arrangement.GRID_3, Arrangement.GRID_3),
    "feature_cards": RegionLayout("md", Arrangement.STACKED, Arrangement.GRID_3),
    "cta_actions": RegionLayout("sm", Arrangement.STACKED, Arrangement.ROW),
    "footer_bottom": RegionLayout("md", Arrangement.STACKED, Arrangement.ROW),
}


def layout_classes() -> dict[str, str]:
    """Return the arrangement classes for every region."""

    for name, layout in REGION_LAYOUTS.items():
        if layout.breakpoint not in BREAKPOINTS:
            raise ValueError(f"Unknown breakpoint {layout.breakpoint!r} for region {name!r}")
    return {name: layout.classes() for name, layout in REGION_LAYOUTS.items()}
