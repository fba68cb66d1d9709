"""Tests for the responsive arrangement table."""

from __future__ import annotations

import pytest

from moneytracker.blueprints.home import layout
from moneytracker.blueprints.home.layout import Arrangement, RegionLayout


@pytest.mark.parametrize(
    "region, expected",
    [
        ("header_actions", "flex flex-row"),
        ("hero_actions", "flex flex-col sm:flex-row"),
        ("hero_stats", "grid grid-cols-3"),
        ("feature_cards", "flex flex-col md:grid md:grid-cols-3"),
        ("cta_actions", "flex flex-col sm:flex-row"),
        ("footer_bottom", "flex flex-col md:flex-row"),
    ],
)
def test_region_classes(region, expected):
    assert layout.layout_classes()[region] == expected


def test_every_region_declares_narrow_and_wide():
    for region_layout in layout.REGION_LAYOUTS.values():
        assert isinstance(region_layout.narrow, Arrangement)
        assert isinstance(region_layout.wide, Arrangement)
        assert region_layout.breakpoint in layout.BREAKPOINTS


def test_unknown_breakpoint_rejected(monkeypatch):
    monkeypatch.setitem(
        layout.REGION_LAYOUTS,
        "broken",
        RegionLayout("xxl", Arrangement.STACKED, Arrangement.ROW),
    )
    with pytest.raises(ValueError, match="xxl"):
        layout.layout_classes()


def test_rendered_page_uses_layout_table(landing_html):
    classes = layout.layout_classes()
    for region in ("hero_actions", "feature_cards", "cta_actions", "footer_bottom"):
        assert f'class="{classes[region]} ' in landing_html
