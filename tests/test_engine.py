"""Tests for the generation engine and SVG output."""

import re
import xml.etree.ElementTree as ET

import pytest

from errors import EngineFault, UnknownPaletteError
from generator.engine import TilingEngine, get_svg, get_svg_two_color
from generator.palettes import COLOR_SCHEMES

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(markup: str) -> ET.Element:
    return ET.fromstring(markup)


class TestGetSvg:
    """Tests for the full call shape."""

    def setup_method(self):
        self.engine = TilingEngine(max_generations=8)

    def test_deterministic(self):
        """Same arguments should produce byte-identical markup."""
        a = self.engine.get_svg(3, "rose", "red", 2.0, False, True)
        b = self.engine.get_svg(3, "rose", "red", 2.0, False, True)
        assert a == b

    def test_single_svg_root(self):
        markup = self.engine.get_svg(2, "pizza", "blue", 1.0, True, False)
        assert markup.lstrip().startswith("<svg")
        assert markup.count("<svg") == 1
        root = _parse(markup)
        assert root.tag == f"{SVG_NS}svg"

    def test_view_box_is_scaled(self):
        root = _parse(self.engine.get_svg(1, "rose", "red", 1.0, False, False))
        assert root.get("viewBox") == "0 0 1000000 1000000"

    def test_palette_colors_used(self):
        markup = self.engine.get_svg(2, "rose", "yellow", 1.0, False, True)
        palette = COLOR_SCHEMES["yellow"]
        for color in (*palette.quad_colors, palette.stroke_color, *palette.arc_colors):
            assert f'"{color}"' in markup

    def test_resolved_palette_accepted(self):
        by_key = self.engine.get_svg(2, "rose", "green", 1.0, False, False)
        by_palette = self.engine.get_svg(2, "rose", COLOR_SCHEMES["green"], 1.0, False, False)
        assert by_key == by_palette

    def test_arcs_only_when_requested(self):
        without = self.engine.get_svg(2, "rose", "red", 1.0, False, False)
        with_arcs = self.engine.get_svg(2, "rose", "red", 1.0, False, True)
        assert "<path" not in without
        assert "<path" in with_arcs

    def test_two_arcs_per_polygon(self):
        markup = self.engine.get_svg(2, "pizza", "red", 1.0, True, True)
        assert markup.count("<path") == 2 * markup.count("<polygon")

    def test_triangles_vs_rhombuses(self):
        triangles = self.engine.get_svg(3, "rose", "red", 1.0, True, False)
        rhombuses = self.engine.get_svg(3, "rose", "red", 1.0, False, False)
        tri_points = re.search(r'points="([^"]+)"', triangles).group(1)
        quad_points = re.search(r'points="([^"]+)"', rhombuses).group(1)
        assert len(tri_points.split()) == 3
        assert len(quad_points.split()) == 4

    def test_more_generations_more_polygons(self):
        small = self.engine.get_svg(2, "rose", "red", 1.0, True, False)
        large = self.engine.get_svg(3, "rose", "red", 1.0, True, False)
        assert large.count("<polygon") > 2 * small.count("<polygon")

    def test_stroke_width_scaled(self):
        root = _parse(self.engine.get_svg(1, "rose", "red", 2.5, False, False))
        group = root.find(f"{SVG_NS}g")
        assert group.get("stroke-width") == "2500"

    def test_unknown_scheme(self):
        with pytest.raises(UnknownPaletteError):
            self.engine.get_svg(2, "rose", "teal", 1.0, False, False)

    def test_unknown_seed(self):
        with pytest.raises(EngineFault):
            self.engine.get_svg(2, "hexagon", "red", 1.0, False, False)

    def test_generation_bounds(self):
        for bad in (0, -1, 9):
            with pytest.raises(EngineFault):
                self.engine.get_svg(bad, "rose", "red", 1.0, False, False)

    def test_generation_count_must_be_int(self):
        with pytest.raises(EngineFault):
            self.engine.get_svg(2.5, "rose", "red", 1.0, False, False)

    def test_stroke_width_must_be_positive(self):
        for bad in (0.0, -1.0, float("nan")):
            with pytest.raises(EngineFault):
                self.engine.get_svg(2, "rose", "red", bad, False, False)


class TestGetSvgTwoColor:
    """Tests for the reduced call shape."""

    def test_uses_given_colors(self):
        markup = get_svg_two_color(2, "#111111", "#222222", 1.0)
        assert 'fill="#111111"' in markup
        assert 'fill="#222222"' in markup
        assert "<path" not in markup

    def test_matches_full_shape_on_rose(self):
        """The reduced shape is the full one with a fixed seed and no extras."""
        reduced = get_svg_two_color(3, "#97332b", "#c05150", 1.0)
        full = get_svg(3, "rose", "red", 1.0, False, False)
        assert reduced == full

    def test_colors_are_escaped(self):
        markup = get_svg_two_color(1, 'red" onload="x', "blue", 1.0)
        assert 'onload="x' not in markup
        _parse(markup)
