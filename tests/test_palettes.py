"""Tests for the color-scheme catalog."""

import pytest

from errors import UnknownPaletteError, ViewerError
from generator.palettes import COLOR_SCHEMES, Palette, PaletteResolver, resolve_palette


class TestCatalog:

    def test_known_keys(self):
        assert set(COLOR_SCHEMES) == {"red", "green", "blue", "purple", "grey", "yellow"}

    def test_every_palette_is_complete(self):
        for key, palette in COLOR_SCHEMES.items():
            assert len(palette.quad_colors) == 2, key
            assert len(palette.arc_colors) == 2, key
            assert palette.stroke_color, key

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            COLOR_SCHEMES["teal"] = COLOR_SCHEMES["red"]

    def test_two_color_palette(self):
        palette = Palette.two_color("#000000", "#ffffff")
        assert palette.quad_colors == ("#000000", "#ffffff")
        assert palette.stroke_color == "white"


class TestPaletteResolver:

    def setup_method(self):
        self.resolver = PaletteResolver()

    def test_resolves_every_key(self):
        for key in self.resolver.keys():
            assert self.resolver.resolve(key) is COLOR_SCHEMES[key]

    def test_unknown_key(self):
        with pytest.raises(UnknownPaletteError) as exc_info:
            self.resolver.resolve("teal")
        err = exc_info.value
        assert err.key == "teal"
        assert "teal" in str(err)
        assert "red" in str(err)

    def test_unknown_key_is_key_error(self):
        with pytest.raises(KeyError):
            resolve_palette("teal")

    def test_keys_are_case_sensitive(self):
        with pytest.raises(ViewerError):
            self.resolver.resolve("Red")

    def test_unhashable_key(self):
        with pytest.raises(UnknownPaletteError):
            self.resolver.resolve(["red"])

    def test_custom_catalog(self):
        custom = {"mono": Palette.two_color("black", "white", stroke_color="grey")}
        resolver = PaletteResolver(custom)
        assert resolver.keys() == ["mono"]
        with pytest.raises(UnknownPaletteError):
            resolver.resolve("red")
