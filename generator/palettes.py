"""Static catalog of named color schemes."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from errors import UnknownPaletteError


@dataclass(frozen=True)
class Palette:
    """Fill, stroke and arc colors for one rendering."""
    quad_colors: tuple[str, str]  # (small tiles, large tiles)
    stroke_color: str
    arc_colors: tuple[str, str]

    @classmethod
    def two_color(cls, first_color: str, second_color: str, stroke_color: str = "white") -> Palette:
        """Reduced palette: only the tile fills are chosen, arcs are unused."""
        return cls(
            quad_colors=(first_color, second_color),
            stroke_color=stroke_color,
            arc_colors=(first_color, second_color),
        )


COLOR_SCHEMES: Mapping[str, Palette] = MappingProxyType({
    "red": Palette(
        quad_colors=("#97332b", "#c05150"),
        stroke_color="white",
        arc_colors=("#50d35b", "#30bbe5"),
    ),
    "green": Palette(
        quad_colors=("#2c6e49", "#4c956c"),
        stroke_color="white",
        arc_colors=("#d17432", "#8d31ce"),
    ),
    "blue": Palette(
        quad_colors=("#1f4a77", "#416d9f"),
        stroke_color="white",
        arc_colors=("#d13232", "#a9d132"),
    ),
    "purple": Palette(
        quad_colors=("#674593", "#915eae"),
        stroke_color="white",
        arc_colors=("#a9d132", "#d17432"),
    ),
    "grey": Palette(
        quad_colors=("#404040", "#545454"),
        stroke_color="white",
        arc_colors=("black", "#202020"),
    ),
    "yellow": Palette(
        quad_colors=("#e0be4e", "#f9d96d"),
        stroke_color="#9b6a01",
        arc_colors=("#4e5de0", "#884ee0"),
    ),
})


class PaletteResolver:
    """Maps a scheme key to its ``Palette``; unknown keys are an error."""

    def __init__(self, catalog: Mapping[str, Palette] = COLOR_SCHEMES):
        self.catalog = catalog

    def keys(self) -> list[str]:
        return list(self.catalog)

    def resolve(self, key: str) -> Palette:
        try:
            return self.catalog[key]
        except (KeyError, TypeError):
            raise UnknownPaletteError(key, self.catalog) from None


def resolve_palette(key: str) -> Palette:
    return PaletteResolver().resolve(key)
