"""Tiling Generator — Penrose rhombus tiling → SVG markup."""

from generator.engine import GenerationEngine, TilingEngine, get_svg, get_svg_two_color
from generator.palettes import COLOR_SCHEMES, Palette, PaletteResolver
from generator.seeds import SEEDS

__all__ = [
    "GenerationEngine",
    "TilingEngine",
    "get_svg",
    "get_svg_two_color",
    "COLOR_SCHEMES",
    "Palette",
    "PaletteResolver",
    "SEEDS",
]
