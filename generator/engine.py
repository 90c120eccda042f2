"""
Generation engine — parameters in, SVG markup out.

Two call shapes are supported. ``get_svg`` is the full one (seed, color
scheme, triangles/arcs toggles); ``get_svg_two_color`` is the reduced one
that only chooses the two tile fills. Both are pure: the same arguments
always produce byte-identical markup.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Union

from errors import EngineFault
from generator.palettes import Palette, PaletteResolver
from generator.seeds import get_seed
from generator.svg import SvgConfig, build_svg
from generator.tiling import generate_tiling, merge_pairs

logger = logging.getLogger(__name__)

# Seed used by the reduced call shape, which has no seed argument
TWO_COLOR_SEED = "rose"


class GenerationEngine(Protocol):
    """What the controller needs from an engine."""

    def get_svg(
        self,
        num_generations: int,
        seed: str,
        color_scheme: Union[str, Palette],
        stroke_width: float,
        draw_triangles: bool,
        draw_arcs: bool,
    ) -> str: ...

    def get_svg_two_color(
        self,
        num_generations: int,
        first_color: str,
        second_color: str,
        stroke_width: float,
    ) -> str: ...


class TilingEngine:
    """
    Penrose rhombus tiling engine.

    The seed is centered on the view box and scaled so that a rhombus side
    before any decomposition is ``seed_scale`` canvas units long.
    """

    def __init__(
        self,
        view_box_width: int = 1000,
        view_box_height: int = 1000,
        seed_scale: float = 100.0,
        max_generations: int = 10,
        resolver: Optional[PaletteResolver] = None,
    ):
        self.view_box_width = view_box_width
        self.view_box_height = view_box_height
        self.seed_scale = seed_scale
        self.max_generations = max_generations
        self.resolver = resolver or PaletteResolver()

    @classmethod
    def from_settings(cls) -> TilingEngine:
        from config import settings

        return cls(
            view_box_width=settings.VIEW_BOX_WIDTH,
            view_box_height=settings.VIEW_BOX_HEIGHT,
            seed_scale=settings.SEED_SCALE,
            max_generations=settings.MAX_GENERATIONS,
        )

    # ── Call shapes ──────────────────────────────────────────────────

    def get_svg(
        self,
        num_generations: int,
        seed: str,
        color_scheme: Union[str, Palette],
        stroke_width: float,
        draw_triangles: bool,
        draw_arcs: bool,
    ) -> str:
        """
        Full call shape.

        Args:
            num_generations: Decomposition steps, 1..max_generations.
            seed: Seed name (see ``generator.seeds.SEEDS``).
            color_scheme: Catalog key, or an already resolved ``Palette``.
            stroke_width: Outline width in canvas units.
            draw_triangles: Draw each Robinson triangle instead of merging
                pairs into rhombuses.
            draw_arcs: Overlay the matching-rule arcs.
        """
        palette = (
            color_scheme if isinstance(color_scheme, Palette)
            else self.resolver.resolve(color_scheme)
        )
        return self._render(
            num_generations, seed, palette, stroke_width, draw_triangles, draw_arcs
        )

    def get_svg_two_color(
        self,
        num_generations: int,
        first_color: str,
        second_color: str,
        stroke_width: float,
    ) -> str:
        """Reduced call shape: rose seed, rhombuses only, no arcs."""
        palette = Palette.two_color(first_color, second_color)
        return self._render(
            num_generations, TWO_COLOR_SEED, palette, stroke_width,
            draw_triangles=False, draw_arcs=False,
        )

    # ── Internals ────────────────────────────────────────────────────

    def _check_inputs(self, num_generations: int, stroke_width: float) -> None:
        if isinstance(num_generations, bool) or not isinstance(num_generations, int):
            raise EngineFault(f"Generation count must be an integer, got {num_generations!r}")
        if not 1 <= num_generations <= self.max_generations:
            raise EngineFault(
                f"Generation count must be between 1 and {self.max_generations}, "
                f"got {num_generations}"
            )
        if not math.isfinite(stroke_width) or stroke_width <= 0.0:
            raise EngineFault(f"Stroke width must be positive, got {stroke_width}")

    def _render(
        self,
        num_generations: int,
        seed: str,
        palette: Palette,
        stroke_width: float,
        draw_triangles: bool,
        draw_arcs: bool,
    ) -> str:
        self._check_inputs(num_generations, stroke_width)

        center = (self.view_box_width / 2.0, self.view_box_height / 2.0)
        start = get_seed(seed).transformed(center, self.seed_scale)
        triangles = generate_tiling(start, num_generations)
        polys = triangles if draw_triangles else merge_pairs(triangles)

        config = SvgConfig(
            view_box_width=self.view_box_width,
            view_box_height=self.view_box_height,
            stroke_width=stroke_width,
            stroke_color=palette.stroke_color,
            quad_colors=palette.quad_colors,
            arc_colors=palette.arc_colors if draw_arcs else None,
        )
        logger.debug(
            "Rendering %d polygons (seed=%s, generations=%d, triangles=%s, arcs=%s)",
            len(polys), seed, num_generations, draw_triangles, draw_arcs,
        )
        return build_svg(polys, config)


def get_svg(
    num_generations: int,
    seed: str,
    color_scheme: Union[str, Palette],
    stroke_width: float,
    draw_triangles: bool,
    draw_arcs: bool,
) -> str:
    """Module-level shortcut for the full call shape with default geometry."""
    return TilingEngine().get_svg(
        num_generations, seed, color_scheme, stroke_width, draw_triangles, draw_arcs
    )


def get_svg_two_color(
    num_generations: int,
    first_color: str,
    second_color: str,
    stroke_width: float,
) -> str:
    """Module-level shortcut for the reduced call shape with default geometry."""
    return TilingEngine().get_svg_two_color(
        num_generations, first_color, second_color, stroke_width
    )
