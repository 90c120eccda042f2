"""
SVG serialisation of tilings.

Renders a Jinja2 template with pre-formatted polygon and arc data. All
coordinates are multiplied by SCALING_FACTOR and truncated to integers
(the view box is scaled to match): integer formatting keeps large documents
fast to build and compact.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from jinja2 import Environment, FileSystemLoader

from generator.geometry import PHI, PHI_INVERSE, QuadSet, TileKind, TriangleSet

SCALING_FACTOR = 1000

# Jinja2 environment pointing at our templates directory
_TEMPLATE_DIR = Path(__file__).parent / "templates"
_jinja_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

Polygons = Union[TriangleSet, QuadSet]


@dataclass(frozen=True)
class SvgConfig:
    """Everything about the document except the geometry."""
    view_box_width: int
    view_box_height: int
    stroke_width: float
    stroke_color: str
    quad_colors: tuple[str, str]
    arc_colors: Optional[tuple[str, str]] = None  # None = no matching arcs


def scale_coords(values: np.ndarray) -> np.ndarray:
    """Float canvas units → truncated integer document units."""
    return (np.asarray(values, dtype=float) * SCALING_FACTOR).astype(np.int64)


def _format_points(vertices: np.ndarray) -> list[str]:
    coords = scale_coords(vertices).tolist()
    return [" ".join(f"{x},{y}" for x, y in polygon) for polygon in coords]


def _arc_endpoints(polys: Polygons) -> list[tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """
    The two matching arcs of every polygon, as (start, center, end) arrays.

    Arcs are centered on the ``a`` and ``c`` vertices; on a rhombus they join
    the midpoints of the two edges meeting there.
    """
    v = polys.vertices
    a, b, c = v[:, 0], v[:, 1], v[:, 2]
    if isinstance(polys, QuadSet):
        d = v[:, 3]
        return [
            ((a + b) / 2.0, a, (a + d) / 2.0),
            ((c + b) / 2.0, c, (c + d) / 2.0),
        ]
    ratio = np.where(polys.kinds == TileKind.SMALL, PHI, PHI_INVERSE)[:, np.newaxis]
    return [
        ((a + b) / 2.0, a, a + 0.5 * ratio * (c - a)),
        ((c + b) / 2.0, c, c + 0.5 * ratio * (a - c)),
    ]


def _format_arcs(start: np.ndarray, center: np.ndarray, end: np.ndarray) -> list[str]:
    radius = scale_coords(np.linalg.norm(start - center, axis=1)).tolist()
    u, w = start - center, end - center
    sweep = ((u[:, 0] * w[:, 1] - u[:, 1] * w[:, 0]) > 0.0).astype(int).tolist()
    s = scale_coords(start).tolist()
    e = scale_coords(end).tolist()
    return [
        f"M {sx} {sy} A {r} {r} 0 0 {flag} {ex} {ey}"
        for (sx, sy), r, flag, (ex, ey) in zip(s, radius, sweep, e)
    ]


def build_svg(polys: Polygons, config: SvgConfig) -> str:
    """Serialise triangles or rhombuses into a single ``<svg>`` document."""
    polygon_groups = []
    for kind, color in zip((TileKind.SMALL, TileKind.LARGE), config.quad_colors):
        mask = polys.kinds == kind
        polygon_groups.append({
            "color": color,
            "points": _format_points(polys.vertices[mask]),
        })

    arc_groups = []
    if config.arc_colors is not None:
        for (start, center, end), color in zip(_arc_endpoints(polys), config.arc_colors):
            arc_groups.append({
                "color": color,
                "paths": _format_arcs(start, center, end),
            })

    template = _jinja_env.get_template("tiling.svg.j2")
    return template.render(
        width=config.view_box_width * SCALING_FACTOR,
        height=config.view_box_height * SCALING_FACTOR,
        stroke_color=config.stroke_color,
        stroke_width=int(config.stroke_width * SCALING_FACTOR),
        polygon_groups=polygon_groups,
        arc_groups=arc_groups,
    )
