"""
Named starting configurations for the tiling.

Every seed is built at unit size around the origin (rhombus sides have
length 1) and placed on the canvas with ``TriangleSet.transformed``.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from errors import EngineFault
from generator.geometry import PHI, PHI_INVERSE, TileKind, TriangleSet, rotate, triangle_from_base

ORIGIN = np.zeros(2)


def _with_rotations(sector: TriangleSet, copies: int, step_deg: float) -> TriangleSet:
    """``sector`` followed by ``copies - 1`` rotated copies of itself."""
    return TriangleSet.concat([sector] + [sector.rotated(i * step_deg) for i in range(1, copies)])


def rose() -> TriangleSet:
    """Five-fold rose: petals and leaves around a central star."""
    p1 = np.array([1.0, 0.0])
    p2 = np.array([PHI, 0.0])
    p3 = p2 + rotate(p1, 36.0)
    p4 = rotate(p2, 36.0)
    p5 = rotate(p2 + p1, 36.0)

    top_half = TriangleSet.from_points([
        (p4, p1, ORIGIN),  # inner petal
        (p1, p4, p2),      # outer petal
        (p5, p4, p2),      # leaf
        (p5, p3, p2),      # leaf
    ])
    first_sector = TriangleSet.concat([top_half, top_half.mirrored_y()])
    return _with_rotations(first_sector, copies=5, step_deg=72.0)


def rhombus(kind: TileKind) -> TriangleSet:
    """A single thin (SMALL) or thick (LARGE) rhombus split along its base."""
    base = PHI_INVERSE if kind is TileKind.SMALL else PHI
    right = np.array([base / 2.0, 0.0])
    left = -right
    return TriangleSet(
        np.array([kind, kind], dtype=np.int8),
        np.stack([
            triangle_from_base(left, right, kind, right_handed=True),
            triangle_from_base(left, right, kind, right_handed=False),
        ]),
    )


def pizza() -> TriangleSet:
    """Ten small triangles meeting at the origin."""
    p1 = np.array([1.0, 0.0])
    p2 = rotate(p1, 36.0)
    p3 = rotate(p1, 72.0)
    slice_ = TriangleSet.from_points([
        (p1, ORIGIN, p2),
        (p3, ORIGIN, p2),
    ])
    return _with_rotations(slice_, copies=5, step_deg=72.0)


SEEDS: dict[str, Callable[[], TriangleSet]] = {
    "rose": rose,
    "large-rhombus": lambda: rhombus(TileKind.LARGE),
    "small-rhombus": lambda: rhombus(TileKind.SMALL),
    "pizza": pizza,
}


def seed_names() -> list[str]:
    return list(SEEDS)


def get_seed(name: str) -> TriangleSet:
    """Look up a seed by name (case and surrounding whitespace ignored)."""
    key = name.strip().lower()
    try:
        factory = SEEDS[key]
    except KeyError:
        raise EngineFault(
            f"Unknown seed {name!r} (available: {', '.join(SEEDS)})"
        ) from None
    return factory()
