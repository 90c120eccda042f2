"""
Plane geometry for Robinson-triangle tilings.

Points are numpy arrays of shape (..., 2). Triangles are stored in bulk as a
``TriangleSet`` so a whole generation can be decomposed with array
operations instead of per-triangle Python objects.

Rotation uses SVG orientation: a positive angle turns clockwise on screen,
so ``rotate((1, 0), 90) == (0, 1)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

PHI = (1.0 + math.sqrt(5.0)) / 2.0
PHI_INVERSE = PHI - 1.0  # == 1 / PHI
TOLERANCE = 1e-5


class TileKind(IntEnum):
    """The two Robinson triangles of the rhombus (P3) tiling."""
    SMALL = 0  # golden triangle, half of the thin rhombus
    LARGE = 1  # golden gnomon, half of the thick rhombus

    @property
    def base_to_side_ratio(self) -> float:
        return PHI_INVERSE if self is TileKind.SMALL else PHI

    @property
    def base_angle(self) -> float:
        """Angle at vertex ``a``, in degrees."""
        return 72.0 if self is TileKind.SMALL else 36.0


def close(a, b, tol: float = TOLERANCE) -> bool:
    """True when every coordinate of ``a`` and ``b`` differs by less than ``tol``."""
    return bool(np.all(np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)) < tol))


def rotate(points: np.ndarray, angle_deg: float) -> np.ndarray:
    """Rotate points of shape (..., 2) around the origin."""
    theta = math.radians(angle_deg)
    cos, sin = math.cos(theta), math.sin(theta)
    matrix = np.array([[cos, sin], [-sin, cos]])
    return np.asarray(points, dtype=float) @ matrix


def mirror_y(points: np.ndarray) -> np.ndarray:
    """Mirror points across the x axis."""
    return np.asarray(points, dtype=float) * np.array([1.0, -1.0])


def infer_kind(a, b, c) -> TileKind:
    """
    Classify an isosceles triangle ``abc`` (|ab| == |bc|) by its
    base-to-side ratio |ca| / |ab|.
    """
    ab = float(np.linalg.norm(np.subtract(b, a)))
    bc = float(np.linalg.norm(np.subtract(c, b)))
    ca = float(np.linalg.norm(np.subtract(a, c)))
    if ab < TOLERANCE or abs(ab - bc) >= TOLERANCE * max(1.0, ab):
        raise ValueError("Not an isosceles Robinson triangle")
    ratio = ca / ab
    for kind in TileKind:
        if abs(ratio - kind.base_to_side_ratio) < TOLERANCE:
            return kind
    raise ValueError(f"Triangle sides are of invalid ratio {ratio:.6f}")


def triangle_from_base(a, c, kind: TileKind, right_handed: bool) -> np.ndarray:
    """
    Build the triangle of the given kind on base ``ac`` and return its
    vertices as a (3, 2) array ``[a, b, c]``.

    ``right_handed`` picks the side of the base the apex ``b`` lands on:
    the a → b → c path turns right in SVG coordinates.
    """
    a = np.asarray(a, dtype=float)
    c = np.asarray(c, dtype=float)
    rotation = -kind.base_angle if right_handed else kind.base_angle
    direction = rotate(c - a, rotation)
    direction = direction / np.linalg.norm(direction)
    side = np.linalg.norm(c - a) / kind.base_to_side_ratio
    b = a + side * direction
    return np.stack([a, b, c])


@dataclass
class TriangleSet:
    """A bag of Robinson triangles: kinds (N,) and vertices (N, 3, 2)."""
    kinds: np.ndarray
    vertices: np.ndarray

    def __post_init__(self) -> None:
        self.kinds = np.asarray(self.kinds, dtype=np.int8).reshape(-1)
        self.vertices = np.asarray(self.vertices, dtype=float).reshape(-1, 3, 2)
        if len(self.kinds) != len(self.vertices):
            raise ValueError("kinds and vertices must have the same length")

    def __len__(self) -> int:
        return len(self.kinds)

    @property
    def a(self) -> np.ndarray:
        return self.vertices[:, 0]

    @property
    def b(self) -> np.ndarray:
        return self.vertices[:, 1]

    @property
    def c(self) -> np.ndarray:
        return self.vertices[:, 2]

    def base_medians(self) -> np.ndarray:
        return (self.a + self.c) / 2.0

    def transformed(self, center, scale: float) -> TriangleSet:
        """Scale about the origin, then translate to ``center``."""
        return TriangleSet(self.kinds.copy(), self.vertices * scale + np.asarray(center, dtype=float))

    def rotated(self, angle_deg: float) -> TriangleSet:
        return TriangleSet(self.kinds.copy(), rotate(self.vertices, angle_deg))

    def mirrored_y(self) -> TriangleSet:
        return TriangleSet(self.kinds.copy(), mirror_y(self.vertices))

    @classmethod
    def concat(cls, sets: list[TriangleSet]) -> TriangleSet:
        if not sets:
            return cls(np.empty(0, dtype=np.int8), np.empty((0, 3, 2)))
        return cls(
            np.concatenate([s.kinds for s in sets]),
            np.concatenate([s.vertices for s in sets]),
        )

    @classmethod
    def from_points(cls, triangles: list[tuple]) -> TriangleSet:
        """Build from ``(a, b, c)`` tuples, inferring each triangle's kind."""
        kinds = [infer_kind(a, b, c) for a, b, c in triangles]
        return cls(np.array(kinds, dtype=np.int8), np.array(triangles, dtype=float))


@dataclass
class QuadSet:
    """Rhombuses made of two triangles: kinds (N,) and vertices (N, 4, 2)."""
    kinds: np.ndarray
    vertices: np.ndarray

    def __post_init__(self) -> None:
        self.kinds = np.asarray(self.kinds, dtype=np.int8).reshape(-1)
        self.vertices = np.asarray(self.vertices, dtype=float).reshape(-1, 4, 2)

    def __len__(self) -> int:
        return len(self.kinds)
