"""
Robinson-triangle decomposition and rhombus merging.

Each generation replaces every triangle by smaller ones (2 for SMALL, 3 for
LARGE), so the triangle count grows by a factor approaching PHI**2 per
generation.
"""

from __future__ import annotations

import numpy as np

from generator.geometry import PHI, QuadSet, TileKind, TriangleSet

# Base medians are matched after rounding to this many decimals. Coordinates
# are canvas units (hundreds), so this is well above float noise and well
# below the smallest tile at any supported depth.
MERGE_DECIMALS = 4


def decompose(triangles: TriangleSet) -> TriangleSet:
    """
    One subdivision step.

    SMALL triangle ABC, with D on BA where |BD| = |BA| / PHI, becomes a
    SMALL DCA and a LARGE CDB.

    LARGE triangle ABC, with D on AB where |AD| = |AB| / PHI and E on AC
    where |AE| = |AC| / PHI, becomes LARGE EDA, LARGE CEB and SMALL DEB.
    """
    small = triangles.kinds == TileKind.SMALL
    large = ~small

    sa, sb, sc = (triangles.vertices[small, i] for i in range(3))
    sd = sb + (sa - sb) / PHI

    la, lb, lc = (triangles.vertices[large, i] for i in range(3))
    ld = la + (lb - la) / PHI
    le = la + (lc - la) / PHI

    n_small, n_large = len(sa), len(la)
    kinds = np.concatenate([
        np.full(n_small, TileKind.SMALL, dtype=np.int8),
        np.full(n_small, TileKind.LARGE, dtype=np.int8),
        np.full(2 * n_large, TileKind.LARGE, dtype=np.int8),
        np.full(n_large, TileKind.SMALL, dtype=np.int8),
    ])
    vertices = np.concatenate([
        np.stack([sd, sc, sa], axis=1),
        np.stack([sc, sd, sb], axis=1),
        np.stack([le, ld, la], axis=1),
        np.stack([lc, le, lb], axis=1),
        np.stack([ld, le, lb], axis=1),
    ]).reshape(-1, 3, 2)
    return TriangleSet(kinds, vertices)


def generate_tiling(seed: TriangleSet, num_generations: int) -> TriangleSet:
    """Apply ``decompose`` ``num_generations`` times."""
    if num_generations < 0:
        raise ValueError("num_generations must be non-negative")
    triangles = seed
    for _ in range(num_generations):
        triangles = decompose(triangles)
    return triangles


def merge_pairs(triangles: TriangleSet) -> QuadSet:
    """
    Join the two triangles sharing each base into one rhombus.

    Instead of comparing every pair (O(n^2)), triangles are grouped by their
    rounded base median. Triangles on the outer boundary have no partner and
    are dropped. The rhombus ``abcd`` takes ``a, b, c`` from the first
    triangle of the pair and ``d`` from the second one's apex.
    """
    if len(triangles) < 2:
        return QuadSet(np.empty(0, dtype=np.int8), np.empty((0, 4, 2)))

    keys = np.round(triangles.base_medians(), MERGE_DECIMALS)
    # Normalise -0.0 so it groups with 0.0
    keys = keys + 0.0
    _, inverse = np.unique(keys, axis=0, return_inverse=True)
    inverse = np.asarray(inverse).reshape(-1)

    order = np.argsort(inverse, kind="stable")
    grouped = inverse[order]
    same = grouped[:-1] == grouped[1:]
    first = order[:-1][same]
    second = order[1:][same]

    vertices = np.concatenate([
        triangles.vertices[first],
        triangles.b[second][:, np.newaxis, :],
    ], axis=1)
    return QuadSet(triangles.kinds[first], vertices)
