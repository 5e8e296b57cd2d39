"""
Point location - which triangle contains a point on the x/z plane.

The test is the edge-inclusive signed-area check: a point is inside when the
three signed areas it forms with the triangle's edges are not of mixed sign.
Zero areas (point on an edge or vertex) count as inside, so a point on a
shared edge belongs to whichever triangle comes first in list order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

from chuk_mcp_tonnetz.lattice.tessellation import Triangle


class _XZ(Protocol):
    x: float
    z: float


def cross(ax: float, az: float, b: _XZ, c: _XZ) -> float:
    """Signed area term (a - c) x (b - c) on the x/z plane."""
    return (ax - c.x) * (b.z - c.z) - (b.x - c.x) * (az - c.z)


def point_in_triangle(x: float, z: float, triangle: Triangle) -> bool:
    """
    Edge-inclusive containment test for (x, z) against a triangle.

    NaN or infinite coordinates are never inside.
    """
    if not (math.isfinite(x) and math.isfinite(z)):
        return False

    v0, v1, v2 = triangle.vertices

    d1 = cross(x, z, v0, v1)
    d2 = cross(x, z, v1, v2)
    d3 = cross(x, z, v2, v0)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_neg and has_pos)


def find_triangle_at(x: float, z: float, triangles: Sequence[Triangle]) -> Triangle | None:
    """
    Linear scan, first match wins.

    Returns:
        The containing triangle, or None when (x, z) is outside the lattice
    """
    for triangle in triangles:
        if point_in_triangle(x, z, triangle):
            return triangle
    return None


class BucketedLocator:
    """
    Point locator backed by a uniform grid of buckets.

    Each triangle is registered in every bucket its bounding box overlaps.
    Buckets keep triangles in the original list order, so the first-match
    result is the same as find_triangle_at() over the full list.
    """

    def __init__(self, triangles: Sequence[Triangle], bucket_size: float):
        if bucket_size <= 0:
            raise ValueError(f"Bucket size must be > 0, got {bucket_size}")
        self.bucket_size = bucket_size
        self.triangles = tuple(triangles)
        self._buckets: dict[tuple[int, int], list[Triangle]] = {}

        for triangle in self.triangles:
            xs = [v.x for v in triangle.vertices]
            zs = [v.z for v in triangle.vertices]
            bx0, bz0 = self._bucket(min(xs), min(zs))
            bx1, bz1 = self._bucket(max(xs), max(zs))
            for bx in range(bx0, bx1 + 1):
                for bz in range(bz0, bz1 + 1):
                    self._buckets.setdefault((bx, bz), []).append(triangle)

    def _bucket(self, x: float, z: float) -> tuple[int, int]:
        return math.floor(x / self.bucket_size), math.floor(z / self.bucket_size)

    def find(self, x: float, z: float) -> Triangle | None:
        """Same contract as find_triangle_at()."""
        if not (math.isfinite(x) and math.isfinite(z)):
            return None
        candidates = self._buckets.get(self._bucket(x, z))
        if not candidates:
            return None
        return find_triangle_at(x, z, candidates)

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"BucketedLocator({len(self.triangles)} triangles, {self.bucket_count} buckets)"
