"""
TonnetzLattice - the grid, its tessellation and point location in one place.

Built once from a LatticeConfig and read-only afterwards.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_tonnetz.constants import TriadType
from chuk_mcp_tonnetz.lattice.grid import PitchClassGrid
from chuk_mcp_tonnetz.lattice.locator import BucketedLocator, find_triangle_at
from chuk_mcp_tonnetz.lattice.tessellation import (
    TonnetzTessellation,
    Triangle,
    TriangleKey,
    Vertex,
    unique_vertices,
)
from chuk_mcp_tonnetz.models.config import LatticeConfig


class TonnetzLattice:
    """
    A centered Tonnetz lattice with point-location queries.

    Point location is a linear scan unless config.bucket_size is set, in
    which case a BucketedLocator with identical first-match results is used.
    """

    def __init__(self, config: LatticeConfig | None = None):
        self.config = config or LatticeConfig()
        self.grid = PitchClassGrid.generate(
            self.config.grid_width,
            self.config.grid_height,
            fifth_interval=self.config.fifth_interval,
            third_interval=self.config.major_third_interval,
        )
        self.tessellation = TonnetzTessellation.build(
            self.grid,
            self.config.triangle_size,
            base_octave=self.config.base_octave,
        )
        self._bucketed: BucketedLocator | None = None
        if self.config.bucket_size is not None:
            self._bucketed = BucketedLocator(self.triangles, self.config.bucket_size)

    @property
    def triangles(self) -> tuple[Triangle, ...]:
        return self.tessellation.triangles

    def find_triangle_at(self, x: float, z: float) -> Triangle | None:
        """Triangle containing (x, z), or None outside the lattice."""
        if self._bucketed is not None:
            return self._bucketed.find(x, z)
        return find_triangle_at(x, z, self.triangles)

    def get_triangle(self, row: int, col: int, triad_type: TriadType) -> Triangle | None:
        return self.tessellation.get(TriangleKey(row, col, triad_type))

    def vertices(self) -> list[Vertex]:
        """Distinct labelled vertices for display."""
        return unique_vertices(self.triangles)

    def summary(self) -> dict[str, Any]:
        """Size and extent of the lattice."""
        lo, hi = self.tessellation.bounds()
        return {
            "grid_width": self.grid.width,
            "grid_height": self.grid.height,
            "triangle_size": self.tessellation.triangle_size,
            "triangle_count": len(self.tessellation),
            "vertex_count": len(self.grid),
            "intervals": {
                "fifth": self.config.fifth_interval,
                "major_third": self.config.major_third_interval,
                "minor_third": self.config.minor_third_interval,
            },
            "bounds": {"min": lo.to_dict(), "max": hi.to_dict()},
            "offset": {"x": self.tessellation.offset[0], "z": self.tessellation.offset[1]},
        }

    def __repr__(self) -> str:
        size = f"{self.grid.width}x{self.grid.height}"
        return f"TonnetzLattice({size}, {len(self.triangles)} triangles)"
