"""
The Tonnetz lattice engine.

Data flow: PitchClassGrid -> TonnetzTessellation -> triangles, which feed
point location (find_triangle_at / BucketedLocator) and the RegionTracker.
"""

from chuk_mcp_tonnetz.lattice.grid import GridCell, PitchClassGrid
from chuk_mcp_tonnetz.lattice.lattice import TonnetzLattice
from chuk_mcp_tonnetz.lattice.locator import BucketedLocator, find_triangle_at, point_in_triangle
from chuk_mcp_tonnetz.lattice.region import RegionChange, RegionTracker
from chuk_mcp_tonnetz.lattice.tessellation import (
    Point,
    TonnetzTessellation,
    Triangle,
    TriangleKey,
    Vertex,
    centering_offset,
    row_height,
    unique_vertices,
    vertex_position,
)

__all__ = [
    # Grid
    "GridCell",
    "PitchClassGrid",
    # Tessellation
    "Point",
    "TonnetzTessellation",
    "Triangle",
    "TriangleKey",
    "Vertex",
    "centering_offset",
    "row_height",
    "unique_vertices",
    "vertex_position",
    # Location
    "BucketedLocator",
    "find_triangle_at",
    "point_in_triangle",
    # Regions
    "RegionChange",
    "RegionTracker",
    # Facade
    "TonnetzLattice",
]
