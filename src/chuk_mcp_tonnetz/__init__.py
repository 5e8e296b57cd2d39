"""
CHUK Tonnetz - a neo-Riemannian lattice engine.

A lattice of pitch classes (fifths along columns, major thirds along rows)
is tessellated into triangles; upward triangles carry major triads and
downward triangles minor triads. A point on the plane selects a triangle
and therefore a chord.
"""

from chuk_mcp_tonnetz.lattice import (
    PitchClassGrid,
    RegionChange,
    RegionTracker,
    TonnetzLattice,
    TonnetzTessellation,
    Triangle,
    TriangleKey,
    find_triangle_at,
)
from chuk_mcp_tonnetz.models import TonnetzConfig
from chuk_mcp_tonnetz.session import TonnetzSession

__version__ = "0.1.0"

__all__ = [
    "PitchClassGrid",
    "RegionChange",
    "RegionTracker",
    "TonnetzConfig",
    "TonnetzLattice",
    "TonnetzSession",
    "TonnetzTessellation",
    "Triangle",
    "TriangleKey",
    "find_triangle_at",
]
