"""
Tonnetz tessellation - chord-bearing triangles built from the grid.

Vertex positions use a cumulative row shift:

    x = col * size + row * size / 2
    z = row * size * sqrt(3) / 2

Every row is shifted half a triangle further than the one below it, so the
upward and downward triangles of neighbouring cells share edges exactly.
Shifting only odd rows (a parity offset) leaves seams between rows and is
not used.

After all triangles are built the whole set is translated once by
(-width * size / 2, -height * row_height / 2) so the lattice sits around the
world origin.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tonnetz.constants import BASE_OCTAVE, VERTEX_KEY_DECIMALS, TriadType
from chuk_mcp_tonnetz.core.chord import TRIAD_SHAPES, lattice_chord
from chuk_mcp_tonnetz.lattice.grid import PitchClassGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A position on the ground (x/z) plane."""

    x: float
    z: float

    def translated(self, dx: float, dz: float) -> Point:
        return Point(self.x + dx, self.z + dz)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "z": self.z}


@dataclass(frozen=True)
class Vertex:
    """A grid cell's pitch data at its resolved world position."""

    x: float
    z: float
    pitch_class: int
    note_name: str

    def translated(self, dx: float, dz: float) -> Vertex:
        return Vertex(self.x + dx, self.z + dz, self.pitch_class, self.note_name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "z": self.z,
            "pitch_class": self.pitch_class,
            "note_name": self.note_name,
        }


@dataclass(frozen=True, order=True)
class TriangleKey:
    """
    Portable identity of a lattice region.

    Two triangles are the same region when row, col and type match,
    regardless of which object instance carries them.
    """

    row: int
    col: int
    type: TriadType

    def __str__(self) -> str:
        return f"({self.row}, {self.col}, {self.type.value})"

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "col": self.col, "type": self.type.value}


@dataclass(frozen=True)
class Triangle:
    """
    One triad region of the lattice.

    Two triangles per tessellation cell (row, col): the upward major triangle
    and the downward minor triangle.
    """

    type: TriadType
    vertices: tuple[Vertex, Vertex, Vertex]
    center: Point
    chord: tuple[int, int, int]
    chord_name: str
    row: int
    col: int

    def __post_init__(self) -> None:
        if len(self.vertices) != 3:
            raise ValueError(f"Triangle needs 3 vertices, got {len(self.vertices)}")
        if len(self.chord) != 3:
            raise ValueError(f"Triangle needs a 3-note chord, got {len(self.chord)}")

    @property
    def key(self) -> TriangleKey:
        return TriangleKey(self.row, self.col, self.type)

    @property
    def note_names(self) -> list[str]:
        """Vertex note names in traversal order."""
        return [v.note_name for v in self.vertices]

    @property
    def notes_label(self) -> str:
        """Vertex note names joined for display, e.g. 'C - G - E'."""
        return " - ".join(self.note_names)

    def translated(self, dx: float, dz: float) -> Triangle:
        """Copy of this triangle moved by (dx, dz)."""
        v0, v1, v2 = self.vertices
        return Triangle(
            type=self.type,
            vertices=(v0.translated(dx, dz), v1.translated(dx, dz), v2.translated(dx, dz)),
            center=self.center.translated(dx, dz),
            chord=self.chord,
            chord_name=self.chord_name,
            row=self.row,
            col=self.col,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "row": self.row,
            "col": self.col,
            "vertices": [v.to_dict() for v in self.vertices],
            "center": self.center.to_dict(),
            "chord": list(self.chord),
            "chord_name": self.chord_name,
            "notes": self.notes_label,
        }


def row_height(triangle_size: float) -> float:
    """Height of an equilateral triangle with the given side."""
    return triangle_size * math.sqrt(3) / 2


def vertex_position(row: int, col: int, triangle_size: float) -> Point:
    """World position of grid vertex (row, col) before centering."""
    return Point(
        x=col * triangle_size + row * (triangle_size / 2),
        z=row * row_height(triangle_size),
    )


def centering_offset(width: int, height: int, triangle_size: float) -> tuple[float, float]:
    """Translation applied once to move the lattice around the origin."""
    return (-width * triangle_size / 2, -height * row_height(triangle_size) / 2)


class TonnetzTessellation:
    """
    The triangle set of a Tonnetz lattice.

    Triangles are listed cell by cell in row-major order, major before minor,
    which fixes the tie-break order for points on shared edges.

    Use build() for the normal centered lattice. Constructing directly gives
    the uncentered set; center() may then be called, and only its first call
    has any effect.
    """

    def __init__(
        self,
        grid: PitchClassGrid,
        triangle_size: float,
        base_octave: int = BASE_OCTAVE,
    ):
        if triangle_size <= 0:
            raise ValueError(f"Triangle size must be > 0, got {triangle_size}")
        self.grid = grid
        self.triangle_size = triangle_size
        self.base_octave = base_octave
        self.offset: tuple[float, float] = (0.0, 0.0)
        self._centered = False
        self._triangles: tuple[Triangle, ...] = tuple(self._build_triangles())
        self._index: dict[TriangleKey, Triangle] = {t.key: t for t in self._triangles}

    @classmethod
    def build(
        cls,
        grid: PitchClassGrid,
        triangle_size: float,
        base_octave: int = BASE_OCTAVE,
    ) -> TonnetzTessellation:
        """Build and center the tessellation for a grid."""
        tessellation = cls(grid, triangle_size, base_octave)
        tessellation.center()
        logger.info(
            f"Built Tonnetz tessellation: {grid.width}x{grid.height} cells, "
            f"{len(tessellation)} triangles"
        )
        return tessellation

    def _vertex(self, row: int, col: int) -> Vertex:
        cell = self.grid.cell(row, col)
        pos = vertex_position(row, col, self.triangle_size)
        return Vertex(pos.x, pos.z, cell.pitch_class, cell.note_name)

    def _triangle(self, row: int, col: int, triad_type: TriadType) -> Triangle:
        shape = TRIAD_SHAPES[triad_type]
        v0, v1, v2 = (self._vertex(row + dr, col + dc) for dr, dc in shape.vertices)
        chord = lattice_chord(self.grid.pitch_class, row, col, triad_type, self.base_octave)
        return Triangle(
            type=triad_type,
            vertices=(v0, v1, v2),
            center=Point((v0.x + v1.x + v2.x) / 3, (v0.z + v1.z + v2.z) / 3),
            chord=chord.notes,
            chord_name=chord.name,
            row=row,
            col=col,
        )

    def _build_triangles(self) -> Iterator[Triangle]:
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                yield self._triangle(row, col, TriadType.MAJOR)
                yield self._triangle(row, col, TriadType.MINOR)

    @property
    def centered(self) -> bool:
        return self._centered

    def center(self) -> bool:
        """
        Translate every vertex and center so the lattice sits at the origin.

        Returns:
            True if the translation was applied, False if it already had been
        """
        if self._centered:
            return False

        dx, dz = centering_offset(self.grid.width, self.grid.height, self.triangle_size)
        self._triangles = tuple(t.translated(dx, dz) for t in self._triangles)
        self._index = {t.key: t for t in self._triangles}
        self.offset = (dx, dz)
        self._centered = True
        return True

    @property
    def triangles(self) -> tuple[Triangle, ...]:
        return self._triangles

    def get(self, key: TriangleKey) -> Triangle | None:
        """Look up a triangle by its region key."""
        return self._index.get(key)

    def bounds(self) -> tuple[Point, Point]:
        """Axis-aligned (min, max) corners of all triangle vertices."""
        xs = [v.x for t in self._triangles for v in t.vertices]
        zs = [v.z for t in self._triangles for v in t.vertices]
        if not xs:
            return Point(0.0, 0.0), Point(0.0, 0.0)
        return Point(min(xs), min(zs)), Point(max(xs), max(zs))

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def __len__(self) -> int:
        return len(self._triangles)

    def __repr__(self) -> str:
        return (
            f"TonnetzTessellation({self.grid.width}x{self.grid.height}, "
            f"size={self.triangle_size}, centered={self._centered})"
        )


def unique_vertices(triangles: Iterable[Triangle]) -> list[Vertex]:
    """
    Distinct lattice vertices, first occurrence wins.

    Shared corners are matched on coordinates rounded to two decimals, so
    each grid point gets exactly one label.
    """
    seen: dict[tuple[float, float], Vertex] = {}
    for triangle in triangles:
        for v in triangle.vertices:
            key = (round(v.x, VERTEX_KEY_DECIMALS), round(v.z, VERTEX_KEY_DECIMALS))
            if key not in seen:
                seen[key] = v
    return list(seen.values())
