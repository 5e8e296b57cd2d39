"""
Pitch-class grid - the vertex lattice of the Tonnetz.

Each column step right adds a perfect fifth, each row step up adds a major
third:

    pitch_class(row, col) = (row * third + col * fifth) mod 12

With the default intervals the grid repeats every 3 rows (3 * 4 = 12) and
every 12 columns (gcd(7, 12) = 1, so no shorter column period exists).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tonnetz.constants import (
    FIFTH_INTERVAL,
    MAJOR_THIRD_INTERVAL,
    ErrorMessages,
)
from chuk_mcp_tonnetz.core.pitch import check_pitch_class, normalize_mod12, note_name


@dataclass(frozen=True)
class GridCell:
    """A single lattice vertex: grid coordinates plus its pitch class."""

    row: int
    col: int
    pitch_class: int
    note_name: str

    def __post_init__(self) -> None:
        check_pitch_class(self.pitch_class)

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "col": self.col,
            "pitch_class": self.pitch_class,
            "note_name": self.note_name,
        }


class PitchClassGrid:
    """
    Dense (height + 1) x (width + 1) grid of pitch classes.

    Built once by generate() and read-only afterwards. width and height count
    tessellation cells, so there is one more vertex than cells on each axis.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: tuple[tuple[GridCell, ...], ...],
        fifth_interval: int,
        third_interval: int,
    ):
        self.width = width
        self.height = height
        self.fifth_interval = fifth_interval
        self.third_interval = third_interval
        self._cells = cells

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        fifth_interval: int = FIFTH_INTERVAL,
        third_interval: int = MAJOR_THIRD_INTERVAL,
    ) -> PitchClassGrid:
        """
        Generate the grid.

        Args:
            width: Number of cells along the fifth (column) axis
            height: Number of cells along the third (row) axis
            fifth_interval: Semitones added per column step
            third_interval: Semitones added per row step

        Returns:
            The generated PitchClassGrid
        """
        if width < 0 or height < 0:
            raise ValueError(ErrorMessages.GRID_SIZE.format(width=width, height=height))

        rows = []
        for row in range(height + 1):
            cells = []
            for col in range(width + 1):
                pc = normalize_mod12(row * third_interval + col * fifth_interval)
                cells.append(GridCell(row=row, col=col, pitch_class=pc, note_name=note_name(pc)))
            rows.append(tuple(cells))

        return cls(width, height, tuple(rows), fifth_interval, third_interval)

    @property
    def rows(self) -> int:
        """Number of vertex rows (height + 1)."""
        return len(self._cells)

    @property
    def cols(self) -> int:
        """Number of vertex columns (width + 1)."""
        return len(self._cells[0]) if self._cells else 0

    def cell(self, row: int, col: int) -> GridCell:
        """Get the vertex at (row, col). Raises IndexError outside the grid."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Grid position ({row}, {col}) outside {self.rows}x{self.cols}")
        return self._cells[row][col]

    def pitch_class(self, row: int, col: int) -> int:
        return self.cell(row, col).pitch_class

    def __iter__(self) -> Iterator[GridCell]:
        """Iterate cells in row-major order."""
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def to_dict(self) -> dict[str, Any]:
        """Serialize as rows of pitch classes plus the generating intervals."""
        return {
            "width": self.width,
            "height": self.height,
            "fifth_interval": self.fifth_interval,
            "third_interval": self.third_interval,
            "pitch_classes": [[c.pitch_class for c in row] for row in self._cells],
        }

    def __repr__(self) -> str:
        return f"PitchClassGrid({self.width}x{self.height})"
