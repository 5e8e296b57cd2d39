"""
Region tracking - the active-region state machine.

States are NoActiveRegion (current is None) and InRegion(key). Each position
update locates the agent; when the located key differs from the current one
a RegionChange is emitted to listeners. Re-entering the same region on
successive updates emits nothing.

Regions are compared by TriangleKey, never by object identity.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tonnetz.lattice.locator import find_triangle_at
from chuk_mcp_tonnetz.lattice.tessellation import Point, Triangle, TriangleKey

logger = logging.getLogger(__name__)

Locate = Callable[[float, float], Triangle | None]
RegionListener = Callable[["RegionChange"], None]


@dataclass(frozen=True)
class RegionChange:
    """
    Emitted when the active region changes.

    triangle is None when the agent has left the lattice.
    """

    previous: TriangleKey | None
    current: TriangleKey | None
    triangle: Triangle | None
    position: Point

    @property
    def entered(self) -> bool:
        return self.triangle is not None

    @property
    def chord(self) -> tuple[int, ...]:
        return self.triangle.chord if self.triangle else ()

    @property
    def chord_name(self) -> str | None:
        return self.triangle.chord_name if self.triangle else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous": self.previous.to_dict() if self.previous else None,
            "current": self.current.to_dict() if self.current else None,
            "position": self.position.to_dict(),
            "chord": list(self.chord),
            "chord_name": self.chord_name,
            "notes": self.triangle.notes_label if self.triangle else None,
        }


class RegionTracker:
    """
    Tracks which lattice region the agent is in.

    Owned by the host loop and updated once per tick; never shared across
    threads.
    """

    def __init__(self, locate: Locate):
        self._locate = locate
        self._current: Triangle | None = None
        self._listeners: list[RegionListener] = []

    @classmethod
    def for_triangles(cls, triangles: Sequence[Triangle]) -> RegionTracker:
        """Tracker using a linear scan over a fixed triangle list."""
        return cls(lambda x, z: find_triangle_at(x, z, triangles))

    @property
    def current(self) -> Triangle | None:
        return self._current

    @property
    def current_key(self) -> TriangleKey | None:
        return self._current.key if self._current else None

    def subscribe(self, listener: RegionListener) -> None:
        """Register a callback for region changes."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RegionListener) -> None:
        self._listeners.remove(listener)

    def update(self, x: float, z: float) -> RegionChange | None:
        """
        Feed a new agent position.

        Returns:
            The RegionChange if the active region changed, else None
        """
        triangle = self._locate(x, z)
        new_key = triangle.key if triangle else None
        old_key = self.current_key

        if new_key == old_key:
            return None

        self._current = triangle
        change = RegionChange(
            previous=old_key,
            current=new_key,
            triangle=triangle,
            position=Point(x, z),
        )
        if triangle:
            logger.debug(f"Region {old_key} -> {new_key}: {triangle.chord_name}")
        else:
            logger.debug(f"Region {old_key} -> outside lattice")

        for listener in list(self._listeners):
            listener(change)
        return change

    def reset(self) -> None:
        """Return to NoActiveRegion without emitting an event."""
        self._current = None
