"""
Agent movement - turns directional input into positions on the x/z plane.

Per tick: input accelerates velocity by `speed` on each axis, friction
scales velocity, then velocity is added to position. Input components are
expected in -1..1 (a held key is 1 or -1, released is 0).
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tonnetz.constants import DEFAULT_AGENT_FRICTION, DEFAULT_AGENT_SPEED
from chuk_mcp_tonnetz.lattice.tessellation import Point
from chuk_mcp_tonnetz.models.config import AgentConfig


@dataclass
class Agent:
    """A moving point with velocity, starting at the lattice center."""

    x: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vz: float = 0.0
    speed: float = DEFAULT_AGENT_SPEED
    friction: float = DEFAULT_AGENT_FRICTION

    @classmethod
    def from_config(cls, config: AgentConfig, x: float = 0.0, z: float = 0.0) -> Agent:
        return cls(x=x, z=z, speed=config.speed, friction=config.friction)

    @property
    def position(self) -> Point:
        return Point(self.x, self.z)

    def step(self, dx: float = 0.0, dz: float = 0.0) -> Point:
        """
        Advance one tick.

        Args:
            dx: Input along x (-1 left, 1 right)
            dz: Input along z (-1 forward, 1 back)

        Returns:
            The new position
        """
        self.vx = (self.vx + dx * self.speed) * self.friction
        self.vz = (self.vz + dz * self.speed) * self.friction
        self.x += self.vx
        self.z += self.vz
        return self.position

    def teleport(self, x: float, z: float) -> Point:
        """Jump to (x, z) and stop."""
        self.x, self.z = x, z
        self.vx = self.vz = 0.0
        return self.position

    @property
    def is_moving(self) -> bool:
        return abs(self.vx) > 0.01 or abs(self.vz) > 0.01
