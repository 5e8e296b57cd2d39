"""
Tonnetz Session - process-scoped engine state with an explicit lifecycle.

initialize() builds the lattice once and wires the region tracker, the agent
and (optionally) a chord player. teardown() stops any sounding chord and
drops the state. Everything in between is a synchronous position update.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_tonnetz.agent import Agent
from chuk_mcp_tonnetz.compiler.midi import walk_to_midi
from chuk_mcp_tonnetz.constants import ErrorMessages
from chuk_mcp_tonnetz.lattice.lattice import TonnetzLattice
from chuk_mcp_tonnetz.lattice.region import RegionChange, RegionTracker
from chuk_mcp_tonnetz.lattice.tessellation import Triangle
from chuk_mcp_tonnetz.models.config import TonnetzConfig
from chuk_mcp_tonnetz.playback.voices import ChordPlayer, ChordSink

logger = logging.getLogger(__name__)


class TonnetzSession:
    """
    One user's walk over one lattice.

    The lattice is read-only after initialize(); the only mutable state is
    the agent, the active region and the history of region changes.
    """

    def __init__(self, config: TonnetzConfig | None = None, sink: ChordSink | None = None):
        """
        Create an uninitialized session.

        Args:
            config: Engine configuration (defaults if omitted)
            sink: Optional audio collaborator receiving region chords
        """
        self.config = config or TonnetzConfig()
        self.sink = sink
        self._lattice: TonnetzLattice | None = None
        self._tracker: RegionTracker | None = None
        self._agent: Agent | None = None
        self._player: ChordPlayer | None = None
        self.history: list[RegionChange] = []

    @property
    def initialized(self) -> bool:
        return self._lattice is not None

    def initialize(self) -> TonnetzSession:
        """Build the lattice and start at the origin. Idempotent."""
        if self._lattice is not None:
            return self

        self._lattice = TonnetzLattice(self.config.lattice)
        self._tracker = RegionTracker(self._lattice.find_triangle_at)
        self._tracker.subscribe(self.history.append)
        if self.sink is not None:
            self._player = ChordPlayer(self.sink, self.config.playback)
            self._tracker.subscribe(self._player)

        self._agent = Agent.from_config(self.config.agent)
        self._tracker.update(self._agent.x, self._agent.z)

        logger.info(f"Tonnetz session initialized: {self._lattice!r}")
        return self

    def teardown(self) -> None:
        """Stop playback and release all state."""
        if self._player is not None:
            self._player.stop()
        self._lattice = None
        self._tracker = None
        self._agent = None
        self._player = None
        self.history = []
        logger.info("Tonnetz session torn down")

    def __enter__(self) -> TonnetzSession:
        return self.initialize()

    def __exit__(self, *exc: object) -> None:
        self.teardown()

    def _require(self) -> tuple[TonnetzLattice, RegionTracker, Agent]:
        if self._lattice is None or self._tracker is None or self._agent is None:
            raise RuntimeError(ErrorMessages.NOT_INITIALIZED)
        return self._lattice, self._tracker, self._agent

    @property
    def lattice(self) -> TonnetzLattice:
        return self._require()[0]

    @property
    def agent(self) -> Agent:
        return self._require()[2]

    @property
    def current(self) -> Triangle | None:
        """The active region, or None outside the lattice."""
        return self._require()[1].current

    @property
    def player(self) -> ChordPlayer | None:
        return self._player

    def move_to(self, x: float, z: float) -> RegionChange | None:
        """Place the agent at (x, z) and update the active region."""
        _, tracker, agent = self._require()
        agent.teleport(x, z)
        return tracker.update(x, z)

    def step(self, dx: float = 0.0, dz: float = 0.0, ticks: int = 1) -> list[RegionChange]:
        """
        Advance the agent by a number of ticks with constant input.

        Returns:
            Every region change that happened along the way
        """
        _, tracker, agent = self._require()
        changes = []
        for _ in range(ticks):
            pos = agent.step(dx, dz)
            change = tracker.update(pos.x, pos.z)
            if change is not None:
                changes.append(change)
        return changes

    def reset(self) -> None:
        """Return the agent to the origin and clear the walk history."""
        _, tracker, agent = self._require()
        if self._player is not None:
            self._player.stop()
        tracker.reset()
        self.history.clear()
        agent.teleport(0.0, 0.0)
        tracker.update(0.0, 0.0)

    def export_walk(self, path: Path) -> int:
        """
        Save the chords visited so far as a MIDI file.

        Returns:
            Number of chords written
        """
        self._require()
        visited = [c for c in self.history if c.entered]
        if not visited:
            raise ValueError(ErrorMessages.NO_REGIONS_VISITED)

        path.parent.mkdir(parents=True, exist_ok=True)
        walk_to_midi(visited, self.config.playback).save(str(path))
        logger.info(f"Exported {len(visited)} chords to {path}")
        return len(visited)
