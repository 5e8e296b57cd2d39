"""
Navigation tools - MCP tools for moving the agent and exporting the walk.

Moving reports region changes the way the host loop would see them: a new
chord and name on entry, nothing while staying in the same region.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonnetz.constants import SuccessMessages
from chuk_mcp_tonnetz.lattice.region import RegionChange
from chuk_mcp_tonnetz.session import TonnetzSession

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _change_message(change: RegionChange | None, session: TonnetzSession) -> str:
    if change is None:
        current = session.current
        if current is None:
            return SuccessMessages.REGION_EXITED
        return SuccessMessages.REGION_UNCHANGED.format(chord_name=current.chord_name)
    if change.triangle is None:
        return SuccessMessages.REGION_EXITED
    return SuccessMessages.REGION_CHANGED.format(
        chord_name=change.triangle.chord_name, notes=change.triangle.notes_label
    )


def _region(session: TonnetzSession) -> dict[str, Any] | None:
    current = session.current
    return current.to_dict() if current else None


def register_navigation_tools(
    mcp: ChukMCPServer,
    session: TonnetzSession,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register agent movement and export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The initialized Tonnetz session
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_move_to(x: float, z: float) -> str:
        """
        Move the agent to a position.

        Args:
            x: World x coordinate
            z: World z coordinate

        Returns:
            JSON string with "changed", the region change (if any) and the
            active region

        Example:
            tonnetz_move_to(x=1.5, z=-0.5)
        """
        try:
            change = session.move_to(x, z)
            return json.dumps(
                {
                    "status": "success",
                    "changed": change is not None,
                    "change": change.to_dict() if change else None,
                    "region": _region(session),
                    "message": _change_message(change, session),
                }
            )
        except Exception as e:
            logger.exception("Failed to move agent")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_move_to"] = tonnetz_move_to

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_step(dx: float = 0.0, dz: float = 0.0, ticks: int = 60) -> str:
        """
        Push the agent with constant input for a number of ticks.

        Input follows held movement keys: dx=1 right, dx=-1 left,
        dz=-1 forward, dz=1 back. Velocity decays with friction.

        Args:
            dx: Input along x (-1 to 1)
            dz: Input along z (-1 to 1)
            ticks: Number of update ticks (default: 60)

        Returns:
            JSON string with the agent position and every region change

        Example:
            tonnetz_step(dx=1, ticks=600)
        """
        try:
            if ticks < 0:
                raise ValueError(f"Ticks must be >= 0, got {ticks}")
            changes = session.step(dx, dz, ticks)
            agent = session.agent
            return json.dumps(
                {
                    "status": "success",
                    "position": agent.position.to_dict(),
                    "velocity": {"x": agent.vx, "z": agent.vz},
                    "changes": [c.to_dict() for c in changes],
                    "region": _region(session),
                }
            )
        except Exception as e:
            logger.exception("Failed to step agent")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_step"] = tonnetz_step

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_current_region() -> str:
        """
        Get the active region, the sounding chord and the walk so far.

        Returns:
            JSON string with the active region and visited chord names

        Example:
            tonnetz_current_region()
        """
        try:
            player = session.player
            sounding = player.current.notes if player and player.current else []
            return json.dumps(
                {
                    "status": "success",
                    "position": session.agent.position.to_dict(),
                    "region": _region(session),
                    "sounding": sounding,
                    "visited": [c.chord_name for c in session.history if c.entered],
                }
            )
        except Exception as e:
            logger.exception("Failed to get current region")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_current_region"] = tonnetz_current_region

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_reset() -> str:
        """
        Return the agent to the lattice center and clear the walk.

        Returns:
            JSON string with the starting region
        """
        try:
            session.reset()
            return json.dumps(
                {
                    "status": "success",
                    "region": _region(session),
                    "message": SuccessMessages.SESSION_RESET,
                }
            )
        except Exception as e:
            logger.exception("Failed to reset session")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_reset"] = tonnetz_reset

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_export_walk_midi(output_name: str = "tonnetz_walk") -> str:
        """
        Export the chords visited so far as a MIDI file.

        One block chord per region entered, in visiting order.

        Args:
            output_name: Output filename (without .mid extension)

        Returns:
            JSON string with the file path and chord count

        Example:
            tonnetz_export_walk_midi(output_name="my-walk")
        """
        try:
            output_path = output_dir / f"{output_name}.mid"
            count = session.export_walk(output_path)
            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": count,
                    "message": SuccessMessages.WALK_EXPORTED.format(
                        count=count, path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export walk")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_export_walk_midi"] = tonnetz_export_walk_midi

    return tools
