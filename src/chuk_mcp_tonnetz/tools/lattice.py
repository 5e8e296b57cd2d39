"""
Lattice tools - MCP tools for inspecting the Tonnetz and locating points.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonnetz.constants import ErrorMessages
from chuk_mcp_tonnetz.core.chord import parse_triad_type
from chuk_mcp_tonnetz.session import TonnetzSession

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_lattice_tools(
    mcp: ChukMCPServer,
    session: TonnetzSession,
) -> dict[str, Any]:
    """
    Register lattice inspection tools with the MCP server.

    Args:
        mcp: The MCP server instance
        session: The initialized Tonnetz session

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_get_lattice(include_triangles: bool = False) -> str:
        """
        Describe the Tonnetz lattice.

        Returns the grid size, world-space extent, the pitch-class grid and
        the labelled vertices. Optionally includes every triangle with its
        vertices, center, chord and chord name.

        Args:
            include_triangles: Include the full triangle list (default: False)

        Returns:
            JSON string with lattice details

        Example:
            tonnetz_get_lattice(include_triangles=True)
        """
        try:
            lattice = session.lattice
            result: dict[str, Any] = {
                "status": "success",
                "lattice": lattice.summary(),
                "grid": lattice.grid.to_dict(),
                "vertices": [v.to_dict() for v in lattice.vertices()],
            }
            if include_triangles:
                result["triangles"] = [t.to_dict() for t in lattice.triangles]
            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to describe lattice")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_get_lattice"] = tonnetz_get_lattice

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_locate(x: float, z: float) -> str:
        """
        Find the triangle containing a point.

        Points on a shared edge belong to the first triangle in lattice
        order. A point outside the lattice is not an error: "triangle" is
        null.

        Args:
            x: World x coordinate
            z: World z coordinate

        Returns:
            JSON string with the containing triangle or null

        Example:
            tonnetz_locate(x=0.0, z=0.0)
        """
        try:
            triangle = session.lattice.find_triangle_at(x, z)
            return json.dumps(
                {
                    "status": "success",
                    "position": {"x": x, "z": z},
                    "triangle": triangle.to_dict() if triangle else None,
                }
            )
        except Exception as e:
            logger.exception("Failed to locate point")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_locate"] = tonnetz_locate

    @mcp.tool  # type: ignore[arg-type]
    async def tonnetz_describe_triangle(row: int, col: int, type: str) -> str:
        """
        Describe one triangle by its region key.

        Args:
            row: Cell row
            col: Cell column
            type: 'major' (upward) or 'minor' (downward)

        Returns:
            JSON string with the triangle's geometry and chord

        Example:
            tonnetz_describe_triangle(row=0, col=0, type="minor")
        """
        try:
            triad_type = parse_triad_type(type)
            triangle = session.lattice.get_triangle(row, col, triad_type)
            if triangle is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.TRIANGLE_NOT_FOUND.format(
                            row=row, col=col, type=triad_type.value
                        ),
                    }
                )
            return json.dumps({"status": "success", "triangle": triangle.to_dict()})
        except Exception as e:
            logger.exception("Failed to describe triangle")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonnetz_describe_triangle"] = tonnetz_describe_triangle

    return tools
