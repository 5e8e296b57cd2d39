"""
MCP tool implementations.

Tools are organized by domain:
- lattice - Lattice inspection and point location
- navigation - Agent movement, region tracking and MIDI export
"""

from chuk_mcp_tonnetz.tools.lattice import register_lattice_tools
from chuk_mcp_tonnetz.tools.navigation import register_navigation_tools

__all__ = [
    "register_lattice_tools",
    "register_navigation_tools",
]
