#!/usr/bin/env python3
"""
Async Tonnetz MCP Server using chuk-mcp-server

This server exposes a neo-Riemannian Tonnetz as MCP tools. The lattice is
built once at startup; an agent walks over it and every triangle it enters
selects a major or minor triad.

The server provides tools for:
- Inspecting the lattice (grid, triangles, labelled vertices)
- Locating the triangle under a point
- Moving the agent and tracking region changes
- Exporting the chords of a walk to a MIDI file
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tonnetz.config import ConfigLoader
from chuk_mcp_tonnetz.playback import RecordingSink
from chuk_mcp_tonnetz.session import TonnetzSession
from chuk_mcp_tonnetz.tools import register_lattice_tools, register_navigation_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tonnetz")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_DIR = Path(os.environ.get("TONNETZ_CONFIG_DIR", BASE_PATH))
OUTPUT_DIR = BASE_PATH / "output"

# Create the session
config_loader = ConfigLoader(project_path=CONFIG_DIR)
session = TonnetzSession(config_loader.get_config(), sink=RecordingSink()).initialize()

# Register all tools
lattice_tools = register_lattice_tools(mcp, session)
navigation_tools = register_navigation_tools(mcp, session, OUTPUT_DIR)

# Export tool functions for direct access
tonnetz_get_lattice = lattice_tools["tonnetz_get_lattice"]
tonnetz_locate = lattice_tools["tonnetz_locate"]
tonnetz_describe_triangle = lattice_tools["tonnetz_describe_triangle"]

tonnetz_move_to = navigation_tools["tonnetz_move_to"]
tonnetz_step = navigation_tools["tonnetz_step"]
tonnetz_current_region = navigation_tools["tonnetz_current_region"]
tonnetz_reset = navigation_tools["tonnetz_reset"]
tonnetz_export_walk_midi = navigation_tools["tonnetz_export_walk_midi"]

logger.info("CHUK Tonnetz MCP Server initialized")
logger.info(f"  Config dir: {CONFIG_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
