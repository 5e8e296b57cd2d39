"""
Pydantic models for the Tonnetz engine.

This module provides:
- LatticeConfig: Grid size, triangle size, intervals, base octave
- AgentConfig: Movement speed and friction
- PlaybackConfig: Chord voicing for audio and MIDI export
- TonnetzConfig: The complete configuration
"""

from chuk_mcp_tonnetz.models.config import (
    AgentConfig,
    LatticeConfig,
    PlaybackConfig,
    TonnetzConfig,
)

__all__ = [
    "AgentConfig",
    "LatticeConfig",
    "PlaybackConfig",
    "TonnetzConfig",
]
