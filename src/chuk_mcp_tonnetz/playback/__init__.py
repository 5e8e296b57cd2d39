"""
Playback - chord voices handed to an external audio collaborator.
"""

from chuk_mcp_tonnetz.playback.voices import (
    ChordPlayer,
    ChordSink,
    RecordingSink,
    Voice,
    VoiceSet,
)

__all__ = [
    "ChordPlayer",
    "ChordSink",
    "RecordingSink",
    "Voice",
    "VoiceSet",
]
