"""
MIDI export of lattice walks.
"""

from chuk_mcp_tonnetz.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    chord_events,
    events_to_midi,
    velocity_float_to_int,
    walk_chords,
    walk_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "chord_events",
    "events_to_midi",
    "velocity_float_to_int",
    "walk_chords",
    "walk_to_midi",
]
