"""
Core music primitives for the Tonnetz.

- PitchClass / Interval and the canonical note-name table
- ChordQuality / Chord and the per-cell triad derivation rules
"""

from chuk_mcp_tonnetz.core.chord import (
    TRIAD_SHAPES,
    Chord,
    ChordQuality,
    LatticeChord,
    TriadShape,
    chord_name,
    chord_name_from_notes,
    chord_notes,
    lattice_chord,
    parse_triad_type,
    triad_from_root,
)
from chuk_mcp_tonnetz.core.pitch import (
    NOTE_NAMES,
    Interval,
    PitchClass,
    check_pitch_class,
    midi_to_frequency,
    normalize_mod12,
    note_name,
)

__all__ = [
    # Pitch
    "NOTE_NAMES",
    "Interval",
    "PitchClass",
    "check_pitch_class",
    "midi_to_frequency",
    "normalize_mod12",
    "note_name",
    # Chord
    "TRIAD_SHAPES",
    "Chord",
    "ChordQuality",
    "LatticeChord",
    "TriadShape",
    "chord_name",
    "chord_name_from_notes",
    "chord_notes",
    "lattice_chord",
    "parse_triad_type",
    "triad_from_root",
]
