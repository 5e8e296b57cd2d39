"""
Constants and enums for the Tonnetz engine.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# Lattice defaults
DEFAULT_GRID_WIDTH = 12
DEFAULT_GRID_HEIGHT = 8
DEFAULT_TRIANGLE_SIZE = 3.0

# Interval defaults (semitones)
FIFTH_INTERVAL = 7  # Column step
MAJOR_THIRD_INTERVAL = 4  # Row step
MINOR_THIRD_INTERVAL = 3

# MIDI note for pitch class 0 (middle C), producing notes 60-71
BASE_OCTAVE = 60

# Agent movement (per update tick)
DEFAULT_AGENT_SPEED = 0.00167
DEFAULT_AGENT_FRICTION = 0.95

# Playback defaults
DEFAULT_CHORD_DURATION = 0.8  # Seconds
DEFAULT_MASTER_GAIN = 0.3

# Label placement rounds vertex coordinates to this many decimals
VERTEX_KEY_DECIMALS = 2


class TriadType(str, Enum):
    """Triangle orientation and the triad quality it carries."""

    MAJOR = "major"  # Upward triangle
    MINOR = "minor"  # Downward triangle


class LatticeInvariantError(AssertionError):
    """
    A construction invariant of the lattice was violated.

    Raised for pitch classes or note-name lookups outside 0-11. This is a
    programming error, never a recoverable condition.
    """


class ErrorMessages:
    """Standardized error messages."""

    NOT_INITIALIZED = "Session not initialized. Call initialize() first."
    PITCH_CLASS_RANGE = "Pitch class must be 0-11, got {value}"
    TRIANGLE_NOT_FOUND = "Triangle ({row}, {col}, {type}) not found in lattice."
    INVALID_TRIAD_TYPE = "Invalid triad type: '{value}'. Expected 'major' or 'minor'."
    NO_REGIONS_VISITED = "No regions visited yet. Move the agent onto the lattice first."
    GRID_SIZE = "Grid dimensions must be >= 0, got width={width}, height={height}"


class SuccessMessages:
    """Standardized success messages."""

    REGION_CHANGED = "Entered {chord_name} ({notes})."
    REGION_EXITED = "Left the lattice."
    REGION_UNCHANGED = "Still in {chord_name}."
    WALK_EXPORTED = "Exported {count} chords to {path}."
    SESSION_RESET = "Session reset."
