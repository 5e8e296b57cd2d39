"""
Pitch primitives - PitchClass, Interval and the canonical note-name table.

PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the distance between pitches in semitones.

There is exactly one spelling table. Names are sharp-preferred everywhere
they are shown or logged (chord names, vertex labels, log lines).
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from chuk_mcp_tonnetz.constants import ErrorMessages, LatticeInvariantError

# Canonical spelling, indexed by pitch class
NOTE_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)


def normalize_mod12(n: int) -> int:
    """
    Reduce an integer to its pitch-class residue in 0-11.

    Negative inputs wrap upward: -1 -> 11, -12 -> 0.
    """
    return ((n % 12) + 12) % 12


def check_pitch_class(value: int) -> int:
    """Return value unchanged, or raise LatticeInvariantError if outside 0-11."""
    if not 0 <= value <= 11:
        raise LatticeInvariantError(ErrorMessages.PITCH_CLASS_RANGE.format(value=value))
    return value


def note_name(pitch_class: int) -> str:
    """
    Canonical display name for a pitch class.

    Raises:
        LatticeInvariantError: If pitch_class is outside 0-11. Callers only
            ever pass normalized values, so this indicates a bug.
    """
    return NOTE_NAMES[check_pitch_class(pitch_class)]


def midi_to_frequency(midi_note: int) -> float:
    """Equal-tempered frequency in Hz, A4 (69) = 440."""
    return 440.0 * 2.0 ** ((midi_note - 69) / 12)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass(normalize_mod12(self.value + semitones))

    def to_midi(self, base_octave: int) -> int:
        """MIDI note number, where base_octave is the MIDI note for C."""
        return base_octave + self.value

    def spell(self) -> str:
        """Get the canonical display name."""
        return NOTE_NAMES[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(normalize_mod12(midi_note))


class Interval:
    """
    Distance between pitches in semitones.

    The Tonnetz axes are intervals: columns step by a perfect fifth,
    rows by a major third, and the anti-diagonal by a minor third.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        names = {0: "P1", 3: "m3", 4: "M3", 7: "P5", 12: "P8"}
        return names.get(self._semitones, f"{self._semitones}st")


Interval.UNISON = Interval(0)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FIFTH = Interval(7)
