"""
Chord primitives - ChordQuality, Chord and the lattice derivation rules.

Every tessellation cell (row, col) owns four grid corners:

    c10 --- c11
     | \\     |
     |   \\   |
     c00 --- c01

The upward (major) triangle is [c00, c01, c10]: root c00, third c10 (+4),
fifth c01 (+7). The downward (minor) triangle is [c10, c01, c11]: root c10,
third c01 (+3 from c10), fifth c11 (+7 from c10).

Chord notes are always read straight off the vertex pitch classes, so the
sounding notes and the displayed vertices can never disagree.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_tonnetz.constants import BASE_OCTAVE, ErrorMessages, TriadType
from chuk_mcp_tonnetz.core.pitch import Interval, PitchClass, check_pitch_class, note_name

# Corner offsets (d_row, d_col) relative to the cell's c00
Corner = tuple[int, int]


@dataclass(frozen=True)
class TriadShape:
    """
    Where a triangle's vertices and chord tones sit inside a cell.

    vertices is the traversal order used for geometry and labels.
    root/third/fifth pick the chord tones in playback order.
    """

    vertices: tuple[Corner, Corner, Corner]
    root: Corner
    third: Corner
    fifth: Corner


TRIAD_SHAPES: dict[TriadType, TriadShape] = {
    TriadType.MAJOR: TriadShape(
        vertices=((0, 0), (0, 1), (1, 0)),
        root=(0, 0),
        third=(1, 0),
        fifth=(0, 1),
    ),
    TriadType.MINOR: TriadShape(
        vertices=((1, 0), (0, 1), (1, 1)),
        root=(1, 0),
        third=(0, 1),
        fifth=(1, 1),
    ),
}


def parse_triad_type(value: str | TriadType) -> TriadType:
    """Coerce 'major' / 'minor' (any case) to a TriadType."""
    if isinstance(value, TriadType):
        return value
    try:
        return TriadType(value.strip().lower())
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_TRIAD_TYPE.format(value=value)) from None


@dataclass(frozen=True)
class ChordQuality:
    """
    A triad quality defined by its intervals from the root.

    Immutable and hashable.
    """

    intervals: tuple[Interval, Interval, Interval]
    name: str
    suffix: str

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]

    @classmethod
    def for_triad(cls, triad_type: TriadType) -> ChordQuality:
        """Quality carried by a triangle orientation."""
        return cls.MAJOR if triad_type == TriadType.MAJOR else cls.MINOR

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """Pitch classes of the triad in root, third, fifth order."""
        return [root.transpose(interval.semitones) for interval in self.intervals]

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """MIDI notes stacked above root_midi, ascending."""
        return [root_midi + interval.semitones for interval in self.intervals]

    def matches(self, root: int, third: int, fifth: int) -> bool:
        """Whether three pitch classes spell this quality from root."""
        return [
            (third - root) % 12,
            (fifth - root) % 12,
        ] == [self.intervals[1].semitones, self.intervals[2].semitones]

    def __str__(self) -> str:
        return self.name


ChordQuality.MAJOR = ChordQuality(
    (Interval.UNISON, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH), "major", ""
)
ChordQuality.MINOR = ChordQuality(
    (Interval.UNISON, Interval.MINOR_THIRD, Interval.PERFECT_FIFTH), "minor", "m"
)


@dataclass(frozen=True)
class Chord:
    """
    A triad with a root pitch class and quality.

    The lattice voicing (the notes actually played) lives on LatticeChord;
    this is the abstract chord used for naming and root-position voicing.
    """

    root: PitchClass
    quality: ChordQuality

    def get_pitches(self) -> list[PitchClass]:
        return self.quality.get_pitches(self.root)

    def get_midi_notes(self, base_octave: int = BASE_OCTAVE) -> list[int]:
        """Root-position voicing with the root in the base octave."""
        return self.quality.get_midi_notes(self.root.to_midi(base_octave))

    def __str__(self) -> str:
        return f"{self.root.spell()}{self.quality.suffix}"


@dataclass(frozen=True)
class LatticeChord:
    """The chord read off one triangle: notes in root, third, fifth order."""

    triad_type: TriadType
    root: PitchClass
    notes: tuple[int, int, int]
    name: str


def chord_name(root_pitch_class: int, triad_type: TriadType) -> str:
    """Display name, e.g. 'C' for C major and 'Em' for E minor."""
    suffix = ChordQuality.for_triad(triad_type).suffix
    return f"{note_name(root_pitch_class)}{suffix}"


def chord_notes(
    root: int, third: int, fifth: int, base_octave: int = BASE_OCTAVE
) -> tuple[int, int, int]:
    """
    MIDI notes for three pitch classes, all placed in the base octave.

    Notes stay inside [base_octave, base_octave + 11]; the voicing is
    whatever inversion that produces.
    """
    return (
        base_octave + check_pitch_class(root),
        base_octave + check_pitch_class(third),
        base_octave + check_pitch_class(fifth),
    )


def lattice_chord(
    pitch_at: Callable[[int, int], int],
    row: int,
    col: int,
    triad_type: TriadType,
    base_octave: int = BASE_OCTAVE,
) -> LatticeChord:
    """
    Derive the chord of the triangle of triad_type in cell (row, col).

    Args:
        pitch_at: Grid lookup returning the pitch class at (row, col)
        row: Cell row
        col: Cell column
        triad_type: Which of the cell's two triangles
        base_octave: MIDI note for pitch class 0

    Returns:
        LatticeChord with notes in root, third, fifth order
    """
    shape = TRIAD_SHAPES[triad_type]

    def corner(offset: Corner) -> int:
        return pitch_at(row + offset[0], col + offset[1])

    root = corner(shape.root)
    notes = chord_notes(root, corner(shape.third), corner(shape.fifth), base_octave)
    return LatticeChord(
        triad_type=triad_type,
        root=PitchClass(root),
        notes=notes,
        name=chord_name(root, triad_type),
    )


def triad_from_root(
    root_pitch_class: int,
    triad_type: TriadType,
    base_octave: int = BASE_OCTAVE,
) -> list[int]:
    """
    Root-position triad stacked above the root in the base octave.

    Unlike the lattice voicing, the third and fifth may exceed
    base_octave + 11 (e.g. A major -> [69, 73, 76]).
    """
    root = PitchClass(check_pitch_class(root_pitch_class))
    return Chord(root, ChordQuality.for_triad(triad_type)).get_midi_notes(base_octave)


def chord_name_from_notes(midi_notes: list[int], triad_type: TriadType) -> str:
    """Name a chord from its first (root) MIDI note."""
    return chord_name(PitchClass.from_midi(midi_notes[0]).value, triad_type)
