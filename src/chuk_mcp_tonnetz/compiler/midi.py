"""
MIDI export - a walk through the lattice as a chord progression.

Each region entered during a walk becomes one block chord of fixed length.
Leaving the lattice produces no chord. Conversion to a mido MidiFile is
deterministic: same walk -> same file.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_tonnetz.lattice.region import RegionChange
from chuk_mcp_tonnetz.models.config import PlaybackConfig

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks, absolute from the start of the track.
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat length to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))


def chord_events(
    chords: Iterable[Sequence[int]],
    beats_per_chord: float = 1.0,
    velocity: float = 0.8,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay chords end to end, one block chord per entry.

    Returns:
        MidiEvents ordered by start time, then by chord order
    """
    length = beats_to_ticks(beats_per_chord, ticks_per_beat)
    vel = velocity_float_to_int(velocity)

    events: list[MidiEvent] = []
    for index, chord in enumerate(chords):
        start = index * length
        events.extend(
            MidiEvent(
                pitch=note,
                start_ticks=start,
                duration_ticks=length,
                velocity=vel,
                channel=channel,
            )
            for note in chord
        )
    return events


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
    track_name: str | None = None,
) -> MidiFile:
    """
    Convert MidiEvents to a single-track MidiFile.

    Note-offs sort before note-ons at the same tick so consecutive chords
    sharing a note re-articulate it cleanly.
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timeline: list[tuple[int, Message]] = []
    for event in events:
        timeline.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                ),
            )
        )
        timeline.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
            )
        )

    timeline.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current = 0
    for abs_time, msg in timeline:
        track.append(msg.copy(time=abs_time - current))
        current = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def walk_chords(changes: Iterable[RegionChange]) -> list[tuple[int, ...]]:
    """Chords of the regions entered during a walk, in visiting order."""
    return [change.chord for change in changes if change.entered]


def walk_to_midi(
    changes: Iterable[RegionChange],
    config: PlaybackConfig | None = None,
) -> MidiFile:
    """
    Render a walk's region changes as a block-chord MIDI file.

    Args:
        changes: RegionChange history, oldest first
        config: Tempo, chord length, velocity and channel

    Returns:
        A mido MidiFile ready to be saved
    """
    config = config or PlaybackConfig()
    changes = list(changes)
    names = [c.chord_name for c in changes if c.entered]

    events = chord_events(
        walk_chords(changes),
        beats_per_chord=config.beats_per_chord,
        velocity=config.velocity,
        channel=config.channel,
    )
    return events_to_midi(
        events,
        tempo_bpm=config.tempo,
        track_name=" ".join(n for n in names if n) or None,
    )
