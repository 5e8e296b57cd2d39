"""
Voice management - scoped ownership of sounding chord voices.

The engine never talks to an audio library. It hands chords to a ChordSink
(an oscillator bank, a MIDI port, a test double) and guarantees every chord
it starts is stopped again: entering a new region, leaving the lattice and
an explicit stop() all release the current VoiceSet.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import TracebackType
from typing import Protocol

from chuk_mcp_tonnetz.core.pitch import midi_to_frequency
from chuk_mcp_tonnetz.lattice.region import RegionChange
from chuk_mcp_tonnetz.models.config import PlaybackConfig

logger = logging.getLogger(__name__)


class ChordSink(Protocol):
    """Audio collaborator interface."""

    def play_chord(self, voices: Sequence[Voice], duration: float, gain: float) -> None: ...

    def stop_all(self) -> None: ...


@dataclass(frozen=True)
class Voice:
    """One sounding note."""

    note: int
    frequency: float

    @classmethod
    def from_midi(cls, note: int) -> Voice:
        return cls(note=note, frequency=midi_to_frequency(note))


class VoiceSet:
    """
    The voices of one chord, released exactly once.

    Usage:
        with VoiceSet(sink, chord, duration=0.8) as voices:
            ...
        # sink.stop_all() has been called
    """

    def __init__(
        self,
        sink: ChordSink,
        notes: Sequence[int],
        duration: float,
        gain: float = 1.0,
    ):
        self.sink = sink
        self.voices = tuple(Voice.from_midi(n) for n in notes)
        self.duration = duration
        self.gain = gain
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def notes(self) -> list[int]:
        return [v.note for v in self.voices]

    def acquire(self) -> VoiceSet:
        """Start the chord. Acquiring an active set is a no-op."""
        if not self._active:
            self.sink.play_chord(self.voices, self.duration, self.gain)
            self._active = True
        return self

    def release(self) -> None:
        """Stop the chord. Releasing twice is a no-op."""
        if self._active:
            self._active = False
            self.sink.stop_all()

    def __enter__(self) -> VoiceSet:
        return self.acquire()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class ChordPlayer:
    """
    RegionChange listener driving a ChordSink.

    Holds at most one active VoiceSet; every region change releases it
    before the next one is acquired.
    """

    def __init__(self, sink: ChordSink, config: PlaybackConfig | None = None):
        self.sink = sink
        self.config = config or PlaybackConfig()
        self._current: VoiceSet | None = None

    @property
    def current(self) -> VoiceSet | None:
        return self._current

    def __call__(self, change: RegionChange) -> None:
        self.stop()
        if change.triangle is None:
            return

        voice_set = VoiceSet(
            self.sink,
            change.triangle.chord,
            duration=self.config.chord_duration,
            gain=self.config.master_gain,
        )
        self._current = voice_set.acquire()
        logger.debug(f"Playing {change.triangle.chord_name} {voice_set.notes}")

    def stop(self) -> None:
        """Release the sounding chord, if any."""
        if self._current is not None:
            self._current.release()
            self._current = None


@dataclass
class RecordingSink:
    """
    ChordSink that keeps what it was asked to play.

    Used where no audio output exists (the MCP server) to report the
    currently sounding chord.
    """

    played: list[tuple[int, ...]] = field(default_factory=list)
    sounding: tuple[int, ...] = ()
    stops: int = 0

    def play_chord(self, voices: Sequence[Voice], duration: float, gain: float) -> None:
        notes = tuple(v.note for v in voices)
        self.played.append(notes)
        self.sounding = notes

    def stop_all(self) -> None:
        self.sounding = ()
        self.stops += 1
