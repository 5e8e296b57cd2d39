"""
Configuration models - lattice geometry, intervals and playback settings.

Defaults reproduce the standard Tonnetz: a 12 x 8 cell lattice of size-3
triangles, fifths along columns, major thirds along rows, notes 60-71.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_tonnetz.constants import (
    BASE_OCTAVE,
    DEFAULT_AGENT_FRICTION,
    DEFAULT_AGENT_SPEED,
    DEFAULT_CHORD_DURATION,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    DEFAULT_MASTER_GAIN,
    DEFAULT_TRIANGLE_SIZE,
    FIFTH_INTERVAL,
    MAJOR_THIRD_INTERVAL,
    MINOR_THIRD_INTERVAL,
)


class LatticeConfig(BaseModel):
    """Shape and tuning of the lattice."""

    grid_width: int = Field(DEFAULT_GRID_WIDTH, ge=0, description="Cells along the fifth axis")
    grid_height: int = Field(DEFAULT_GRID_HEIGHT, ge=0, description="Cells along the third axis")
    triangle_size: float = Field(DEFAULT_TRIANGLE_SIZE, gt=0, description="Triangle side length")
    fifth_interval: int = Field(FIFTH_INTERVAL, description="Semitones per column step")
    major_third_interval: int = Field(MAJOR_THIRD_INTERVAL, description="Semitones per row step")
    minor_third_interval: int = Field(
        MINOR_THIRD_INTERVAL, description="Semitones from minor root to its third"
    )
    base_octave: int = Field(
        BASE_OCTAVE, ge=0, le=116, description="MIDI note for pitch class 0"
    )
    bucket_size: float | None = Field(
        None, gt=0, description="Spatial bucket size for point location (None = linear scan)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_minor_third(self) -> LatticeConfig:
        """The anti-diagonal step must equal fifth minus major third (mod 12)."""
        expected = (self.fifth_interval - self.major_third_interval) % 12
        if self.minor_third_interval % 12 != expected:
            raise ValueError(
                f"minor_third_interval must equal fifth_interval - major_third_interval "
                f"(mod 12) = {expected}, got {self.minor_third_interval}"
            )
        return self


class AgentConfig(BaseModel):
    """Movement integration for the agent."""

    speed: float = Field(DEFAULT_AGENT_SPEED, ge=0, description="Acceleration per input tick")
    friction: float = Field(
        DEFAULT_AGENT_FRICTION, ge=0, le=1, description="Velocity retained per tick"
    )

    model_config = {"frozen": True}


class PlaybackConfig(BaseModel):
    """How region-change chords are voiced for audio and MIDI collaborators."""

    chord_duration: float = Field(
        DEFAULT_CHORD_DURATION, gt=0, description="Chord length in seconds"
    )
    master_gain: float = Field(DEFAULT_MASTER_GAIN, ge=0, le=1, description="Output gain")
    velocity: float = Field(0.8, ge=0, le=1, description="Note velocity (0-1)")
    beats_per_chord: float = Field(1.0, gt=0, description="Chord length in MIDI export")
    tempo: int = Field(120, ge=20, le=300, description="MIDI export tempo (BPM)")
    channel: int = Field(0, ge=0, le=15, description="MIDI export channel")

    model_config = {"frozen": True}


class TonnetzConfig(BaseModel):
    """Complete engine configuration."""

    lattice: LatticeConfig = Field(default_factory=LatticeConfig)
    agent: AgentConfig = Field(default_factory=AgentConfig)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
