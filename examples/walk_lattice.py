#!/usr/bin/env python3
"""
Example: Walk across the Tonnetz and export the chords as MIDI.

The agent starts at the lattice center, drifts right, then forward. Every
triangle it enters prints its chord; the walk is saved as a block-chord
progression you can open in any DAW.

Usage:
    python examples/walk_lattice.py
    # Creates: examples/output/tonnetz_walk.mid
"""

from pathlib import Path

from chuk_mcp_tonnetz.lattice import RegionChange
from chuk_mcp_tonnetz.playback import RecordingSink
from chuk_mcp_tonnetz.session import TonnetzSession


def print_change(change: RegionChange) -> None:
    """Print each region change as the host loop would see it."""
    if change.triangle is None:
        print("  (left the lattice)")
        return
    t = change.triangle
    print(f"  {t.chord_name:4} {t.notes_label:14} notes={list(t.chord)}")


def main() -> None:
    """Walk the lattice and export the visited chords."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    sink = RecordingSink()
    with TonnetzSession(sink=sink) as session:
        print(f"Lattice: {session.lattice!r}")
        print("Starting region:")
        print_change(session.history[0])

        print("\nHolding right for 10 seconds at 60 ticks/s...")
        for change in session.step(dx=1, ticks=600):
            print_change(change)

        print("\nHolding forward for 5 seconds...")
        for change in session.step(dz=-1, ticks=300):
            print_change(change)

        path = output_dir / "tonnetz_walk.mid"
        count = session.export_walk(path)
        print(f"\nExported {count} chords to {path}")
        print(f"Sink played {len(sink.played)} chords, stopped {sink.stops} times")


if __name__ == "__main__":
    main()
