"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_tonnetz.lattice import PitchClassGrid, TonnetzLattice, TonnetzTessellation
from chuk_mcp_tonnetz.playback import RecordingSink
from chuk_mcp_tonnetz.session import TonnetzSession


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def grid() -> PitchClassGrid:
    """The default 12 x 8 cell grid."""
    return PitchClassGrid.generate(12, 8)


@pytest.fixture
def tessellation(grid: PitchClassGrid) -> TonnetzTessellation:
    """The default centered tessellation."""
    return TonnetzTessellation.build(grid, 3.0)


@pytest.fixture
def lattice() -> TonnetzLattice:
    """The default lattice."""
    return TonnetzLattice()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def session(sink: RecordingSink) -> TonnetzSession:
    """An initialized session with a recording audio sink."""
    s = TonnetzSession(sink=sink).initialize()
    yield s
    s.teardown()
