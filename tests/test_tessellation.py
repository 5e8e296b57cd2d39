"""
Tests for the Tonnetz tessellation.

Tests cover:
- Triangle count, ordering and region keys
- Chord derivation per triangle (major up, minor down)
- Seamless geometry from the cumulative row shift
- One-time centering translation
- Label vertices and bounds
"""

import math

import pytest

from chuk_mcp_tonnetz.constants import TriadType
from chuk_mcp_tonnetz.core import ChordQuality, note_name
from chuk_mcp_tonnetz.lattice import (
    PitchClassGrid,
    Point,
    TonnetzTessellation,
    Triangle,
    TriangleKey,
    centering_offset,
    row_height,
    unique_vertices,
    vertex_position,
)

H = 3 * math.sqrt(3) / 2


def _distance(a, b) -> float:
    return math.hypot(a.x - b.x, a.z - b.z)


class TestStructure:
    """Triangle count, order and keys."""

    def test_two_triangles_per_cell(self, tessellation: TonnetzTessellation) -> None:
        assert len(tessellation) == 2 * 12 * 8

    def test_row_major_major_first(self, tessellation: TonnetzTessellation) -> None:
        keys = [t.key for t in tessellation.triangles[:4]]
        assert keys == [
            TriangleKey(0, 0, TriadType.MAJOR),
            TriangleKey(0, 0, TriadType.MINOR),
            TriangleKey(0, 1, TriadType.MAJOR),
            TriangleKey(0, 1, TriadType.MINOR),
        ]
        last = tessellation.triangles[-1]
        assert last.key == TriangleKey(7, 11, TriadType.MINOR)

    def test_keys_unique(self, tessellation: TonnetzTessellation) -> None:
        keys = {t.key for t in tessellation}
        assert len(keys) == len(tessellation)

    def test_lookup_by_key(self, tessellation: TonnetzTessellation) -> None:
        key = TriangleKey(3, 5, TriadType.MINOR)
        triangle = tessellation.get(key)
        assert triangle is not None
        assert triangle.key == key
        assert tessellation.get(TriangleKey(8, 0, TriadType.MAJOR)) is None

    def test_key_equality_is_by_value(self) -> None:
        """Region identity does not depend on object identity."""
        assert TriangleKey(1, 2, TriadType.MAJOR) == TriangleKey(1, 2, TriadType.MAJOR)
        assert TriangleKey(1, 2, TriadType.MAJOR) != TriangleKey(1, 2, TriadType.MINOR)


class TestChords:
    """Chord assignment for every triangle."""

    def test_major_at_origin(self, tessellation: TonnetzTessellation) -> None:
        """pc(0,0)=0, pc(1,0)=4, pc(0,1)=7 -> C major."""
        t = tessellation.get(TriangleKey(0, 0, TriadType.MAJOR))
        assert t.chord == (60, 64, 67)
        assert t.chord_name == "C"
        assert t.note_names == ["C", "G", "E"]
        assert t.notes_label == "C - G - E"

    def test_minor_at_origin(self, tessellation: TonnetzTessellation) -> None:
        """pc(1,0)=4, pc(0,1)=7, pc(1,1)=11 -> E minor."""
        t = tessellation.get(TriangleKey(0, 0, TriadType.MINOR))
        assert t.chord == (64, 67, 71)
        assert t.chord_name == "Em"
        assert t.note_names == ["E", "G", "B"]

    def test_inverted_voicing(self, tessellation: TonnetzTessellation) -> None:
        """Notes stay in the base octave, so some chords are inverted."""
        t = tessellation.get(TriangleKey(1, 2, TriadType.MAJOR))
        assert t.chord_name == "F#"
        assert t.chord == (66, 70, 61)

    def test_every_chord_has_three_notes_in_range(
        self, tessellation: TonnetzTessellation
    ) -> None:
        for t in tessellation:
            assert len(t.vertices) == 3
            assert len(t.chord) == 3
            assert all(60 <= n <= 71 for n in t.chord)

    def test_upward_major_downward_minor(self, tessellation: TonnetzTessellation) -> None:
        """Chord tones spell the quality of the triangle type."""
        for t in tessellation:
            root, third, fifth = (n - 60 for n in t.chord)
            quality = ChordQuality.for_triad(t.type)
            assert quality.matches(root, third, fifth), t.key

    def test_name_follows_root(self, tessellation: TonnetzTessellation) -> None:
        for t in tessellation:
            suffix = "" if t.type == TriadType.MAJOR else "m"
            assert t.chord_name == note_name(t.chord[0] - 60) + suffix

    def test_chord_tones_are_vertex_pitches(self, tessellation: TonnetzTessellation) -> None:
        """Sounding notes always match the displayed vertices."""
        for t in tessellation:
            assert sorted(n - 60 for n in t.chord) == sorted(v.pitch_class for v in t.vertices)

    def test_all_24_triads_present(self, tessellation: TonnetzTessellation) -> None:
        """A 12-column lattice contains every major and minor triad."""
        names = {t.chord_name for t in tessellation}
        assert len(names) == 24

    def test_base_octave(self) -> None:
        grid = PitchClassGrid.generate(1, 1)
        t = TonnetzTessellation.build(grid, 3.0, base_octave=48)
        assert t.triangles[0].chord == (48, 52, 55)


class TestGeometry:
    """Vertex positions and seamless tiling."""

    def test_vertex_position_cumulative_shift(self) -> None:
        """Each row shifts by half a triangle more than the previous one."""
        assert vertex_position(0, 0, 3.0) == Point(0.0, 0.0)
        assert vertex_position(0, 1, 3.0) == Point(3.0, 0.0)
        p1 = vertex_position(1, 0, 3.0)
        p2 = vertex_position(2, 0, 3.0)
        assert p1.x == pytest.approx(1.5)
        assert p2.x == pytest.approx(3.0)
        assert p2.z == pytest.approx(2 * H)

    def test_row_height(self) -> None:
        assert row_height(3.0) == pytest.approx(H)

    def test_equilateral(self, tessellation: TonnetzTessellation) -> None:
        for t in tessellation:
            v0, v1, v2 = t.vertices
            for a, b in ((v0, v1), (v1, v2), (v2, v0)):
                assert _distance(a, b) == pytest.approx(3.0)

    def test_center_is_vertex_mean(self, tessellation: TonnetzTessellation) -> None:
        for t in tessellation:
            assert t.center.x == pytest.approx(sum(v.x for v in t.vertices) / 3)
            assert t.center.z == pytest.approx(sum(v.z for v in t.vertices) / 3)

    def test_minor_shares_edge_with_major_same_cell(
        self, tessellation: TonnetzTessellation
    ) -> None:
        """Minor [c10, c01, c11] shares c10 and c01 with major [c00, c01, c10]."""
        for row in range(8):
            for col in range(12):
                major = tessellation.get(TriangleKey(row, col, TriadType.MAJOR))
                minor = tessellation.get(TriangleKey(row, col, TriadType.MINOR))
                assert minor.vertices[0] == major.vertices[2]
                assert minor.vertices[1] == major.vertices[1]

    def test_minor_shares_edges_with_neighbours(self, tessellation: TonnetzTessellation) -> None:
        """No seams between a minor triangle and the majors to its right and above."""
        for row in range(7):
            for col in range(11):
                minor = tessellation.get(TriangleKey(row, col, TriadType.MINOR))
                right = tessellation.get(TriangleKey(row, col + 1, TriadType.MAJOR))
                above = tessellation.get(TriangleKey(row + 1, col, TriadType.MAJOR))
                # c01 and c11 shared with the next cell's major
                assert minor.vertices[1] == right.vertices[0]
                assert minor.vertices[2] == right.vertices[2]
                # c10 and c11 shared with the major one row up
                assert minor.vertices[0] == above.vertices[0]
                assert minor.vertices[2] == above.vertices[1]

    def test_unique_vertices_match_grid(self, tessellation: TonnetzTessellation) -> None:
        """Every grid point appears exactly once among the labels."""
        vertices = unique_vertices(tessellation)
        assert len(vertices) == 13 * 9

    def test_total_area(self, tessellation: TonnetzTessellation) -> None:
        """Triangles cover the parallelogram exactly."""
        area = 0.0
        for t in tessellation:
            v0, v1, v2 = t.vertices
            area += abs((v1.x - v0.x) * (v2.z - v0.z) - (v2.x - v0.x) * (v1.z - v0.z)) / 2
        assert area == pytest.approx(12 * 3.0 * 8 * H)

    def test_invalid_size(self, grid: PitchClassGrid) -> None:
        with pytest.raises(ValueError, match="Triangle size"):
            TonnetzTessellation(grid, 0)


class TestCentering:
    """The centering translation runs exactly once."""

    def test_offset(self) -> None:
        dx, dz = centering_offset(12, 8, 3.0)
        assert dx == pytest.approx(-18.0)
        assert dz == pytest.approx(-8 * H / 2)

    def test_build_is_centered(self, tessellation: TonnetzTessellation) -> None:
        assert tessellation.centered
        t = tessellation.get(TriangleKey(0, 0, TriadType.MAJOR))
        assert t.vertices[0].x == pytest.approx(-18.0)
        assert t.vertices[0].z == pytest.approx(-4 * H)
        assert t.center.x == pytest.approx(-16.5)

    def test_center_applies_once(self, grid: PitchClassGrid) -> None:
        tess = TonnetzTessellation(grid, 3.0)
        assert not tess.centered
        before = tess.triangles

        assert tess.center() is True
        after = tess.triangles
        assert tess.center() is False
        assert tess.triangles == after

        dx, dz = tess.offset
        for b, a in zip(before, after, strict=True):
            assert a.center.x == pytest.approx(b.center.x + dx)
            assert a.center.z == pytest.approx(b.center.z + dz)

    def test_build_then_center_is_noop(self, tessellation: TonnetzTessellation) -> None:
        triangles = tessellation.triangles
        assert tessellation.center() is False
        assert tessellation.triangles is triangles

    def test_bounds(self, tessellation: TonnetzTessellation) -> None:
        lo, hi = tessellation.bounds()
        assert lo.x == pytest.approx(-18.0)
        assert hi.x == pytest.approx(30.0)
        assert lo.z == pytest.approx(-4 * H)
        assert hi.z == pytest.approx(4 * H)

    def test_lookup_follows_centering(self, grid: PitchClassGrid) -> None:
        tess = TonnetzTessellation(grid, 3.0)
        tess.center()
        key = TriangleKey(0, 0, TriadType.MAJOR)
        assert tess.get(key) is tess.triangles[0]


class TestSerialization:
    """Triangle dictionaries for rendering and UI collaborators."""

    def test_to_dict(self, tessellation: TonnetzTessellation) -> None:
        data = tessellation.triangles[1].to_dict()
        assert data["type"] == "minor"
        assert data["row"] == 0
        assert data["col"] == 0
        assert data["chord"] == [64, 67, 71]
        assert data["chord_name"] == "Em"
        assert data["notes"] == "E - G - B"
        assert len(data["vertices"]) == 3
        assert set(data["center"]) == {"x", "z"}

    def test_triangle_needs_three_vertices(self, tessellation: TonnetzTessellation) -> None:
        t = tessellation.triangles[0]
        with pytest.raises(ValueError, match="3 vertices"):
            Triangle(
                type=t.type,
                vertices=t.vertices[:2],  # type: ignore[arg-type]
                center=t.center,
                chord=t.chord,
                chord_name=t.chord_name,
                row=0,
                col=0,
            )
