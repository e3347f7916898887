"""
Tests for beam enumeration and beam intersection.
"""

import numpy as np
import pytest
from shapely.geometry import LineString

from securezone.core.sensors import IntersectionPoint as P, PointSet
from securezone.zones import beams as beams_module
from securezone.zones import intersections as intersections_module
from securezone.zones.beams import enumerate_beams, beam_count
from securezone.zones.intersections import (
    segment_intersect,
    find_intersections,
    find_intersections_vectorized,
)


def _sensors(coords):
    points = PointSet()
    for x, y in coords:
        points.insert(x, y)
    return points.all()


def _regular_polygon(n, radius=100.0, center=(400.0, 300.0), phase=0.1):
    angles = phase + 2 * np.pi * np.arange(n) / n
    return [(center[0] + radius * np.cos(a), center[1] + radius * np.sin(a)) for a in angles]


class TestEnumerateBeams:
    """Tests for enumerate_beams() and beam_count()."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 8])
    def test_count_matches_formula(self, n):
        sensors = _sensors([(i, i * i) for i in range(n)])
        beams = enumerate_beams(sensors)
        assert len(beams) == beam_count(n)
        assert beam_count(n) == (n * (n - 1) // 2 if n >= 2 else 0)

    def test_pairs_ordered_by_input(self):
        a, b, c = _sensors([(0, 0), (1, 0), (0, 1)])
        assert enumerate_beams([a, b, c]) == [(a, b), (a, c), (b, c)]

    def test_each_pair_once(self):
        sensors = _sensors([(i, 0) for i in range(6)])
        keys = {frozenset((p.id, q.id)) for p, q in enumerate_beams(sensors)}
        assert len(keys) == 15


class TestSegmentIntersect:
    """Tests for segment_intersect()."""

    def test_crossing_diagonals(self):
        hit = segment_intersect(P(0, 0), P(10, 10), P(0, 10), P(10, 0))
        assert (hit.x, hit.y) == pytest.approx((5, 5))

    def test_disjoint_segments(self):
        """Lines cross, but outside the segments."""
        assert segment_intersect(P(0, 0), P(1, 1), P(5, 0), P(4, 1)) is None

    def test_parallel_segments(self):
        assert segment_intersect(P(0, 0), P(10, 0), P(0, 1), P(10, 1)) is None

    def test_collinear_overlap_is_not_an_intersection(self):
        assert segment_intersect(P(0, 0), P(10, 0), P(5, 0), P(15, 0)) is None

    def test_near_parallel_within_tolerance(self):
        assert segment_intersect(P(0, 0), P(1, 0), P(0, 1), P(1, 1 + 1e-12)) is None

    def test_t_junction_counts(self):
        """An endpoint touching the other segment's interior is a hit."""
        hit = segment_intersect(P(0, 0), P(10, 0), P(5, 0), P(5, 5))
        assert (hit.x, hit.y) == pytest.approx((5, 0))

    def test_shared_endpoint_touch_counts(self):
        hit = segment_intersect(P(0, 0), P(10, 0), P(10, 0), P(10, 10))
        assert (hit.x, hit.y) == pytest.approx((10, 0))

    def test_symmetric(self):
        """(a,b,c,d) and (c,d,a,b) give the same point or both None."""
        rng = np.random.default_rng(7)
        for _ in range(300):
            a, b, c, d = (P(*xy) for xy in rng.uniform(0, 100, size=(4, 2)))
            first = segment_intersect(a, b, c, d)
            second = segment_intersect(c, d, a, b)
            assert (first is None) == (second is None)
            if first is not None:
                np.testing.assert_allclose((first.x, first.y), (second.x, second.y), atol=1e-9)

    def test_agrees_with_shapely(self):
        rng = np.random.default_rng(11)
        for _ in range(300):
            coords = rng.uniform(0, 100, size=(4, 2))
            a, b, c, d = (P(*xy) for xy in coords)
            ours = segment_intersect(a, b, c, d)
            theirs = LineString(coords[:2]).intersection(LineString(coords[2:]))

            if theirs.is_empty:
                assert ours is None
            else:
                assert ours is not None
                np.testing.assert_allclose((ours.x, ours.y), (theirs.x, theirs.y), atol=1e-7)


class TestFindIntersections:
    """Tests for find_intersections()."""

    @pytest.mark.parametrize("n", [0, 1, 2, 3])
    def test_fewer_than_four_sensors(self, n, monkeypatch):
        """No beams are even enumerated below 4 sensors."""
        def fail(points):
            raise AssertionError("beams enumerated")

        monkeypatch.setattr(intersections_module, "enumerate_beams", fail)
        assert find_intersections(_sensors(_regular_polygon(n))) == []

    def test_four_sensors_in_quadrilateral(self):
        """Only the two diagonals cross."""
        sensors = _sensors([(150, 100), (650, 150), (200, 500), (600, 450)])
        found = find_intersections(sensors)

        assert len(found) == 1
        assert (found[0].x, found[0].y) == pytest.approx((150 + 450 * 79 / 126, 100 + 350 * 79 / 126))

    def test_collinear_sensors(self):
        """All beams lie on one line: no intersections."""
        sensors = _sensors([(100 + 50 * i, 200 + 25 * i) for i in range(5)])
        assert find_intersections(sensors) == []

    def test_shared_endpoint_pairs_never_tested(self, monkeypatch):
        """Beams with a common sensor are skipped before any geometry test."""
        calls = []
        original = intersections_module.segment_intersect

        def recording(a, b, c, d):
            calls.append((a, b, c, d))
            return original(a, b, c, d)

        monkeypatch.setattr(intersections_module, "segment_intersect", recording)
        sensors = _sensors(_regular_polygon(6))
        find_intersections(sensors)

        # C(6,4) * 3 disjoint beam pairs per 4-subset
        assert len(calls) == 45
        for a, b, c, d in calls:
            assert len({id(a), id(b), id(c), id(d)}) == 4

    def test_coincident_sensors_not_shared(self):
        """Distinct sensors at the same spot are tested against each other."""
        sensors = _sensors([(0, 0), (0, 0), (10, 0), (0, 10)])
        found = find_intersections(sensors)

        assert len(found) == 2
        for p in found:
            assert (p.x, p.y) == pytest.approx((0, 0))

    def test_convex_polygon_count(self):
        """Sensors in convex position give one crossing per 4-subset."""
        sensors = _sensors(_regular_polygon(7))
        assert len(find_intersections(sensors)) == 35

    def test_no_deduplication(self):
        """Concurrent diagonals of a regular hexagon are all reported."""
        sensors = _sensors(_regular_polygon(6, center=(0.0, 0.0)))
        found = find_intersections(sensors)

        assert len(found) == 15
        at_center = [p for p in found if abs(p.x) < 1e-9 and abs(p.y) < 1e-9]
        assert len(at_center) == 3

    def test_discovery_order(self):
        """Results follow beam-pair order."""
        sensors = _sensors([(0, 0), (10, 0), (10, 10), (0, 10), (5, -5)])
        beams = beams_module.enumerate_beams(sensors)
        expected = []
        for i in range(len(beams)):
            for j in range(i + 1, len(beams)):
                (p1, p2), (p3, p4) = beams[i], beams[j]
                if {id(p1), id(p2)} & {id(p3), id(p4)}:
                    continue
                hit = segment_intersect(p1, p2, p3, p4)
                if hit is not None:
                    expected.append(hit)

        assert find_intersections(sensors) == expected


class TestVectorizedEngine:
    """The numpy engine must match the reference loop exactly."""

    def test_random_layouts(self):
        rng = np.random.default_rng(3)
        for n in range(4, 10):
            sensors = _sensors(rng.uniform(0, 800, size=(n, 2)))
            loop = find_intersections(sensors)
            vec = find_intersections_vectorized(sensors)

            assert len(loop) == len(vec)
            for p, q in zip(loop, vec):
                assert (q.x, q.y) == pytest.approx((p.x, p.y), abs=1e-9)

    def test_coincident_sensors(self):
        sensors = _sensors([(0, 0), (0, 0), (10, 0), (0, 10)])
        assert len(find_intersections_vectorized(sensors)) == 2

    def test_fewer_than_four(self):
        assert find_intersections_vectorized(_sensors([(0, 0), (1, 1), (2, 0)])) == []

    def test_collinear(self):
        sensors = _sensors([(i, 2 * i) for i in range(6)])
        assert find_intersections_vectorized(sensors) == []

    def test_small_blocks_match_loop(self):
        """Splitting the beam pairs into tiny blocks changes nothing."""
        sensors = _sensors(_regular_polygon(9))
        loop = find_intersections(sensors)
        blocked = find_intersections_vectorized(sensors, max_pairs=7)

        assert blocked == find_intersections_vectorized(sensors)
        assert len(blocked) == len(loop) == 126
        for p, q in zip(loop, blocked):
            assert (q.x, q.y) == pytest.approx((p.x, p.y), abs=1e-9)

    def test_single_pair_blocks(self):
        sensors = _sensors([(0, 0), (10, 0), (10, 10), (0, 10), (5, -5)])
        assert find_intersections_vectorized(sensors, max_pairs=1) == find_intersections_vectorized(sensors)

    @pytest.mark.parametrize("max_pairs", [0, -5])
    def test_invalid_block_size(self, max_pairs):
        sensors = _sensors(_regular_polygon(5))
        with pytest.raises(ValueError):
            find_intersections_vectorized(sensors, max_pairs=max_pairs)


class TestBeamPairBlocks:
    """Tests for the bounded-memory pair blocks."""

    @pytest.mark.parametrize("m", [2, 6, 15, 45])
    @pytest.mark.parametrize("max_pairs", [1, 3, 14, 10_000])
    def test_blocks_cover_upper_triangle_in_order(self, m, max_pairs):
        blocks = list(intersections_module._beam_pair_blocks(m, max_pairs))
        pair_p = np.concatenate([p for p, _ in blocks])
        pair_q = np.concatenate([q for _, q in blocks])

        expected_p, expected_q = np.triu_indices(m, k=1)
        np.testing.assert_array_equal(pair_p, expected_p)
        np.testing.assert_array_equal(pair_q, expected_q)

    @pytest.mark.parametrize("m", [6, 15, 45])
    def test_block_size_bounded(self, m):
        """No block exceeds max_pairs once a whole row fits."""
        max_pairs = 2 * m
        for pair_p, pair_q in intersections_module._beam_pair_blocks(m, max_pairs):
            assert 0 < len(pair_p) == len(pair_q) <= max_pairs

    def test_oversized_row_gets_its_own_block(self):
        blocks = list(intersections_module._beam_pair_blocks(10, 4))
        assert len(blocks[0][0]) == 9
        assert all(len(p) <= 9 for p, _ in blocks)

    @pytest.mark.parametrize("m", [0, 1])
    def test_nothing_to_pair(self, m):
        assert list(intersections_module._beam_pair_blocks(m, 5)) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
