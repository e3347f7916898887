"""
Beam Intersection Module

Finds every point where two beams cross. Beams that share a sensor are
never tested against each other; sharing is decided by sensor identity,
so two distinct sensors placed at the same position do not count.

Two engines with identical results are provided:
- ``find_intersections``: the reference pairwise loop, O(n^4) in sensors
- ``find_intersections_vectorized``: the same formulas broadcast with numpy
  over bounded blocks of beam pairs
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..config import EPS, MIN_SENSORS_FOR_INTERSECTIONS, PAIR_BLOCK_SIZE
from ..core.geometry import to_array
from ..core.sensors import IntersectionPoint
from .beams import enumerate_beams


def segment_intersect(a, b, c, d) -> Optional[IntersectionPoint]:
    """
    Intersect segment (a, b) with segment (c, d).

    Parameters
    ----------
    a, b, c, d : point-like
        Objects exposing ``x`` and ``y``.

    Returns
    -------
    IntersectionPoint or None
        The crossing point when both segment parameters lie in the closed
        interval [0, 1], so touching endpoints count. None when the segments
        miss each other or are parallel within ``EPS`` (collinear overlaps
        included).
    """
    denom = (a.x - b.x) * (c.y - d.y) - (a.y - b.y) * (c.x - d.x)

    if abs(denom) < EPS:
        return None

    t = ((a.x - c.x) * (c.y - d.y) - (a.y - c.y) * (c.x - d.x)) / denom
    u = -((a.x - b.x) * (a.y - c.y) - (a.y - b.y) * (a.x - c.x)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return IntersectionPoint(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y))
    return None


def find_intersections(points: Sequence) -> List[IntersectionPoint]:
    """
    Find all crossings between beams over ``points``.

    Parameters
    ----------
    points : sequence
        Sensors in insertion order.

    Returns
    -------
    list of IntersectionPoint
        One entry per crossing beam pair, in discovery order (beam pairs
        ``(i, j)`` with ``i < j`` over beam order). Coincident crossings are
        kept. Empty for fewer than 4 sensors.
    """
    if len(points) < MIN_SENSORS_FOR_INTERSECTIONS:
        return []

    beams = enumerate_beams(points)
    found = []

    for i in range(len(beams)):
        p1, p2 = beams[i]
        for j in range(i + 1, len(beams)):
            p3, p4 = beams[j]

            if p1 is p3 or p1 is p4 or p2 is p3 or p2 is p4:
                continue

            hit = segment_intersect(p1, p2, p3, p4)
            if hit is not None:
                found.append(hit)

    return found


def _identity_index(points: Sequence) -> np.ndarray:
    """Index of the first occurrence of each object, compared by identity."""
    first_seen = {}
    return np.array(
        [first_seen.setdefault(id(p), k) for k, p in enumerate(points)],
        dtype=np.intp
    )


def _beam_pair_blocks(m: int, max_pairs: int) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
    """
    Yield beam-pair index arrays ``(p, q)`` with ``p < q`` over ``m`` beams.

    Blocks cover whole rows of the pair matrix in row-major order, so their
    concatenation equals ``np.triu_indices(m, k=1)``. A block holds at most
    ``max_pairs`` pairs unless a single row is longer than that.
    """
    start = 0
    while start < m - 1:
        stop, total = start, 0
        while stop < m - 1 and (total == 0 or total + (m - 1 - stop) <= max_pairs):
            total += m - 1 - stop
            stop += 1

        rows = np.arange(start, stop)
        lengths = m - 1 - rows
        pair_p = np.repeat(rows, lengths)
        row_offsets = np.repeat(np.cumsum(lengths) - lengths, lengths)
        pair_q = pair_p + 1 + (np.arange(total) - row_offsets)
        yield pair_p, pair_q

        start = stop


def find_intersections_vectorized(
    points: Sequence,
    max_pairs: int = PAIR_BLOCK_SIZE
) -> List[IntersectionPoint]:
    """
    Numpy variant of ``find_intersections``.

    Evaluates beam pairs in blocks of at most ``max_pairs``. Results,
    ordering, endpoint inclusion and shared-sensor exclusion match the
    reference loop.

    Parameters
    ----------
    points : sequence
        Sensors in insertion order.
    max_pairs : int
        Block size; peak memory is roughly a dozen float64 arrays of this
        length, independent of the sensor count.

    Returns
    -------
    list of IntersectionPoint
        Same as ``find_intersections``.
    """
    if max_pairs < 1:
        raise ValueError(f"max_pairs must be positive, got {max_pairs}")

    n = len(points)
    if n < MIN_SENSORS_FOR_INTERSECTIONS:
        return []

    coords = to_array(points)
    ident = _identity_index(points)

    # Row-major i < j, same order as enumerate_beams
    beam_i, beam_j = np.triu_indices(n, k=1)

    found = []
    for pair_p, pair_q in _beam_pair_blocks(len(beam_i), max_pairs):
        ia, ib = ident[beam_i[pair_p]], ident[beam_j[pair_p]]
        ic, id_ = ident[beam_i[pair_q]], ident[beam_j[pair_q]]
        shared = (ia == ic) | (ia == id_) | (ib == ic) | (ib == id_)

        ax, ay = coords[beam_i[pair_p]].T
        bx, by = coords[beam_j[pair_p]].T
        cx, cy = coords[beam_i[pair_q]].T
        dx, dy = coords[beam_j[pair_q]].T

        denom = (ax - bx) * (cy - dy) - (ay - by) * (cx - dx)
        candidate = ~shared & (np.abs(denom) >= EPS)

        with np.errstate(divide='ignore', invalid='ignore'):
            t = ((ax - cx) * (cy - dy) - (ay - cy) * (cx - dx)) / denom
            u = -((ax - bx) * (ay - cy) - (ay - by) * (ax - cx)) / denom

        hit = candidate & (t >= 0) & (t <= 1) & (u >= 0) & (u <= 1)

        t = t[hit]
        xs = ax[hit] + t * (bx[hit] - ax[hit])
        ys = ay[hit] + t * (by[hit] - ay[hit])
        found.extend(IntersectionPoint(float(x), float(y)) for x, y in zip(xs, ys))

    return found
