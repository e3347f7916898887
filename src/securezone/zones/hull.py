"""
Convex Hull Module (Graham scan)

Builds the secure zone polygon from the beam intersection points.
Only strictly convex vertices survive: points collinear with a hull edge
are dropped.
"""

import math
from functools import cmp_to_key
from typing import List, Sequence, TypeVar

from ..config import EPS, MIN_HULL_POINTS
from ..core.geometry import cross_product

P = TypeVar('P')


def _lowest_point(points: Sequence[P]) -> P:
    """Minimum y, ties broken by minimum x; first such point wins."""
    anchor = points[0]
    for p in points[1:]:
        if p.y < anchor.y or (p.y == anchor.y and p.x < anchor.x):
            anchor = p
    return anchor


def _polar_order(anchor):
    def compare(a, b) -> float:
        angle_a = math.atan2(a.y - anchor.y, a.x - anchor.x)
        angle_b = math.atan2(b.y - anchor.y, b.x - anchor.x)
        if abs(angle_a - angle_b) < EPS:
            # Same direction: nearer point first
            dist_a = (a.x - anchor.x) ** 2 + (a.y - anchor.y) ** 2
            dist_b = (b.x - anchor.x) ** 2 + (b.y - anchor.y) ** 2
            return dist_a - dist_b
        return angle_a - angle_b

    return cmp_to_key(lambda a, b: _sign(compare(a, b)))


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def convex_hull(points: Sequence[P]) -> List[P]:
    """
    Compute the convex hull of a point cloud with a Graham scan.

    Parameters
    ----------
    points : sequence
        Objects exposing ``x`` and ``y``.

    Returns
    -------
    list
        Hull vertices (the input objects themselves) in counter-clockwise
        order starting at the lowest point. Fewer than 3 input points are
        returned unchanged.
    """
    points = list(points)
    if len(points) < MIN_HULL_POINTS:
        return points

    anchor = _lowest_point(points)
    ordered = sorted((p for p in points if p is not anchor), key=_polar_order(anchor))

    hull = [anchor, ordered[0]]
    for candidate in ordered[1:]:
        # Pop while the last two hull points and the candidate fail to turn left
        while len(hull) >= 2 and cross_product(hull[-2], hull[-1], candidate) <= 0:
            hull.pop()
        hull.append(candidate)

    return hull


def is_strictly_convex(polygon: Sequence) -> bool:
    """True when every consecutive vertex triple turns strictly left."""
    n = len(polygon)
    if n < 3:
        return False
    return all(
        cross_product(polygon[i], polygon[(i + 1) % n], polygon[(i + 2) % n]) > 0
        for i in range(n)
    )
