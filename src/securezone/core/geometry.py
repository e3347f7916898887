"""
Core geometry operations for planar point sets and polygons.

Contains utility functions for:
- Orientation (cross product) tests
- Polygon area calculation (shoelace formula)
- Point-object/numpy conversions
- Point-in-polygon testing against the secure zone
"""

from typing import Iterable, Sequence, Union

import numpy as np
import shapely
from shapely.geometry import Polygon

PolygonLike = Union[np.ndarray, Sequence]


def cross_product(o, a, b) -> float:
    """
    Z-component of (a - o) x (b - o).

    Positive for a left (counter-clockwise) turn o -> a -> b, negative for a
    right turn and zero when the three points are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def to_array(points: Iterable) -> np.ndarray:
    """
    Convert a sequence of point objects to a numpy array.

    Parameters
    ----------
    points : iterable
        Objects exposing ``x`` and ``y`` attributes, or an array-like of
        shape (N, 2).

    Returns
    -------
    np.ndarray
        Array of shape (N, 2). Empty input gives shape (0, 2).
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
    else:
        points = list(points)
        if not points:
            return np.zeros((0, 2), dtype=np.float64)
        if hasattr(points[0], "x"):
            arr = np.array([[p.x, p.y] for p in points], dtype=np.float64)
        else:
            arr = np.asarray(points, dtype=np.float64)

    if arr.size == 0:
        return np.zeros((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {arr.shape}")
    return arr


def signed_polygon_area(poly: PolygonLike) -> float:
    """
    Signed shoelace area: positive when the vertices wind counter-clockwise
    in a y-up frame.
    """
    poly = to_array(poly)
    if len(poly) < 3:
        return 0.0

    x = poly[:, 0]
    y = poly[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(poly: PolygonLike) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    poly : np.ndarray or sequence of points
        Polygon vertices of shape (M, 2), or objects with ``x``/``y``.
        The closing edge (last -> first) is implied.

    Returns
    -------
    float
        Absolute area of the polygon; 0.0 for fewer than 3 vertices.
        Independent of winding direction.
    """
    return abs(signed_polygon_area(poly))


def contains(poly: PolygonLike, points: PolygonLike) -> np.ndarray:
    """
    Test which points lie inside or on the boundary of a polygon.

    Parameters
    ----------
    poly : np.ndarray or sequence of points
        Polygon vertices of shape (M, 2), e.g. a secure zone.
    points : np.ndarray or sequence of points
        Query points of shape (N, 2).

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,). All False when the polygon has fewer
        than 3 vertices, since such a zone encloses nothing.
    """
    poly = to_array(poly)
    points = to_array(points)

    if len(poly) < 3 or len(points) == 0:
        return np.zeros(len(points), dtype=bool)

    # covers() accepts boundary points, unlike contains()
    zone = Polygon(poly)
    return np.asarray(shapely.covers(zone, shapely.points(points)), dtype=bool)
