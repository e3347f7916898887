"""
Secure Zone Facade

Runs the full pipeline over the current sensors:
1. Enumerates beams between every sensor pair
2. Finds every crossing between non-adjacent beams
3. Wraps the crossings in a convex hull (the secure zone)
4. Measures the zone area

``GeometryFacade`` owns a ``PointSet`` and recomputes after every mutation,
so its snapshot always reflects the current sensors.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from ..config import MIN_HULL_POINTS, REMOVE_RADIUS, SAMPLE_SENSORS
from ..core.geometry import contains, polygon_area
from ..core.sensors import IntersectionPoint, PointSet, Sensor, coerce_coordinate
from ..zones.beams import beam_count, enumerate_beams
from ..zones.hull import convex_hull
from ..zones.intersections import find_intersections, find_intersections_vectorized

logger = logging.getLogger(__name__)

IntersectionFunc = Callable[[Tuple[Sensor, ...]], list]

INTERSECTION_METHODS: Dict[str, IntersectionFunc] = {
    'loop': find_intersections,
    'vectorized': find_intersections_vectorized,
}


@dataclass(frozen=True)
class ZoneSnapshot:
    """
    Immutable result of one recomputation.

    Attributes
    ----------
    sensors : tuple of Sensor
        Sensors in insertion order.
    beams : tuple of (Sensor, Sensor)
        Every sensor pair, ``i < j`` in insertion order.
    intersections : tuple of IntersectionPoint
        Beam crossings in discovery order, not deduplicated.
    secure_polygon : tuple of IntersectionPoint
        Convex hull of the intersections in CCW order; empty when fewer
        than 3 intersections exist.
    secure_area : float
        Area of the secure polygon.
    """
    sensors: Tuple[Sensor, ...] = ()
    beams: Tuple[Tuple[Sensor, Sensor], ...] = ()
    intersections: Tuple[IntersectionPoint, ...] = ()
    secure_polygon: Tuple[IntersectionPoint, ...] = ()
    secure_area: float = 0.0

    @property
    def beam_count(self) -> int:
        return beam_count(len(self.sensors))

    def to_dict(self) -> dict:
        return {
            'sensors': [s.to_dict() for s in self.sensors],
            'beamCount': self.beam_count,
            'intersections': [p.to_dict() for p in self.intersections],
            'securePolygon': [p.to_dict() for p in self.secure_polygon],
            'secureArea': self.secure_area,
        }


def _resolve_method(method: str) -> IntersectionFunc:
    try:
        return INTERSECTION_METHODS[method]
    except KeyError:
        raise ValueError(
            f"Unknown intersection method: {method!r}, expected one of {sorted(INTERSECTION_METHODS)}"
        ) from None


def recompute(point_set: PointSet, method: str = 'loop') -> ZoneSnapshot:
    """
    Compute beams, intersections, secure zone and area for ``point_set``.

    Parameters
    ----------
    point_set : PointSet
        Current sensors.
    method : str
        Intersection engine, ``'loop'`` (default) or ``'vectorized'``.

    Returns
    -------
    ZoneSnapshot
        A consistent snapshot of the derived geometry.
    """
    find = _resolve_method(method)
    sensors = point_set.all()

    intersections = find(sensors)
    if len(intersections) < MIN_HULL_POINTS:
        secure_polygon = []
    else:
        secure_polygon = convex_hull(intersections)
    area = polygon_area(secure_polygon)

    logger.debug(
        f"Recomputed zone: {len(sensors)} sensors, {len(intersections)} intersections, "
        f"{len(secure_polygon)} hull vertices, area {area:.2f}"
    )

    return ZoneSnapshot(
        sensors=sensors,
        beams=tuple(enumerate_beams(sensors)),
        intersections=tuple(intersections),
        secure_polygon=tuple(secure_polygon),
        secure_area=area,
    )


class GeometryFacade:
    """
    Owns the sensors and the latest snapshot derived from them.

    Every mutator updates the sensors and recomputes under one lock, so
    ``snapshot`` is never read half-updated.

    Parameters
    ----------
    point_set : PointSet, optional
        Sensors to start from. A fresh empty set is created if None.
    method : str
        Intersection engine passed to ``recompute``.
    """

    def __init__(self, point_set: Optional[PointSet] = None, method: str = 'loop') -> None:
        _resolve_method(method)
        self.point_set = point_set if point_set is not None else PointSet()
        self.method = method
        self._lock = threading.RLock()
        self._snapshot = recompute(self.point_set, method)

    @property
    def snapshot(self) -> ZoneSnapshot:
        with self._lock:
            return self._snapshot

    def recompute(self) -> ZoneSnapshot:
        with self._lock:
            self._snapshot = recompute(self.point_set, self.method)
            return self._snapshot

    def add_sensor(self, x: float, y: float) -> Sensor:
        with self._lock:
            sensor = self.point_set.insert(x, y)
            self.recompute()
            return sensor

    def remove_sensor(self, x: float, y: float, radius: float = REMOVE_RADIUS) -> Optional[Sensor]:
        """Remove the first sensor near (x, y); returns None if none is near."""
        with self._lock:
            removed = self.point_set.remove_near(x, y, radius)
            if removed is not None:
                self.recompute()
            return removed

    def clear(self) -> None:
        with self._lock:
            self.point_set.clear()
            self.recompute()
        logger.info("All sensors cleared")

    def load_sensors(self, positions: Iterable[Tuple[float, float]]) -> ZoneSnapshot:
        """
        Replace all sensors with ``positions``; ids restart at 1.

        Every position is validated before anything is cleared, so a bad
        entry raises ``ValueError`` and leaves the current sensors in place.
        """
        checked = [
            (coerce_coordinate(x, 'x'), coerce_coordinate(y, 'y'))
            for x, y in positions
        ]
        with self._lock:
            self.point_set.clear()
            for x, y in checked:
                self.point_set.insert(x, y)
            return self.recompute()

    def is_secure(self, x: float, y: float) -> bool:
        """True when (x, y) lies inside or on the current secure zone."""
        return bool(contains(self.snapshot.secure_polygon, [(x, y)])[0])

    def load_sample(self) -> ZoneSnapshot:
        snapshot = self.load_sensors(SAMPLE_SENSORS)
        logger.info("Sample configuration loaded")
        return snapshot
