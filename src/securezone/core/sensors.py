"""
Sensor and intersection point types, and the mutable sensor collection.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..config import REMOVE_RADIUS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Sensor:
    """
    A user-placed point in the plane.

    Attributes
    ----------
    id : int
        Identifier assigned by the owning ``PointSet``.
    x, y : float
        Position in canvas coordinates.

    Two sensors are the same sensor only if they are the same object;
    coincident sensors placed separately stay distinct.
    """
    id: int
    x: float
    y: float

    def to_dict(self) -> dict:
        return {'id': self.id, 'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class IntersectionPoint:
    """A point where two non-adjacent beams cross."""
    x: float
    y: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}


def coerce_coordinate(value: float, name: str) -> float:
    """Convert to float, rejecting NaN and infinities."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


class PointSet:
    """
    Ordered collection of sensors with monotonically assigned ids.

    Ids start at 1 and are never reused until ``clear()`` resets the counter.
    """

    def __init__(self) -> None:
        self._sensors: List[Sensor] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def insert(self, x: float, y: float) -> Sensor:
        """
        Place a new sensor at (x, y).

        Coincident positions are allowed.

        Returns
        -------
        Sensor
            The newly created sensor.
        """
        sensor = Sensor(self._next_id, coerce_coordinate(x, 'x'), coerce_coordinate(y, 'y'))
        self._next_id += 1
        self._sensors.append(sensor)
        logger.info(f"Sensor {sensor.id} placed at ({round(sensor.x)}, {round(sensor.y)})")
        return sensor

    def remove_near(self, x: float, y: float, radius: float = REMOVE_RADIUS) -> Optional[Sensor]:
        """
        Remove the first sensor (in insertion order) strictly closer than
        ``radius`` to (x, y).

        Returns
        -------
        Sensor or None
            The removed sensor, or None when no sensor qualifies.
        """
        if not radius > 0:
            raise ValueError(f"radius must be positive, got {radius}")

        for index, sensor in enumerate(self._sensors):
            if math.hypot(sensor.x - x, sensor.y - y) < radius:
                del self._sensors[index]
                logger.info(f"Sensor {sensor.id} removed")
                return sensor

        logger.debug(f"No sensor within {radius} of ({x}, {y})")
        return None

    def clear(self) -> None:
        self._sensors.clear()
        self._next_id = 1

    def all(self) -> Tuple[Sensor, ...]:
        return tuple(self._sensors)

    def get(self, sensor_id: int) -> Optional[Sensor]:
        for sensor in self._sensors:
            if sensor.id == sensor_id:
                return sensor
        return None

    def __len__(self) -> int:
        return len(self._sensors)

    def __iter__(self) -> Iterator[Sensor]:
        return iter(tuple(self._sensors))

    def __contains__(self, sensor: object) -> bool:
        return any(s is sensor for s in self._sensors)

    def __repr__(self) -> str:
        return f"PointSet(n={len(self._sensors)}, next_id={self._next_id})"
