"""
Core geometry operations and sensor types.
"""

from .geometry import (
    cross_product,
    to_array,
    polygon_area,
    signed_polygon_area,
    contains,
)
from .sensors import Sensor, IntersectionPoint, PointSet, coerce_coordinate

__all__ = [
    'cross_product',
    'to_array',
    'polygon_area',
    'signed_polygon_area',
    'contains',
    'Sensor',
    'IntersectionPoint',
    'PointSet',
    'coerce_coordinate',
]
