"""
Securezone - Beam-crossing secure zones for planar sensor layouts.

Sensors placed on a plane are connected pairwise by beams. Every point
where two beams without a shared sensor cross is an intersection; the
convex hull of all intersections is the secure zone.

Main Functions
--------------
GeometryFacade : Owns the sensors and keeps a consistent zone snapshot
recompute : One-shot pipeline over a PointSet
find_intersections : All beam crossings
convex_hull : Graham-scan hull of a point cloud
polygon_area : Shoelace area of a polygon

Example
-------
>>> from securezone import GeometryFacade

>>> zone = GeometryFacade()
>>> snapshot = zone.load_sample()
>>> snapshot.beam_count
10
>>> round(snapshot.secure_area) > 0
True
"""

from .config import EPS
from .core.geometry import cross_product, polygon_area, contains
from .core.sensors import Sensor, IntersectionPoint, PointSet
from .zones.beams import enumerate_beams, beam_count
from .zones.intersections import segment_intersect, find_intersections, find_intersections_vectorized
from .zones.hull import convex_hull
from .layout.facade import ZoneSnapshot, GeometryFacade, recompute
from .layout.export import zone_stats, export_data, save_export, load_export
from .visualization.plotting import plot_zone, save_zone_plot, format_sensor_list
from .logging_config import setup_logging

__all__ = [
    # Core geometry
    'EPS',
    'cross_product',
    'polygon_area',
    'contains',
    # Sensors
    'Sensor',
    'IntersectionPoint',
    'PointSet',
    # Zone algorithms
    'enumerate_beams',
    'beam_count',
    'segment_intersect',
    'find_intersections',
    'find_intersections_vectorized',
    'convex_hull',
    # Pipeline
    'ZoneSnapshot',
    'GeometryFacade',
    'recompute',
    # Import / export
    'zone_stats',
    'export_data',
    'save_export',
    'load_export',
    # Visualization
    'plot_zone',
    'save_zone_plot',
    'format_sensor_list',
    'setup_logging',
]
