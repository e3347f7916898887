"""
Pipeline orchestration and import/export.
"""

from .facade import ZoneSnapshot, GeometryFacade, recompute, INTERSECTION_METHODS
from .export import zone_stats, export_data, save_export, load_export

__all__ = [
    'ZoneSnapshot',
    'GeometryFacade',
    'recompute',
    'INTERSECTION_METHODS',
    'zone_stats',
    'export_data',
    'save_export',
    'load_export',
]
