"""
Beam, intersection and secure-zone algorithms.
"""

from .beams import enumerate_beams, beam_count
from .intersections import segment_intersect, find_intersections, find_intersections_vectorized
from .hull import convex_hull, is_strictly_convex

__all__ = [
    'enumerate_beams',
    'beam_count',
    'segment_intersect',
    'find_intersections',
    'find_intersections_vectorized',
    'convex_hull',
    'is_strictly_convex',
]
