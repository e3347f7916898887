"""
Beam enumeration: every unordered pair of sensors.
"""

from typing import List, Sequence, Tuple, TypeVar

P = TypeVar('P')

Beam = Tuple[P, P]


def enumerate_beams(points: Sequence[P]) -> List[Tuple[P, P]]:
    """
    Enumerate the edges of the complete graph over ``points``.

    Parameters
    ----------
    points : sequence
        Sensors in insertion order.

    Returns
    -------
    list of tuple
        Pairs ``(points[i], points[j])`` with ``i < j``, in row-major order.
        Exactly ``n*(n-1)/2`` pairs; empty for fewer than 2 points.
    """
    n = len(points)
    return [(points[i], points[j]) for i in range(n) for j in range(i + 1, n)]


def beam_count(n_sensors: int) -> int:
    """Number of beams between ``n_sensors`` sensors."""
    if n_sensors < 2:
        return 0
    return n_sensors * (n_sensors - 1) // 2
