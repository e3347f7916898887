"""
Export / import of zone configurations as JSON.

The exported document layout is shared with other consumers of these files:

    {
      "sensors": [{"id", "x", "y"}, ...],
      "intersections": [{"x", "y"}, ...],
      "securePolygon": [{"x", "y"}, ...],
      "statistics": {"sensorCount", "beamCount", "intersectionCount", "secureArea"}
    }
"""

import json
import logging
import math
from pathlib import Path
from typing import List, Tuple, Union

from ..config import EXPORT_FILENAME
from .facade import ZoneSnapshot

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def zone_stats(snapshot: ZoneSnapshot) -> dict:
    """
    Summary statistics for a snapshot.

    Returns
    -------
    dict
        ``sensorCount``, ``beamCount``, ``intersectionCount`` and
        ``secureArea``.
    """
    return {
        'sensorCount': len(snapshot.sensors),
        'beamCount': snapshot.beam_count,
        'intersectionCount': len(snapshot.intersections),
        'secureArea': snapshot.secure_area,
    }


def export_data(snapshot: ZoneSnapshot) -> dict:
    """Build the export document for ``snapshot``."""
    return {
        'sensors': [s.to_dict() for s in snapshot.sensors],
        'intersections': [p.to_dict() for p in snapshot.intersections],
        'securePolygon': [p.to_dict() for p in snapshot.secure_polygon],
        'statistics': zone_stats(snapshot),
    }


def save_export(snapshot: ZoneSnapshot, path: PathLike = EXPORT_FILENAME) -> Path:
    """
    Write the export document to ``path`` as indented JSON.

    Returns
    -------
    Path
        The path written.
    """
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(export_data(snapshot), f, indent=2)
    logger.info(f"Configuration exported successfully to {path}")
    return path


def load_export(path: PathLike) -> List[Tuple[float, float]]:
    """
    Read sensor positions from an exported file.

    Only the ``sensors`` array is used; everything else is derived and is
    recomputed after loading.

    Returns
    -------
    list of (float, float)
        Sensor positions in file order.

    Raises
    ------
    ValueError
        If the file is not valid JSON or the sensors are malformed.
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get('sensors'), list):
        raise ValueError(f"Expected an object with a 'sensors' list in {path}")

    positions = []
    for k, entry in enumerate(data['sensors']):
        try:
            x, y = float(entry['x']), float(entry['y'])
        except (TypeError, KeyError, ValueError) as e:
            raise ValueError(f"Malformed sensor #{k} in {path}: {entry!r}") from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Sensor #{k} in {path} has non-finite coordinates")
        positions.append((x, y))

    logger.info(f"Loaded {len(positions)} sensors from {path}")
    return positions
