"""
Configuration & Constants
=========================
Central registry for the numeric tolerances, interaction defaults and
rendering settings shared across the package.

Exports:
    EPS (float): Tolerance for parallel beams and polar-angle ties.
    MIN_SENSORS_FOR_INTERSECTIONS (int): Fewest sensors that can produce two
        beams without a shared endpoint.
    MIN_HULL_POINTS (int): Fewest intersection points that form a secure zone.
    REMOVE_RADIUS (float): Pick radius used when removing a sensor by position.
    SAMPLE_SENSORS (tuple): Positions loaded by the sample configuration.
    EXPORT_FILENAME (str): Default name of the exported JSON file.
    PAIR_BLOCK_SIZE (int): Upper bound on beam pairs held in memory at once
        by the vectorized intersection engine.
"""
from typing import Dict, Tuple

# Numerical tolerance for parallel beams and polar-angle ties
EPS: float = 1e-10

MIN_SENSORS_FOR_INTERSECTIONS: int = 4
MIN_HULL_POINTS: int = 3

# Beam pairs evaluated per numpy block by the vectorized engine
PAIR_BLOCK_SIZE: int = 250_000

# Interaction
REMOVE_RADIUS: float = 10.0

# Canvas
CANVAS_SIZE: Tuple[int, int] = (800, 600)
GRID_SIZE: int = 50

SAMPLE_SENSORS: Tuple[Tuple[float, float], ...] = (
    (150.0, 100.0),
    (650.0, 150.0),
    (200.0, 500.0),
    (600.0, 450.0),
    (400.0, 200.0),
)

EXPORT_FILENAME: str = "surveillance-config.json"

COLORS: Dict[str, str] = {
    "sensor": "#ff4444",
    "beam": "#ff4444",
    "intersection": "#ffaa00",
    "secure_zone": "#00ff64",
    "grid": "#888888",
    "text": "#222222",
}

BACKGROUND_ALPHA: float = 0.3
