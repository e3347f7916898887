"""
Visualization utilities for the secure zone.

Renders a ``ZoneSnapshot`` in canvas coordinates (origin top-left, y down):
- optional background image and grid
- secure zone polygon
- beams between every sensor pair
- intersection markers
- sensors labelled with their ids
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import matplotlib.pyplot as plt

from ..config import BACKGROUND_ALPHA, CANVAS_SIZE, COLORS, GRID_SIZE
from ..core.geometry import to_array
from ..layout.export import zone_stats
from ..layout.facade import ZoneSnapshot

Background = Union[np.ndarray, str, Path, None]


def format_sensor_list(snapshot: ZoneSnapshot) -> List[str]:
    """One line per sensor, positions rounded to whole pixels."""
    if not snapshot.sensors:
        return ["No sensors placed"]
    return [f"Sensor {s.id}: ({round(s.x)}, {round(s.y)})" for s in snapshot.sensors]


def plot_zone(
    snapshot: ZoneSnapshot,
    ax: Optional[plt.Axes] = None,
    show_beams: bool = True,
    show_intersections: bool = True,
    show_secure_zone: bool = True,
    show_grid: bool = False,
    show_stats: bool = True,
    background: Background = None,
    canvas_size: Tuple[int, int] = CANVAS_SIZE,
    title: str = "Surveillance Zone"
) -> plt.Axes:
    """
    Draw sensors, beams, intersections and the secure zone.

    Parameters
    ----------
    snapshot : ZoneSnapshot
        Geometry to draw; nothing is recomputed here.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    show_beams, show_intersections, show_secure_zone, show_grid : bool
        Layer toggles.
    show_stats : bool
        Whether to show the statistics box.
    background : np.ndarray or path, optional
        Image stretched over the canvas at reduced opacity.
    canvas_size : tuple
        Canvas (width, height) in pixels.
    title : str
        Plot title.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(10, 7.5))

    width, height = canvas_size

    if background is not None:
        image = plt.imread(str(background)) if isinstance(background, (str, Path)) else background
        ax.imshow(image, extent=(0, width, height, 0), alpha=BACKGROUND_ALPHA, zorder=0)

    if show_grid:
        for x in range(0, width + 1, GRID_SIZE):
            ax.axvline(x, color=COLORS['grid'], linewidth=0.5, alpha=0.3, zorder=0)
        for y in range(0, height + 1, GRID_SIZE):
            ax.axhline(y, color=COLORS['grid'], linewidth=0.5, alpha=0.3, zorder=0)

    if show_secure_zone and len(snapshot.secure_polygon) >= 3:
        poly = to_array(snapshot.secure_polygon)
        ax.fill(poly[:, 0], poly[:, 1], color=COLORS['secure_zone'], alpha=0.15, zorder=1)
        closed_poly = np.vstack([poly, poly[0]])
        ax.plot(closed_poly[:, 0], closed_poly[:, 1], color=COLORS['secure_zone'],
                alpha=0.5, linewidth=2, zorder=1, label='Secure zone')

    if show_beams and snapshot.beams:
        for s1, s2 in snapshot.beams:
            # Glow, then core
            ax.plot([s1.x, s2.x], [s1.y, s2.y], color=COLORS['beam'], alpha=0.3, linewidth=4, zorder=2)
            ax.plot([s1.x, s2.x], [s1.y, s2.y], color=COLORS['beam'], alpha=0.6, linewidth=2, zorder=2)

    if show_intersections and snapshot.intersections:
        pts = to_array(snapshot.intersections)
        ax.scatter(pts[:, 0], pts[:, 1], c=COLORS['intersection'], s=30,
                   zorder=3, label='Intersections')

    if snapshot.sensors:
        sensors = to_array(snapshot.sensors)
        ax.scatter(sensors[:, 0], sensors[:, 1], c=COLORS['sensor'], s=80,
                   edgecolors='white', zorder=4, label='Sensors')
        for s in snapshot.sensors:
            ax.annotate(str(s.id), (s.x, s.y), textcoords='offset points', xytext=(0, 12),
                        ha='center', fontsize=8, fontweight='bold', fontfamily='monospace',
                        color=COLORS['text'], zorder=5)

    if show_stats:
        stats = zone_stats(snapshot)
        stats_text = (
            f"Sensors: {stats['sensorCount']}\n"
            f"Beams: {stats['beamCount']}\n"
            f"Intersections: {stats['intersectionCount']}\n"
            f"Secure area: {round(stats['secureArea'])}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')

    return ax


def save_zone_plot(snapshot: ZoneSnapshot, path: Union[str, Path], **kwargs) -> Path:
    """Render ``snapshot`` with ``plot_zone`` and save it as an image."""
    fig, ax = plt.subplots(1, 1, figsize=(10, 7.5))
    plot_zone(snapshot, ax=ax, **kwargs)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return Path(path)
