"""
Visualization utilities.
"""

from .plotting import plot_zone, save_zone_plot, format_sensor_list

__all__ = ['plot_zone', 'save_zone_plot', 'format_sensor_list']
