"""
Visualization utilities for landmark localization.
"""

from .particles import plot_particles, plot_trajectory

__all__ = [
    'plot_particles',
    'plot_trajectory',
]
