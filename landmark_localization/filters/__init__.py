"""
Landmark localization filters.

All filters follow a consistent API inspired by FilterPy.
"""

from .particle import ParticleFilter, NotInitializedError, DegenerateWeightsError

__all__ = [
    'ParticleFilter',
    'NotInitializedError',
    'DegenerateWeightsError',
]
