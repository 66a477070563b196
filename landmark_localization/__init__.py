"""
Landmark Localization Library

Particle filter localization of a vehicle against a static landmark map,
with a FilterPy-inspired API.

Author: State Estimation Team
License: MIT
"""

__version__ = "1.0.0"

from .filters.particle import ParticleFilter, NotInitializedError, DegenerateWeightsError
from .common.types import Particle, MapLandmark, LocalObservation

__all__ = [
    'ParticleFilter',
    'NotInitializedError',
    'DegenerateWeightsError',
    'Particle',
    'MapLandmark',
    'LocalObservation',
]
