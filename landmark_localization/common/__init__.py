"""
Common utilities for landmark localization.

Includes data records, angle handling, frame transforms and data
association.
"""

from .types import Particle, MapLandmark, LocalObservation, UNASSOCIATED
from .angles import normalize_angle, angle_diff, circular_mean
from .transforms import global_to_local, local_to_global
from .association import associate_nearest

__all__ = [
    'Particle',
    'MapLandmark',
    'LocalObservation',
    'UNASSOCIATED',
    'normalize_angle',
    'angle_diff',
    'circular_mean',
    'global_to_local',
    'local_to_global',
    'associate_nearest',
]
