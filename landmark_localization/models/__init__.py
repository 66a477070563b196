"""
Motion and measurement models for landmark localization.
"""

from .ctrv import CTRVModel
from .landmark import LandmarkMeasurementModel

__all__ = [
    'CTRVModel',
    'LandmarkMeasurementModel',
]
