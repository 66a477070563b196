"""
Landmark measurement model.

Scores a particle by projecting the map landmarks within sensor range
into the particle's local frame, associating the sensor observations
with them and multiplying per-observation likelihoods.

Measurement: z = [x_local, y_local] per observed landmark.

Notes
-----
The per-observation likelihood is

    exp(-0.5 * (dx**2 * std_x + dy**2 * std_y)) / sqrt(2*pi * std_x * std_y)

with the standard deviations used as given. This is not the bivariate
normal density, which would divide the squared residuals by the
variances and use the variances in the normalizer. The form above is
what the filter has always been tuned against and is kept as is.
"""

import logging

import numpy as np

from ..common.association import associate_nearest
from ..common.transforms import global_to_local
from ..common.types import LocalObservation

logger = logging.getLogger(__name__)


class LandmarkMeasurementModel:
    """
    Range-limited landmark measurement model.

    Parameters
    ----------
    sensor_range : float
        Maximum distance at which a landmark can be observed
    std_landmark : array_like
        Measurement standard deviations [std_x, std_y]
    """

    def __init__(self, sensor_range, std_landmark):
        self.sensor_range = sensor_range
        self.std_landmark = np.asarray(std_landmark, dtype=float)

    def project_landmarks(self, pose, landmarks):
        """
        Landmarks within sensor range, expressed in the frame of ``pose``.

        The range test uses the global distance, before rotation.

        Parameters
        ----------
        pose : tuple
            (x, y, theta)
        landmarks : list of MapLandmark
            Static map

        Returns
        -------
        list of LocalObservation
            Candidates in map order, ``id`` set to the map landmark id
        """
        px, py, _ = pose
        predicted = []

        for landmark in landmarks:
            distance = np.hypot(landmark.x - px, landmark.y - py)
            if distance <= self.sensor_range:
                lx, ly = global_to_local(landmark.x, landmark.y, pose)
                predicted.append(LocalObservation(float(lx), float(ly), id=landmark.id))

        return predicted

    def likelihood(self, dx, dy):
        """Likelihood of one observation residual (dx, dy)."""
        std_x, std_y = self.std_landmark
        numerator = np.exp(-0.5 * (dx**2 * std_x + dy**2 * std_y))
        denominator = np.sqrt(2.0 * np.pi * std_x * std_y)
        return numerator / denominator

    def particle_weight(self, particle, observations, landmarks):
        """
        Importance weight of one particle.

        Association runs on a private copy of ``observations`` so the
        caller's list is shared safely between particles. A particle
        with no landmark in range keeps the empty-product weight 1.0.

        Parameters
        ----------
        particle : Particle
            Particle to score; ``particle.associations`` is refreshed
        observations : list of LocalObservation
            Sensor observations in the vehicle frame
        landmarks : list of MapLandmark
            Static map

        Returns
        -------
        float
            Product of per-observation likelihoods
        """
        predicted = self.project_landmarks(particle.pose(), landmarks)
        own_observations = [obs.copy() for obs in observations]

        if not predicted:
            logger.debug("Particle %d has no landmark within %.2f",
                         particle.id, self.sensor_range)
            particle.associations = []
            return 1.0

        associate_nearest(predicted, own_observations)

        weight = 1.0
        for obs in own_observations:
            match = predicted[obs.id]
            weight *= self.likelihood(obs.x - match.x, obs.y - match.y)

        particle.associations = [predicted[obs.id].id for obs in own_observations]

        return float(weight)
