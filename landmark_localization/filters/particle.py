"""
Particle Filter (PF) implementation.

A Sequential Importance Resampling (SIR) particle filter that localizes
a vehicle against a static landmark map, using a CTRV motion model and
nearest-neighbour landmark association.
"""

import logging

import numpy as np

from ..common.angles import circular_mean
from ..common.types import Particle, MapLandmark, LocalObservation
from ..models.ctrv import CTRVModel
from ..models.landmark import LandmarkMeasurementModel

logger = logging.getLogger(__name__)


class NotInitializedError(RuntimeError):
    """Raised when the filter is used before ``init``."""


class DegenerateWeightsError(ValueError):
    """Raised when the weights cannot define a sampling distribution."""


class ParticleFilter:
    """
    Particle Filter for landmark-based localization.

    Typical use per timestep is ``predict`` -> ``update_weights`` ->
    ``resample``, after a single call to ``init``. Every method except
    ``init`` raises ``NotInitializedError`` before the filter has been
    initialized.

    Attributes
    ----------
    num_particles : int
        Number of particles (constant for the filter's lifetime)
    particles : list of Particle
        Current particle set
    rng : np.random.Generator
        Random source shared by every sampling step
    is_initialized : bool
        Whether ``init`` has run

    Examples
    --------
    >>> pf = ParticleFilter(num_particles=200, seed=42)
    >>> pf.init(x, y, theta, std=[0.3, 0.3, 0.01])
    >>> pf.predict(dt, std_pos, velocity, yaw_rate)
    >>> pf.update_weights(sensor_range, std_landmark, observations, landmarks)
    >>> pf.resample()
    """

    def __init__(self, num_particles=200, seed=None, rng=None):
        """
        Initialize Particle Filter.

        Parameters
        ----------
        num_particles : int, optional
            Number of particles (default: 200)
        seed : int, optional
            Seed for a new ``np.random.default_rng``. Ignored if ``rng``
            is given.
        rng : np.random.Generator, optional
            Random source to use instead of creating one
        """
        self.num_particles = num_particles
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.motion_model = CTRVModel()

        self.particles = []
        self.is_initialized = False

    def init(self, x, y, theta, std):
        """
        Spread particles around an initial pose estimate.

        Parameters
        ----------
        x, y, theta : float
            Initial pose estimate (e.g. from GPS)
        std : array_like
            Standard deviations [std_x, std_y, std_theta]
        """
        std = np.asarray(std, dtype=float)
        samples = self.rng.normal([x, y, theta], std, size=(self.num_particles, 3))

        self.particles = [
            Particle(i, float(px), float(py), float(pt), 1.0)
            for i, (px, py, pt) in enumerate(samples)
        ]
        self.is_initialized = True

        logger.debug("Initialized %d particles around (%.3f, %.3f, %.3f)",
                     self.num_particles, x, y, theta)

    def predict(self, delta_t, std_pos, velocity, yaw_rate):
        """
        Predict step: move every particle by the control plus noise.

        Parameters
        ----------
        delta_t : float
            Elapsed time in seconds
        std_pos : array_like
            Process noise standard deviations [std_x, std_y, std_theta]
        velocity : float
            Linear velocity
        yaw_rate : float
            Yaw rate in rad/s; exactly 0 selects straight-line motion
        """
        self._check_initialized()

        u = (velocity, yaw_rate)
        for particle in self.particles:
            particle.x, particle.y, particle.theta = (
                float(v) for v in self.motion_model.sample(
                    particle.pose(), u, delta_t, std_pos, self.rng
                )
            )

    def update_weights(self, sensor_range, std_landmark, observations, landmarks):
        """
        Update step: set each particle's weight from the observations.

        Weights are replaced, not accumulated.

        Parameters
        ----------
        sensor_range : float
            Sensor range; map landmarks farther than this are ignored
        std_landmark : array_like
            Measurement standard deviations [std_x, std_y]
        observations : list of LocalObservation or (x, y) pairs
            Observations in the vehicle frame. Not mutated.
        landmarks : list of MapLandmark or (id, x, y) tuples
            Static map
        """
        self._check_initialized()

        model = LandmarkMeasurementModel(sensor_range, std_landmark)
        observations = [
            obs if isinstance(obs, LocalObservation) else LocalObservation(*obs)
            for obs in observations
        ]
        landmarks = [
            lm if isinstance(lm, MapLandmark) else MapLandmark(*lm)
            for lm in landmarks
        ]

        for particle in self.particles:
            particle.weight = model.particle_weight(particle, observations, landmarks)

    @property
    def weights(self):
        """Particle weights (N,), read from the particles."""
        return np.array([p.weight for p in self.particles], dtype=float)

    def resample(self, scheme='multinomial', resample_threshold=None):
        """
        Replace the particle set by a draw proportional to the weights.

        Parameters
        ----------
        scheme : str, optional
            Resampling scheme. Options: 'multinomial', 'systematic',
            'stratified', 'residual'. Default: 'multinomial'
        resample_threshold : float, optional
            If given, resampling only happens when the effective sample
            size drops below this value.

        Raises
        ------
        DegenerateWeightsError
            If the weights do not sum to a positive finite value
        """
        self._check_initialized()

        probabilities = self._normalized_weights()

        if resample_threshold is not None:
            n_eff = 1.0 / np.sum(probabilities**2)
            if n_eff >= resample_threshold:
                logger.debug("Skipping resampling, ESS %.1f >= %.1f",
                             n_eff, resample_threshold)
                return

        if scheme == 'multinomial':
            indices = self._multinomial_resample(probabilities)
        elif scheme == 'systematic':
            indices = self._systematic_resample(probabilities)
        elif scheme == 'stratified':
            indices = self._stratified_resample(probabilities)
        elif scheme == 'residual':
            indices = self._residual_resample(probabilities)
        else:
            raise ValueError(f"Unknown resampling scheme: {scheme}")

        self.particles = [self.particles[i].copy() for i in indices]

    def effective_sample_size(self):
        """
        Compute effective sample size (ESS): Neff.

        Lower values indicate particle degeneracy.

        Returns
        -------
        float
            Effective sample size (1 to N)
        """
        self._check_initialized()
        probabilities = self._normalized_weights()
        return 1.0 / np.sum(probabilities**2)

    def estimate(self):
        """
        Weighted mean pose of the particle set.

        Heading uses the circular mean.

        Returns
        -------
        np.ndarray
            [x, y, theta]
        """
        self._check_initialized()
        poses, weights = self.get_particles()
        if np.sum(weights) <= 0:
            weights = np.ones(len(weights))

        x = np.average(poses[:, 0], weights=weights)
        y = np.average(poses[:, 1], weights=weights)
        theta = circular_mean(poses[:, 2], weights)

        return np.array([x, y, theta])

    def best_particle(self):
        """Particle with the highest weight (first one on ties)."""
        self._check_initialized()
        return self.particles[int(np.argmax(self.weights))]

    def get_particles(self):
        """
        Get current particles and weights.

        Returns
        -------
        poses : np.ndarray
            Particle poses (N, 3) as [x, y, theta]
        weights : np.ndarray
            Particle weights (N,)
        """
        poses = np.array([p.pose() for p in self.particles], dtype=float).reshape(-1, 3)
        return poses, self.weights

    def write(self, filename):
        """
        Append the particle poses to ``filename``, one "x y theta" line each.

        The file is opened in append mode, so calling this once per
        timestep builds a trajectory log.
        """
        self._check_initialized()
        with open(filename, 'a') as f:
            for p in self.particles:
                f.write(f"{p.x} {p.y} {p.theta}\n")

    def _check_initialized(self):
        if not self.is_initialized:
            raise NotInitializedError("ParticleFilter.init() must be called first")

    def _normalized_weights(self):
        weights = self.weights
        weight_sum = np.sum(weights)
        if not np.isfinite(weight_sum) or weight_sum <= 0:
            logger.warning("Degenerate weight vector (sum=%r)", weight_sum)
            raise DegenerateWeightsError(
                f"Particle weights must sum to a positive value, got {weight_sum}"
            )
        return weights / weight_sum

    def _multinomial_resample(self, probabilities):
        """
        Multinomial resampling.

        N independent draws with replacement. Higher variance than the
        systematic and stratified schemes.
        """
        return self.rng.choice(self.num_particles, size=self.num_particles,
                               p=probabilities)

    def _systematic_resample(self, probabilities):
        """
        Systematic resampling.

        One random offset shared by N evenly spaced positions.
        """
        positions = (np.arange(self.num_particles) + self.rng.random()) / self.num_particles
        return self._select(positions, probabilities)

    def _stratified_resample(self, probabilities):
        """
        Stratified resampling.

        Divides [0,1] into N strata and samples one position from each.
        """
        positions = (np.arange(self.num_particles)
                     + self.rng.random(self.num_particles)) / self.num_particles
        return self._select(positions, probabilities)

    def _residual_resample(self, probabilities):
        """
        Residual resampling.

        Deterministically keeps floor(N * weight[i]) copies of each particle,
        then draws the remainder multinomially from the residual weights.
        """
        N = self.num_particles
        num_copies = np.floor(N * probabilities).astype(int)
        indices = np.repeat(np.arange(N), num_copies)

        remaining = N - len(indices)
        if remaining > 0:
            residual = N * probabilities - num_copies
            residual /= np.sum(residual)
            extra = self.rng.choice(N, size=remaining, p=residual)
            indices = np.concatenate([indices, extra])

        return indices

    def _select(self, positions, probabilities):
        cumsum = np.cumsum(probabilities)
        cumsum[-1] = 1.0  # guard against round-off
        return np.searchsorted(cumsum, positions, side='right')
