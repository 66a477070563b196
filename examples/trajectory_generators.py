"""
Trajectory Generators for Landmark Localization Testing

Functions to generate a synthetic landmark map, a CTRV ground-truth
trajectory and the matching noisy controls and local observations.

All generators produce consistent output format:
    - time: array of timestamps
    - controls: array of noisy control inputs [v, yaw_rate]
    - observations: list (per timestep) of noisy local observations (x, y)
    - ground_truth: array of true poses [x, y, theta]
    - dt: time step
"""

import numpy as np
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from landmark_localization import MapLandmark
from landmark_localization.common import global_to_local
from landmark_localization.models import CTRVModel


def generate_landmark_map(n_landmarks=40, extent=100.0, rng=None):
    """
    Scatter landmarks uniformly over a square map.

    Parameters
    ----------
    n_landmarks : int, optional
        Number of landmarks (default: 40)
    extent : float, optional
        Side length of the square map in meters, centered on the origin
    rng : np.random.Generator, optional
        Random source

    Returns
    -------
    list of MapLandmark
    """
    if rng is None:
        rng = np.random.default_rng()

    xy = rng.uniform(-extent / 2, extent / 2, size=(n_landmarks, 2))
    return [MapLandmark(i + 1, float(x), float(y)) for i, (x, y) in enumerate(xy)]


def generate_synthetic_data(landmarks, N=200, dt=0.1, sensor_range=50.0,
                            control_std=(0.1, 0.01), obs_std=(0.3, 0.3),
                            rng=None):
    """
    Drive a slalom-like CTRV trajectory and record what the sensor sees.

    Parameters
    ----------
    landmarks : list of MapLandmark
        Static map
    N : int, optional
        Number of time steps (default: 200)
    dt : float, optional
        Time step in seconds (default: 0.1)
    sensor_range : float, optional
        Landmarks farther than this are not observed
    control_std : tuple, optional
        Noise on the reported [v, yaw_rate]
    obs_std : tuple, optional
        Noise on the local observations [x, y]
    rng : np.random.Generator, optional
        Random source

    Returns
    -------
    dict
        Dictionary with time, controls, observations, ground_truth, dt
    """
    if rng is None:
        rng = np.random.default_rng()

    model = CTRVModel()
    time = np.arange(N) * dt

    velocity = 5.0 + np.sin(0.2 * time)
    yaw_rate = 0.3 * np.sin(0.5 * time)
    yaw_rate[: N // 10] = 0.0  # straight start

    ground_truth = np.zeros((N, 3))
    ground_truth[0] = [-20.0, -10.0, 0.3]
    for k in range(1, N):
        u = (velocity[k - 1], yaw_rate[k - 1])
        ground_truth[k] = model.dynamics(ground_truth[k - 1], u, dt)

    controls = np.column_stack([velocity, yaw_rate])
    controls = controls + rng.normal(0.0, control_std, size=controls.shape)

    lm_xy = np.array([[lm.x, lm.y] for lm in landmarks])
    observations = []
    for pose in ground_truth:
        distance = np.hypot(lm_xy[:, 0] - pose[0], lm_xy[:, 1] - pose[1])
        visible = lm_xy[distance <= sensor_range]
        local_x, local_y = global_to_local(visible[:, 0], visible[:, 1], pose)
        local_x = local_x + rng.normal(0.0, obs_std[0], size=len(visible))
        local_y = local_y + rng.normal(0.0, obs_std[1], size=len(visible))
        observations.append(list(zip(local_x.tolist(), local_y.tolist())))

    return {
        'time': time,
        'controls': controls,
        'observations': observations,
        'ground_truth': ground_truth,
        'dt': dt,
    }
