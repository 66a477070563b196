"""
Constant turn rate and velocity (CTRV) motion model.

State: pose = [x, y, theta]
- (x, y): position in the global map frame
- theta: heading (radians)

Control: u = [v, yaw_rate]
- v: linear velocity
- yaw_rate: angular velocity (rad/s)
"""

import numpy as np


class CTRVModel:
    """
    Bicycle / CTRV kinematics with additive Gaussian process noise.

    The deterministic step is applied first and the noise is drawn
    around its result, so the noise models process uncertainty of the
    step rather than measurement uncertainty of the prior pose.
    """

    def dynamics(self, pose, u, dt):
        """
        Deterministic motion: pose_{k+1} = f(pose_k, u_k).

        ``yaw_rate == 0`` selects the straight-line branch. There is no
        tolerance band: a yaw rate that is tiny but nonzero goes through
        the curved branch, which divides by it and loses precision.

        Parameters
        ----------
        pose : array_like
            [x, y, theta]
        u : array_like
            [v, yaw_rate]
        dt : float
            Elapsed time in seconds

        Returns
        -------
        np.ndarray
            Next pose [x, y, theta]
        """
        x, y, theta = pose
        v, yaw_rate = u

        if yaw_rate == 0:
            x_new = x + v * dt * np.cos(theta)
            y_new = y + v * dt * np.sin(theta)
            theta_new = theta
        else:
            theta_new = theta + yaw_rate * dt
            x_new = x + (v / yaw_rate) * (np.sin(theta_new) - np.sin(theta))
            y_new = y + (v / yaw_rate) * (np.cos(theta) - np.cos(theta_new))

        return np.array([x_new, y_new, theta_new])

    def sample(self, pose, u, dt, noise_std, rng):
        """
        Draw a successor pose: deterministic step plus Gaussian noise.

        Parameters
        ----------
        pose : array_like
            [x, y, theta]
        u : array_like
            [v, yaw_rate]
        dt : float
            Elapsed time in seconds
        noise_std : array_like
            Process noise standard deviations [std_x, std_y, std_theta]
        rng : np.random.Generator
            Random source

        Returns
        -------
        np.ndarray
            Noisy next pose [x, y, theta]
        """
        mean = self.dynamics(pose, u, dt)
        return rng.normal(mean, np.asarray(noise_std, dtype=float))
