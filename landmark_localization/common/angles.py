"""
Heading helpers.

Headings are handled as unit phasors exp(i*theta), which makes both
wrapping and averaging across ±pi a matter of taking np.angle.
"""

import numpy as np


def normalize_angle(angle):
    """
    Wrap heading(s) to [-pi, pi].

    Parameters
    ----------
    angle : float or np.ndarray
        Angle(s) in radians

    Returns
    -------
    float or np.ndarray
        Wrapped angle(s)
    """
    return np.angle(np.exp(1j * np.asarray(angle, dtype=float)))


def angle_diff(angle1, angle2):
    """
    Signed heading difference angle1 - angle2, wrapped to [-pi, pi].

    Examples
    --------
    >>> angle_diff(0.1, -0.1)
    0.2
    """
    return normalize_angle(np.asarray(angle1) - np.asarray(angle2))


def circular_mean(angles, weights=None):
    """
    Importance-weighted mean heading of a particle set.

    The weights need not be normalized; an unweighted mean is taken
    when ``weights`` is None.

    Parameters
    ----------
    angles : array_like
        Particle headings (N,)
    weights : array_like, optional
        Particle weights (N,)

    Returns
    -------
    float
        Mean heading in [-pi, pi]
    """
    phasors = np.exp(1j * np.asarray(angles, dtype=float))
    if weights is not None:
        phasors = phasors * np.asarray(weights, dtype=float)

    return float(np.angle(np.sum(phasors)))
