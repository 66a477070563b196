"""
Frame transforms between the global map frame and a pose's local frame.
"""

import numpy as np


def global_to_local(x, y, pose):
    """
    Express global point(s) in the local frame of ``pose``.

    Translation by the negated pose position followed by rotation by the
    pose heading:

        local_x = dx*cos(theta) + dy*sin(theta)
        local_y = dy*cos(theta) - dx*sin(theta)

    Parameters
    ----------
    x, y : float or np.ndarray
        Global coordinates
    pose : tuple
        (x, y, theta) of the local frame origin

    Returns
    -------
    tuple
        (local_x, local_y)
    """
    px, py, theta = pose
    dx = np.asarray(x, dtype=float) - px
    dy = np.asarray(y, dtype=float) - py

    c = np.cos(theta)
    s = np.sin(theta)

    return dx * c + dy * s, dy * c - dx * s


def local_to_global(x, y, pose):
    """
    Inverse of :func:`global_to_local`.
    """
    px, py, theta = pose
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    c = np.cos(theta)
    s = np.sin(theta)

    return px + x * c - y * s, py + x * s + y * c
