"""
Nearest-neighbour data association.
"""

import numpy as np
from scipy.spatial.distance import cdist


def associate_nearest(candidates, observations):
    """
    Assign each observation to its nearest candidate.

    Writes the index of the closest candidate (Euclidean distance) into
    ``observation.id``, in place. On equal distances the candidate that
    comes first in ``candidates`` wins. Observations are left untouched
    when there are no candidates.

    Parameters
    ----------
    candidates : list of LocalObservation
        Projected landmarks in the same local frame as the observations
    observations : list of LocalObservation
        Observations to associate (mutated)

    Returns
    -------
    np.ndarray
        The assigned indices (len(observations),)
    """
    if not candidates or not observations:
        return np.zeros(0, dtype=int)

    obs_xy = np.array([[o.x, o.y] for o in observations], dtype=float)
    cand_xy = np.array([[c.x, c.y] for c in candidates], dtype=float)

    # argmin returns the first minimum, which gives the tie-break above
    indices = np.argmin(cdist(obs_xy, cand_xy), axis=1)

    for obs, idx in zip(observations, indices):
        obs.id = int(idx)

    return indices
