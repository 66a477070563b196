"""
Data records shared by the filter components.

Particles are updated in place every timestep and the association
engine writes its result into ``LocalObservation.id``.
"""

import copy

# Association result for an observation not yet matched to a candidate
UNASSOCIATED = -1


class Particle:
    """
    One weighted pose hypothesis.

    Parameters
    ----------
    id : int
        Index of the particle at initialization
    x, y : float
        Position in the global map frame
    theta : float
        Heading in radians
    weight : float, optional
        Importance weight (default: 1.0)
    """

    def __init__(self, id, x, y, theta, weight=1.0):
        self.id = id
        self.x = x
        self.y = y
        self.theta = theta
        self.weight = weight
        # Map ids matched to each observation during the last weight update
        self.associations = []

    def copy(self):
        return copy.deepcopy(self)

    def pose(self):
        return (self.x, self.y, self.theta)

    def __repr__(self):
        return (f"Particle(id={self.id}, x={self.x:.4f}, y={self.y:.4f}, "
                f"theta={self.theta:.4f}, weight={self.weight:.4g})")


class MapLandmark:
    """Static landmark in the global map frame."""

    def __init__(self, id, x, y):
        self.id = id
        self.x = x
        self.y = y

    def __repr__(self):
        return f"MapLandmark(id={self.id}, x={self.x}, y={self.y})"


class LocalObservation:
    """
    Landmark observation or prediction in a local (sensor) frame.

    For sensor observations ``id`` is the association result: an index
    into the current candidate list, ``UNASSOCIATED`` until matched.
    For projected landmarks it holds the map landmark id.
    """

    def __init__(self, x, y, id=UNASSOCIATED):
        self.id = id
        self.x = x
        self.y = y

    def copy(self):
        return LocalObservation(self.x, self.y, id=self.id)

    def __repr__(self):
        return f"LocalObservation(id={self.id}, x={self.x}, y={self.y})"
