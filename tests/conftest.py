import pytest

from landmark_localization import ParticleFilter, MapLandmark


@pytest.fixture
def landmarks():
    return [
        MapLandmark(1, 5.0, 0.0),
        MapLandmark(2, 0.0, 5.0),
        MapLandmark(3, -5.0, 0.0),
        MapLandmark(4, 100.0, 100.0),
    ]


@pytest.fixture
def pf():
    filt = ParticleFilter(num_particles=50, seed=1234)
    filt.init(0.0, 0.0, 0.0, [0.5, 0.5, 0.05])
    return filt
