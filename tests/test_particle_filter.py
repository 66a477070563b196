import numpy as np
import pytest

from landmark_localization import ParticleFilter, NotInitializedError, LocalObservation
from landmark_localization.common import global_to_local, local_to_global


def test_init_populates_particles(pf):
    assert pf.is_initialized
    assert len(pf.particles) == 50
    assert [p.id for p in pf.particles] == list(range(50))
    np.testing.assert_array_equal(pf.weights, np.ones(50))


def test_init_spread_matches_std():
    pf = ParticleFilter(num_particles=5000, seed=5)
    pf.init(10.0, -4.0, 1.0, [0.3, 0.6, 0.02])

    poses, _ = pf.get_particles()

    np.testing.assert_allclose(poses.mean(axis=0), [10.0, -4.0, 1.0], atol=0.03)
    np.testing.assert_allclose(poses.std(axis=0), [0.3, 0.6, 0.02], rtol=0.1)


@pytest.mark.parametrize('call', [
    lambda pf: pf.predict(0.1, [0.1, 0.1, 0.01], 1.0, 0.0),
    lambda pf: pf.update_weights(50.0, [0.3, 0.3], [], []),
    lambda pf: pf.resample(),
    lambda pf: pf.estimate(),
    lambda pf: pf.best_particle(),
    lambda pf: pf.write('unused.txt'),
])
def test_methods_require_init(call):
    with pytest.raises(NotInitializedError):
        call(ParticleFilter(num_particles=10, seed=0))


def test_same_seed_is_reproducible(landmarks):
    def run(seed):
        pf = ParticleFilter(num_particles=30, seed=seed)
        pf.init(0.0, 0.0, 0.0, [0.3, 0.3, 0.01])
        pf.predict(0.1, [0.3, 0.3, 0.01], 5.0, 0.1)
        pf.update_weights(10.0, [0.3, 0.3], [(5.0, 0.0)], landmarks)
        pf.resample()
        return pf.get_particles()[0]

    np.testing.assert_array_equal(run(11), run(11))
    assert not np.array_equal(run(11), run(12))


def test_full_cycle_keeps_cardinality(pf, landmarks):
    for _ in range(5):
        pf.predict(0.1, [0.1, 0.1, 0.01], 1.0, 0.0)
        assert len(pf.particles) == 50
        pf.update_weights(10.0, [0.3, 0.3], [(5.0, 0.0), (0.0, 5.0)], landmarks)
        assert len(pf.particles) == 50
        pf.resample()
        assert len(pf.particles) == 50


def test_filter_converges_on_true_pose(landmarks):
    true_pose = (0.4, -0.3, 0.05)
    observations = [
        LocalObservation(*map(float, global_to_local(lm.x, lm.y, true_pose)))
        for lm in landmarks[:3]
    ]

    pf = ParticleFilter(num_particles=500, seed=2)
    pf.init(0.0, 0.0, 0.0, [1.0, 1.0, 0.1])
    for _ in range(8):
        pf.update_weights(20.0, [0.3, 0.3], observations, landmarks)
        pf.resample()
        pf.predict(0.1, [0.05, 0.05, 0.005], 0.0, 0.0)

    pf.update_weights(20.0, [0.3, 0.3], observations, landmarks)
    np.testing.assert_allclose(pf.estimate()[:2], true_pose[:2], atol=0.3)


def test_estimate_uses_circular_mean_for_heading():
    pf = ParticleFilter(num_particles=2, seed=0)
    pf.init(0.0, 0.0, 0.0, [0.0, 0.0, 0.0])
    pf.particles[0].theta = np.pi - 0.1
    pf.particles[1].theta = -np.pi + 0.1

    theta = pf.estimate()[2]

    assert abs(abs(theta) - np.pi) < 1e-9


def test_best_particle_first_on_ties(pf):
    for p in pf.particles:
        p.weight = 0.5
    pf.particles[7].weight = 2.0
    pf.particles[9].weight = 2.0

    assert pf.best_particle().id == 7


def test_write_appends_lines(tmp_path):
    path = tmp_path / 'particles.txt'
    path.write_text("previous\n")

    pf = ParticleFilter(num_particles=3, seed=0)
    pf.init(1.0, 2.0, 0.5, [0.0, 0.0, 0.0])
    pf.write(path)
    pf.predict(1.0, [0.0, 0.0, 0.0], 1.0, 0.0)
    pf.write(path)

    lines = path.read_text().splitlines()
    assert len(lines) == 1 + 2 * 3
    assert lines[0] == "previous"
    assert lines[1:4] == ["1.0 2.0 0.5"] * 3
    x, y, theta = map(float, lines[4].split())
    assert x == pytest.approx(1.0 + np.cos(0.5))
    assert y == pytest.approx(2.0 + np.sin(0.5))
    assert theta == 0.5


def test_local_global_round_trip():
    pose = (3.0, -2.0, 0.7)
    gx, gy = local_to_global(1.5, -0.5, pose)
    lx, ly = global_to_local(gx, gy, pose)
    assert lx == pytest.approx(1.5)
    assert ly == pytest.approx(-0.5)
