import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np

from landmark_localization.visualization import plot_particles, plot_trajectory


def test_plot_particles(pf, landmarks):
    fig, ax = plot_particles(pf.particles, landmarks=landmarks,
                             true_pose=(0.0, 0.0, 0.0), estimate=pf.estimate())
    assert ax.get_title() == "Particle Set"
    plt.close(fig)


def test_plot_trajectory_saves(tmp_path, landmarks):
    estimates = np.column_stack([np.arange(5.0), np.zeros(5), np.zeros(5)])
    path = tmp_path / 'traj.png'

    fig, _ = plot_trajectory(estimates, estimates, landmarks=landmarks,
                             save_path=path, show=False)

    assert path.exists()
    plt.close(fig)
