"""
Particle Filter Example for Landmark Localization

Demonstrates the Particle Filter on a synthetic landmark map.
"""

import numpy as np
import matplotlib.pyplot as plt
import sys
import os
from pathlib import Path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from landmark_localization import ParticleFilter
from landmark_localization.metrics import compute_all_metrics, print_metrics, pose_error
from landmark_localization.visualization import plot_particles, plot_trajectory

from trajectory_generators import generate_landmark_map, generate_synthetic_data

# ============================================================================
# CONFIGURATION
# ============================================================================
SEED = 7
N_STEPS = 300
DT = 0.1
N_PARTICLES = 200

SENSOR_RANGE = 50.0
SIGMA_POS = [0.3, 0.3, 0.01]      # GPS init / process noise [x, y, theta]
SIGMA_LANDMARK = [0.3, 0.3]       # observation noise [x, y]

RESULTS_PATH = Path(__file__).parent.parent / 'results' / 'pf'
TRAJECTORY_LOG = RESULTS_PATH / 'particles.txt'
# ============================================================================


def run_pf_example():
    """Run Particle Filter example."""

    print("\n" + "=" * 60)
    print("Particle Filter Example - Landmark Localization")
    print("=" * 60 + "\n")

    rng = np.random.default_rng(SEED)
    landmarks = generate_landmark_map(rng=rng)
    data = generate_synthetic_data(landmarks, N=N_STEPS, dt=DT,
                                   sensor_range=SENSOR_RANGE,
                                   obs_std=SIGMA_LANDMARK, rng=rng)

    controls = data['controls']
    observations = data['observations']
    ground_truth = data['ground_truth']
    dt = data['dt']

    results_dir = RESULTS_PATH
    results_dir.mkdir(parents=True, exist_ok=True)
    if TRAJECTORY_LOG.exists():
        TRAJECTORY_LOG.unlink()

    print(f"Initializing Particle Filter with {N_PARTICLES} particles...")
    pf = ParticleFilter(num_particles=N_PARTICLES, rng=rng)

    # Noisy GPS fix at the start pose
    x0, y0, theta0 = ground_truth[0] + rng.normal(0.0, SIGMA_POS)
    pf.init(x0, y0, theta0, SIGMA_POS)

    estimates = np.zeros((N_STEPS, 3))
    best = np.zeros((N_STEPS, 3))

    print("Running Particle Filter...")
    for k in range(N_STEPS):
        if k > 0:
            v, yaw_rate = controls[k - 1]
            pf.predict(dt, SIGMA_POS, v, yaw_rate)

        pf.update_weights(SENSOR_RANGE, SIGMA_LANDMARK, observations[k], landmarks)

        estimates[k] = pf.estimate()
        best[k] = pf.best_particle().pose()

        pf.resample()
        pf.write(TRAJECTORY_LOG)

        if (k + 1) % 50 == 0:
            err = pose_error(best[k], ground_truth[k])
            print(f"  Step {k+1}/{N_STEPS}, best particle error: "
                  f"x={err[0]:.3f} y={err[1]:.3f} theta={err[2]:.4f}")

    print("Particle Filter complete!\n")

    metrics = compute_all_metrics(estimates, ground_truth)
    print_metrics(metrics, filter_name="PF (weighted mean)")
    print_metrics(compute_all_metrics(best, ground_truth), filter_name="PF (best particle)")

    print("\nGenerating plots...")
    fig1, _ = plot_trajectory(estimates, ground_truth, landmarks=landmarks,
                              title="PF Trajectory", show=False,
                              save_path=results_dir / 'pf_trajectory.png')
    print(f"  Saved: {results_dir / 'pf_trajectory.png'}")

    fig2, _ = plot_particles(pf.particles, landmarks=landmarks,
                             true_pose=ground_truth[-1], estimate=estimates[-1],
                             title="Final Particle Set")
    fig2.savefig(results_dir / 'pf_particles.png', dpi=300, bbox_inches='tight')
    print(f"  Saved: {results_dir / 'pf_particles.png'}")
    plt.close('all')

    print("\n" + "=" * 60)
    print("Particle Filter Example Complete!")
    print(f"Results saved to '{results_dir}' directory")
    print("=" * 60)


if __name__ == "__main__":
    run_pf_example()
