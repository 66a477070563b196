"""
Particle cloud and trajectory visualization.
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_particles(particles, landmarks=None, true_pose=None, estimate=None,
                   ax=None, title="Particle Set", arrow_length=0.5):
    """
    Plot particle poses over the landmark map.

    Parameters
    ----------
    particles : np.ndarray or list of Particle
        Poses (N, 3) or particle objects
    landmarks : list of MapLandmark, optional
        Static map
    true_pose : array_like, optional
        True pose [x, y, theta]
    estimate : array_like, optional
        Filter estimate [x, y, theta]
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if None.
    title : str, optional
        Plot title
    arrow_length : float, optional
        Length of the heading arrows

    Returns
    -------
    fig, ax
        Matplotlib figure and axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    if not isinstance(particles, np.ndarray):
        particles = np.array([p.pose() for p in particles], dtype=float).reshape(-1, 3)

    ax.quiver(particles[:, 0], particles[:, 1],
              arrow_length * np.cos(particles[:, 2]),
              arrow_length * np.sin(particles[:, 2]),
              color='b', alpha=0.3, angles='xy', scale_units='xy', scale=1,
              label='Particles')

    if landmarks:
        lx = [lm.x for lm in landmarks]
        ly = [lm.y for lm in landmarks]
        ax.plot(lx, ly, 'k*', markersize=10, label='Landmarks')

    if true_pose is not None:
        ax.plot(true_pose[0], true_pose[1], 'go', markersize=10, label='True pose')

    if estimate is not None:
        ax.plot(estimate[0], estimate[1], 'r^', markersize=10, label='Estimate')

    ax.set_xlabel('X Position (m)', fontsize=12)
    ax.set_ylabel('Y Position (m)', fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)
    ax.axis('equal')

    return fig, ax


def plot_trajectory(estimates, ground_truth=None, landmarks=None,
                    title="Vehicle Trajectory", figsize=(10, 8),
                    save_path=None, show=True):
    """
    Plot the estimated 2D trajectory against ground truth.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated poses (N, 3)
    ground_truth : np.ndarray, optional
        True poses (N, 3)
    landmarks : list of MapLandmark, optional
        Static map
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size (width, height)
    save_path : str, optional
        Path to save figure. If None, figure is not saved.
    show : bool, optional
        Whether to display the plot

    Returns
    -------
    fig, ax
        Matplotlib figure and axes
    """
    fig, ax = plt.subplots(figsize=figsize)
    estimates = np.asarray(estimates)

    ax.plot(estimates[:, 0], estimates[:, 1], 'b-', linewidth=2, label='Estimate', alpha=0.8)
    ax.plot(estimates[0, 0], estimates[0, 1], 'go', markersize=10, label='Start')
    ax.plot(estimates[-1, 0], estimates[-1, 1], 'r^', markersize=10, label='End')

    if ground_truth is not None:
        ground_truth = np.asarray(ground_truth)
        ax.plot(ground_truth[:, 0], ground_truth[:, 1], 'k--', linewidth=1.5,
                label='Ground Truth', alpha=0.6)

    if landmarks:
        ax.plot([lm.x for lm in landmarks], [lm.y for lm in landmarks],
                'k*', markersize=8, label='Landmarks')

    ax.set_xlabel('X Position (m)', fontsize=12)
    ax.set_ylabel('Y Position (m)', fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)
    ax.axis('equal')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=300, bbox_inches='tight')

    if show:
        plt.show()

    return fig, ax
