"""
Performance metrics for evaluating localization quality.

Includes RMSE, MAE and the per-timestep pose error used to score a
filter against ground truth.
"""

import numpy as np

from ..common.angles import angle_diff


def rmse(estimates, ground_truth, axis=0):
    """
    Root Mean Square Error.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated poses (N, 3), or a plain series (N,)
    ground_truth : np.ndarray
        True poses (N, 3), or a plain series (N,)
    axis : int, optional
        Axis along which to compute RMSE

    Returns
    -------
    float or np.ndarray
        RMSE value(s)

    Notes
    -----
    Only 2-D pose arrays get their heading column wrapped; a 1-D series
    is compared element by element whatever its length.
    """
    errors = _abs_errors(estimates, ground_truth)
    return np.sqrt(np.mean(errors**2, axis=axis))


def mae(estimates, ground_truth, axis=0):
    """
    Mean Absolute Error. Same input conventions as :func:`rmse`.
    """
    errors = _abs_errors(estimates, ground_truth)
    return np.mean(errors, axis=axis)


def _abs_errors(estimates, ground_truth):
    estimates = np.asarray(estimates, dtype=float)
    ground_truth = np.asarray(ground_truth, dtype=float)

    if estimates.ndim < 2:
        return np.abs(estimates - ground_truth)
    return pose_error(estimates, ground_truth)


def pose_error(estimates, ground_truth, heading_index=2):
    """
    Absolute pose error [|dx|, |dy|, |dtheta|].

    The heading error is wrapped to [0, pi], so 359 degrees against 1
    degree counts as 2 degrees.

    Parameters
    ----------
    estimates : array_like
        Estimated pose (3,) or poses (N, 3) as [x, y, theta]
    ground_truth : array_like
        True pose(s), same shape
    heading_index : int or None, optional
        Column holding the heading (default: 2). None disables wrapping.

    Returns
    -------
    np.ndarray
        Absolute errors, same shape as the inputs
    """
    estimates = np.asarray(estimates, dtype=float)
    ground_truth = np.asarray(ground_truth, dtype=float)

    errors = np.abs(estimates - ground_truth)
    if heading_index is not None and errors.ndim > 0:
        errors[..., heading_index] = np.abs(
            angle_diff(estimates[..., heading_index], ground_truth[..., heading_index])
        )

    return errors


def compute_all_metrics(estimates, ground_truth):
    """
    Compute all available metrics.

    Parameters
    ----------
    estimates : np.ndarray
        Estimated poses (N, 3)
    ground_truth : np.ndarray
        True poses (N, 3)

    Returns
    -------
    dict
        Dictionary with computed metrics
    """
    metrics = {}

    metrics['rmse'] = rmse(estimates, ground_truth, axis=0)
    metrics['mae'] = mae(estimates, ground_truth, axis=0)
    metrics['rmse_total'] = float(np.mean(metrics['rmse']))
    metrics['mae_total'] = float(np.mean(metrics['mae']))
    metrics['max_error'] = np.max(pose_error(estimates, ground_truth), axis=0)

    return metrics


def print_metrics(metrics, filter_name="Filter"):
    """
    Print metrics in a formatted way.

    Parameters
    ----------
    metrics : dict
        Dictionary of metrics from compute_all_metrics
    filter_name : str, optional
        Name of the filter for display
    """
    print(f"\n{filter_name} Performance Metrics")
    print("=" * 50)

    if 'rmse' in metrics:
        print(f"RMSE [x, y, theta]: {metrics['rmse']}")
    if 'rmse_total' in metrics:
        print(f"Total RMSE: {metrics['rmse_total']:.6f}")

    if 'mae' in metrics:
        print(f"MAE [x, y, theta]: {metrics['mae']}")
    if 'mae_total' in metrics:
        print(f"Total MAE: {metrics['mae_total']:.6f}")

    if 'max_error' in metrics:
        print(f"Max error [x, y, theta]: {metrics['max_error']}")

    print("=" * 50)
