import numpy as np
import pytest

from landmark_localization.common import normalize_angle, angle_diff, circular_mean
from landmark_localization.metrics import rmse, mae, pose_error, compute_all_metrics, print_metrics


def test_pose_error_wraps_heading():
    err = pose_error([1.0, 2.0, np.radians(359)], [0.0, 4.0, np.radians(1)])
    np.testing.assert_allclose(err, [1.0, 2.0, np.radians(2)])


def test_rmse_and_mae():
    estimates = np.array([[1.0, 0.0, 0.0], [3.0, 0.0, 0.0]])
    truth = np.zeros((2, 3))

    np.testing.assert_allclose(rmse(estimates, truth), [np.sqrt(5.0), 0.0, 0.0])
    np.testing.assert_allclose(mae(estimates, truth), [2.0, 0.0, 0.0])


def test_compute_all_metrics(capsys):
    estimates = np.array([[1.0, 1.0, 0.1], [0.0, 2.0, -0.1]])
    truth = np.zeros((2, 3))

    metrics = compute_all_metrics(estimates, truth)
    print_metrics(metrics, filter_name="PF")

    assert metrics['rmse_total'] == pytest.approx(np.mean(metrics['rmse']))
    np.testing.assert_allclose(metrics['max_error'], [1.0, 2.0, 0.1])
    assert "PF Performance Metrics" in capsys.readouterr().out


def test_angle_helpers():
    assert normalize_angle(3 * np.pi / 2) == pytest.approx(-np.pi / 2)
    assert angle_diff(0.1, -0.1) == pytest.approx(0.2)
    assert circular_mean([0.0, np.pi / 2], [1.0, 1.0]) == pytest.approx(np.pi / 4)


def test_length_three_series_is_not_treated_as_pose():
    series = np.array([0.0, 0.0, 10.0])

    assert rmse(series, np.zeros(3)) == pytest.approx(np.sqrt(100.0 / 3.0))
    assert mae(series, np.zeros(3)) == pytest.approx(10.0 / 3.0)


def test_pose_error_without_heading_wrap():
    err = pose_error([0.0, 0.0, 2 * np.pi], [0.0, 0.0, 0.0], heading_index=None)
    np.testing.assert_allclose(err, [0.0, 0.0, 2 * np.pi])


def test_circular_mean_follows_weights():
    assert circular_mean([0.0, np.pi / 2], [3.0, 0.0]) == pytest.approx(0.0)
    assert abs(circular_mean([np.pi - 0.05, -np.pi + 0.05])) == pytest.approx(np.pi)
