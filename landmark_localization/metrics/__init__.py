"""
Performance metrics for localization evaluation.
"""

from .performance import rmse, mae, pose_error, compute_all_metrics, print_metrics

__all__ = [
    'rmse',
    'mae',
    'pose_error',
    'compute_all_metrics',
    'print_metrics',
]
