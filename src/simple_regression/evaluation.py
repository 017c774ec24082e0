"""Goodness-of-fit metrics for fitted lines."""

import numpy as np
from typing import Callable, Dict


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Root mean square of the residuals, in the units of y.

    Args:
        y_true: Observed targets
        y_pred: Predictions for the same observations

    Returns:
        rmse: sqrt(mean((y_pred - y_true)²))
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    return float(np.sqrt(np.mean((y_pred - y_true)**2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean absolute residual."""
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    return float(np.mean(np.abs(y_pred - y_true)))


def r_squared(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination.

    R² = 1 - SS_res / SS_tot

    When y_true is constant (SS_tot = 0) the result is 1.0 for an exact fit
    and 0.0 otherwise.

    Args:
        y_true: Observed targets
        y_pred: Predictions for the same observations

    Returns:
        r2: Coefficient of determination
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    ss_res = np.sum((y_true - y_pred)**2)
    ss_tot = np.sum((y_true - np.mean(y_true))**2)

    if np.isclose(ss_tot, 0):
        return 1.0 if np.isclose(ss_res, 0) else 0.0

    return float(1 - ss_res / ss_tot)


METRICS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "r2": r_squared,
    "rmse": rmse,
    "mae": mae,
}


def get_metric(name: str) -> Callable[[np.ndarray, np.ndarray], float]:
    """
    Look up a metric by name.

    Args:
        name: One of 'r2', 'rmse' or 'mae'

    Returns:
        metric: Function of (y_true, y_pred)
    """
    if name not in METRICS:
        raise ValueError(
            f"Unknown metric {name!r}. Choose one of {sorted(METRICS)}."
        )
    return METRICS[name]
