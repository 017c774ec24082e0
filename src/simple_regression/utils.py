"""Linear algebra helpers for one-feature least squares."""

import numpy as np
from typing import Optional, Tuple

from .exceptions import SingularMatrixError

SINGULAR_MATRIX_MESSAGE = "could not inverse the matrix in normal equation"


def add_intercept(x: np.ndarray) -> np.ndarray:
    """
    Build the design matrix for a single feature plus intercept.

    Args:
        x: Feature values of shape (n_samples,)

    Returns:
        X: Array of shape (n_samples, 2) whose rows are (x_i, 1)
    """
    x = np.asarray(x, dtype=float)
    return np.column_stack([x, np.ones(len(x))])


def normal_equation_system(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the normal equation system (X^T X) θ = X^T y.

    With S_x = Σx, S_xx = Σx², S_y = Σy and S_xy = Σxy this is

        matrix = [[S_xx, S_x], [S_x, n]]
        vector = [S_xy, S_y]

    Args:
        x: Feature values of shape (n_samples,)
        y: Target values of shape (n_samples,)

    Returns:
        matrix: Array of shape (2, 2)
        vector: Array of shape (2,)
    """
    X = add_intercept(x)
    y = np.asarray(y, dtype=float)
    return X.T @ X, X.T @ y


def determinant_2x2(matrix: np.ndarray) -> float:
    """Return a·d − b·c for a 2x2 matrix [[a, b], [c, d]]."""
    (a, b), (c, d) = matrix
    return a * d - b * c


def normal_equation_determinant(x: np.ndarray) -> float:
    """
    Determinant of the normal equation matrix, S_xx·n − S_x².

    Computed as n·Σ(x − x̄)², which equals the raw formula but does not
    lose precision when x has a large offset (years, timestamps). Exactly
    zero when every x is identical, including a single observation.

    Args:
        x: Feature values of shape (n_samples,)

    Returns:
        det: Determinant of X^T X
    """
    x = np.asarray(x, dtype=float)
    if np.ptp(x) == 0:
        return 0.0
    return float(len(x) * np.sum((x - np.mean(x))**2))


def invert_2x2(matrix, det: Optional[float] = None) -> np.ndarray:
    """
    Invert a 2x2 matrix analytically (adjugate divided by determinant).

    Args:
        matrix: Array-like of shape (2, 2)
        det: Determinant of `matrix` if already known, e.g. from
            `normal_equation_determinant`. Default: a·d − b·c.

    Returns:
        inverse: Array of shape (2, 2)

    Raises:
        SingularMatrixError: If the determinant is zero or not finite
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (2, 2):
        raise ValueError(f"Expected a 2x2 matrix, got shape {matrix.shape}.")

    if det is None:
        det = determinant_2x2(matrix)
    if not np.isfinite(det) or det == 0:
        raise SingularMatrixError(SINGULAR_MATRIX_MESSAGE)

    (a, b), (c, d) = matrix
    adjugate = np.array([[d, -b], [-c, a]])
    return adjugate / det
