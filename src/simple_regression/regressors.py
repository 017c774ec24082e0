"""Solvers that fit a line y = θ1·x + θ0 to one-dimensional data."""

import logging
import numpy as np
from typing import NamedTuple, Protocol

from .exceptions import SingularMatrixError
from .utils import invert_2x2, normal_equation_determinant, normal_equation_system

logger = logging.getLogger(__name__)


class Coefficients(NamedTuple):
    """Fitted line y = slope·x + intercept."""

    slope: float
    intercept: float


class Solver(Protocol):
    """Interface shared by the fitting algorithms."""

    def fit(self, x: np.ndarray, y: np.ndarray) -> Coefficients:
        ...


class NormalEquation():
    """
    Closed-form ordinary least squares for one feature plus intercept.

    Solves the 2x2 normal equation system:
        θ = (X^T X)^{-1} X^T y

    where each row of X is (x_i, 1).

    A single observation always gives a singular system, since one equation
    cannot determine two unknowns. In that case the fit falls back to the
    horizontal line through the observation (slope 0, intercept y_1).
    With two or more observations a singular system means every x is the
    same, and `SingularMatrixError` is raised.

    Example:
        >>> NormalEquation().fit(np.array([0.0, 1.0]), np.array([1.0, 3.0]))
        Coefficients(slope=2.0, intercept=1.0)
    """

    def fit(self, x: np.ndarray, y: np.ndarray) -> Coefficients:
        """
        Fit the line using the normal equation.

        Args:
            x: Feature values of shape (n_samples,)
            y: Target values of shape (n_samples,)

        Returns:
            coefficients: Fitted (slope, intercept)

        Raises:
            SingularMatrixError: If X^T X cannot be inverted and there is
                more than one observation
        """
        matrix, vector = normal_equation_system(x, y)
        try:
            inverse = invert_2x2(matrix, det=normal_equation_determinant(x))
        except SingularMatrixError:
            if len(x) == 1:
                logger.debug("Single observation, fitting intercept only.")
                return Coefficients(slope=0.0, intercept=float(y[0]))
            raise

        slope, intercept = inverse @ vector
        return Coefficients(slope=float(slope), intercept=float(intercept))

    def __repr__(self):
        return "NormalEquation()"


class GradientDescent():
    """
    Batch gradient descent on the mean squared error.

    Starting from θ1 = θ0 = 0, each of `iterations` steps uses every
    observation:

        g1 = mean((ŷ - y)·x)
        g0 = mean(ŷ - y)
        θ1 <- θ1 - alpha·g1
        θ0 <- θ0 - alpha·g0

    There is no convergence check. Accuracy depends on `alpha`, `iterations`
    and the scale of x; a learning rate that is too large diverges.

    Attributes:
        alpha: Learning rate
        iterations: Number of gradient steps
    """

    def __init__(self, alpha: float = 0.01, iterations: int = 5000):
        self.alpha = alpha
        self.iterations = iterations

    def fit(self, x: np.ndarray, y: np.ndarray) -> Coefficients:
        """
        Fit the line by gradient descent.

        Args:
            x: Feature values of shape (n_samples,)
            y: Target values of shape (n_samples,)

        Returns:
            coefficients: (slope, intercept) after the final iteration
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        slope, intercept = 0.0, 0.0

        with np.errstate(over="ignore", invalid="ignore"):
            for _ in range(self.iterations):
                residuals = slope * x + intercept - y
                grad_slope = np.mean(residuals * x)
                grad_intercept = np.mean(residuals)
                slope -= self.alpha * grad_slope
                intercept -= self.alpha * grad_intercept

        if not (np.isfinite(slope) and np.isfinite(intercept)):
            logger.warning(
                "Gradient descent diverged (alpha=%s, iterations=%s); "
                "try a smaller learning rate.",
                self.alpha,
                self.iterations,
            )

        return Coefficients(slope=float(slope), intercept=float(intercept))

    def __repr__(self):
        return f"GradientDescent(alpha={self.alpha}, iterations={self.iterations})"

