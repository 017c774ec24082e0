"""Linear regression on a single feature."""

import logging
import numpy as np
import pandas.api.types as ptypes
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .base import RegressionModel
from ..config import Algorithm, TrainingConfig, load_config
from ..evaluation import get_metric
from ..exceptions import (
    EmptyDataError,
    InvalidInputError,
    LengthMismatchError,
    NotFittedError,
    TrainingError,
)
from ..regressors import Coefficients, GradientDescent, NormalEquation, Solver

logger = logging.getLogger(__name__)


def as_observations(values: Any, name: str) -> np.ndarray:
    """
    Convert an ordered sequence of numbers to a float array.

    Only the container and element types are checked. Empty sequences are
    accepted here and rejected later by `LinearRegression.train`.

    Args:
        values: List, tuple, `numpy.ndarray` or `pandas.Series`. None gives
            an empty array.
        name: Name used in error messages (e.g. 'X')

    Returns:
        observations: Array of shape (n_samples,)

    Raises:
        InvalidInputError: If `values` is not a one-dimensional ordered
            sequence of real numbers
    """
    if values is None:
        return np.empty(0)

    if (
        isinstance(values, (str, bytes, set, frozenset, Mapping))
        or not ptypes.is_list_like(values)
    ):
        raise InvalidInputError(
            f"{name} must be an ordered sequence of numbers, got {type(values).__name__}."
        )

    if not hasattr(values, "__len__"):
        values = list(values)

    try:
        array = np.asarray(values)
    except ValueError as exc:
        raise InvalidInputError(f"{name} must be a flat sequence of numbers.") from exc

    if array.ndim != 1:
        raise InvalidInputError(
            f"{name} must be one-dimensional, got {array.ndim} dimensions."
        )

    if len(array) == 0:
        return np.empty(0)

    if (
        not ptypes.is_numeric_dtype(array)
        or ptypes.is_bool_dtype(array)
        or ptypes.is_complex_dtype(array)
    ):
        raise InvalidInputError(
            f"{name} must contain only real numbers, got dtype {array.dtype}."
        )

    return array.astype(float)


class LinearRegression(RegressionModel):
    """
    Least squares fit of y = slope·x + intercept to one-dimensional data.

    The observations and configuration are fixed at construction. Nothing is
    fitted until `train` is called.

    Attributes:
        x: Feature values of shape (n_samples,)
        y: Target values of shape (n_samples,)
        config: `TrainingConfig` in use
        coefficients: Fitted `Coefficients`, or None while untrained

    Example:
        >>> model = LinearRegression([1, 2, 3, 4, 5], [2, 2, 3, 3, 5])
        >>> model.train()
        >>> round(model.predict(10), 2)
        7.9
    """

    def __init__(
        self,
        x=None,
        y=None,
        config: TrainingConfig | Mapping[str, Any] | None = None,
        **options,
    ):
        """
        Create a `LinearRegression` instance.

        Args:
            x: Ordered sequence of feature values. Default: empty.
            y: Ordered sequence of target values. Default: empty.
            config: `TrainingConfig` or mapping with keys `algorithm`
                ('NormalEquation' or 'GradientDescent'), `alpha` and
                `iterations`. Default: all defaults (normal equation).
            **options: Individual configuration keys overriding `config`.

        Raises:
            InvalidInputError: If `x` or `y` is not an ordered sequence of numbers
            InvalidConfigError: If the configuration is invalid
        """
        self.x = as_observations(x, "X")
        self.y = as_observations(y, "Y")
        self.config = load_config(config, overrides=options)
        self.coefficients: Optional[Coefficients] = None

    @property
    def algorithm(self) -> Algorithm:
        return self.config.algorithm

    @property
    def is_fitted(self) -> bool:
        return self.coefficients is not None

    def _validate(self):
        if len(self.x) == 0:
            raise EmptyDataError("X is empty")
        if len(self.y) == 0:
            raise EmptyDataError("Y is empty")
        if len(self.x) != len(self.y):
            raise LengthMismatchError("X and Y must be of the same length")

    def _fit_with(self, solver: Solver) -> Coefficients:
        logger.debug("Fitting %d observations with %r", len(self.x), solver)
        return solver.fit(self.x, self.y)

    def train_with_normal_equation(self) -> Coefficients:
        """Fit the stored observations with the closed-form normal equation."""
        return self._fit_with(NormalEquation())

    def train_with_gradient_descent(self) -> Coefficients:
        """Fit the stored observations with batch gradient descent."""
        return self._fit_with(
            GradientDescent(alpha=self.config.alpha, iterations=self.config.iterations)
        )

    def train(
        self, callback: Optional[Callable[[Optional[TrainingError]], None]] = None
    ) -> Optional[TrainingError]:
        """
        Fit the line to the stored observations.

        Checks, in order, that X is non-empty, that Y is non-empty and that
        both have the same length, then runs the configured algorithm.
        On success the coefficients are replaced; on failure they are
        cleared and the model is untrained.

        Args:
            callback: Called once with the `TrainingError`, or None on
                success, after training has finished. Default: None.

        Returns:
            error: The `TrainingError`, or None on success
        """
        error = None
        try:
            self._validate()
            if self.algorithm == Algorithm.GRADIENT_DESCENT:
                coefficients = self.train_with_gradient_descent()
            else:
                coefficients = self.train_with_normal_equation()
        except TrainingError as exc:
            logger.warning("Training failed: %s", exc)
            self.coefficients = None
            error = exc
        else:
            logger.debug(
                "Fitted slope=%s, intercept=%s", coefficients.slope, coefficients.intercept
            )
            self.coefficients = coefficients

        if callback is not None:
            callback(error)

        return error

    def predict(self, x: float | np.ndarray) -> float | np.ndarray:
        """
        Predict targets for new feature values.

        Args:
            x: A single feature value or an array-like of shape (n_samples,)

        Returns:
            predictions: A float for scalar input, otherwise an array of
                shape (n_samples,)

        Raises:
            NotFittedError: If the model has not been trained
        """
        slope, intercept = self.get_params()
        if np.ndim(x) == 0:
            return float(slope * x + intercept)
        return slope * np.asarray(x, dtype=float) + intercept

    def get_params(self) -> Coefficients:
        """
        Get the fitted parameters.

        Returns:
            coefficients: Fitted (slope, intercept)
        """
        if self.coefficients is None:
            raise NotFittedError("Model must be trained before use. Call train() first.")
        return self.coefficients

    def score(self, x, y, metric: str = "r2") -> float:
        """
        Evaluate the fitted line on (x, y).

        Args:
            x: Feature values
            y: Target values of the same length
            metric: 'r2' (coefficient of determination), 'rmse' or 'mae'.
                Default: 'r2'.

        Returns:
            score: Value of the chosen metric
        """
        score_fn = get_metric(metric)
        y_true = as_observations(y, "Y")
        y_pred = self.predict(as_observations(x, "X"))
        if len(y_true) != len(y_pred):
            raise ValueError("X and Y must be of the same length")
        return score_fn(y_true, y_pred)

    def __repr__(self):
        return (
            f"LinearRegression(algorithm={self.algorithm.value!r}, "
            f"alpha={self.config.alpha}, iterations={self.config.iterations})"
        )
