"""Least squares line fitting for one-dimensional data."""

from .config import Algorithm, TrainingConfig
from .exceptions import (
    EmptyDataError,
    InvalidConfigError,
    InvalidInputError,
    LengthMismatchError,
    NotFittedError,
    SimpleRegressionError,
    SingularMatrixError,
    TrainingError,
)
from .models import LinearRegression, RegressionModel
from .regressors import Coefficients, GradientDescent, NormalEquation

__all__ = [
    "Algorithm",
    "TrainingConfig",
    "LinearRegression",
    "RegressionModel",
    "Coefficients",
    "NormalEquation",
    "GradientDescent",
    "SimpleRegressionError",
    "InvalidInputError",
    "InvalidConfigError",
    "NotFittedError",
    "TrainingError",
    "EmptyDataError",
    "LengthMismatchError",
    "SingularMatrixError",
]
