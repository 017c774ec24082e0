"""Project-specific exceptions."""


class SimpleRegressionError(Exception):
    """Base exception for the project."""


class InvalidInputError(SimpleRegressionError, TypeError):
    """Raised when observations are not ordered sequences of numbers."""


class InvalidConfigError(SimpleRegressionError, ValueError):
    """Raised when a training configuration is malformed."""


class NotFittedError(SimpleRegressionError, ValueError):
    """Raised when a model is used before it has been trained."""


class TrainingError(SimpleRegressionError):
    """Base class for errors reported by `train` rather than raised."""


class EmptyDataError(TrainingError):
    """Raised when X or Y holds no observations."""


class LengthMismatchError(TrainingError):
    """Raised when X and Y differ in length."""


class SingularMatrixError(TrainingError):
    """Raised when the normal equation matrix cannot be inverted."""
