"""Base interface for regression models."""

from abc import ABC, abstractmethod
import numpy as np
from typing import Callable, Optional

from ..exceptions import TrainingError


class RegressionModel(ABC):
    """
    Base class for regression models.
    """

    @abstractmethod
    def train(
        self, callback: Optional[Callable[[Optional[TrainingError]], None]] = None
    ) -> Optional[TrainingError]:
        """
        Fit model parameters to the stored observations.

        Training failures are not raised. They are passed to `callback`
        (invoked exactly once, after training has finished) and returned.

        Args:
            callback: Called with the training error, or None on success.
                Default: None.

        Returns:
            error: The training error, or None on success
        """
        pass

    @abstractmethod
    def predict(self, x: float | np.ndarray) -> float | np.ndarray:
        """
        Predict targets for new feature values.

        Args:
            x: A single feature value or an array of shape (n_samples,)

        Returns:
            predictions: A float for scalar input, otherwise an array of
                shape (n_samples,)

        Raises:
            NotFittedError: If the model has not been trained
        """
        pass
