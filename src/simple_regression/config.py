"""Training configuration."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidConfigError


class Algorithm(StrEnum):
    """Fitting algorithms understood by `LinearRegression`."""

    NORMAL_EQUATION = "NormalEquation"
    GRADIENT_DESCENT = "GradientDescent"


class TrainingConfig(BaseModel):
    """Immutable options chosen when a model is constructed.

    `alpha` and `iterations` only affect gradient descent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: Algorithm = Algorithm.NORMAL_EQUATION
    alpha: float = Field(default=0.01, gt=0)
    iterations: int = Field(default=5000, ge=0)


def load_config(
    config: TrainingConfig | Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> TrainingConfig:
    """Build a `TrainingConfig` from an existing config or mapping plus overrides."""
    if isinstance(config, TrainingConfig):
        payload: dict[str, Any] = config.model_dump()
    elif config is None:
        payload = {}
    elif isinstance(config, Mapping):
        payload = dict(config)
    else:
        raise InvalidConfigError(
            f"config must be a TrainingConfig or a mapping, got {type(config).__name__}."
        )

    if overrides:
        payload.update(overrides)

    try:
        return TrainingConfig(**payload)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid training configuration: {exc}") from exc
