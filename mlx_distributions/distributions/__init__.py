"""Probability distribution implementations for MLX-Distributions."""

from mlx_distributions.distributions.base import (
    Distribution,
    DiscreteUnivariateDistribution,
    SufficientStats,
)
from mlx_distributions.distributions.categorical import (
    Categorical,
    CategoricalStats,
    add_categorical_counts,
)

__all__ = [
    "Distribution",
    "DiscreteUnivariateDistribution",
    "SufficientStats",
    "Categorical",
    "CategoricalStats",
    "add_categorical_counts",
]
