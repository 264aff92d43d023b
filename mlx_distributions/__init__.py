"""
MLX-Distributions: Discrete Probability Distributions for Apple Silicon

Distribution objects with closed-form moments, pmf/cdf/quantile evaluation,
maximum likelihood fitting and alias-table sampling driven by MLX random keys.

Example:
    >>> import mlx.core as mx
    >>> from mlx_distributions import Categorical
    >>>
    >>> d = Categorical.fit_mle([1, 1, 2, 3, 3, 3])
    >>> d.probs
    array([0.33333333, 0.16666667, 0.5       ])
    >>> samples = d.sample(mx.random.key(0), shape=(1000,))
"""

__version__ = "0.1.0-alpha"
__license__ = "MIT"

from mlx_distributions.distributions.categorical import (
    Categorical,
    CategoricalStats,
    add_categorical_counts,
)
from mlx_distributions.errors import (
    ConsumedStatisticsError,
    DistributionError,
    DomainError,
    InconsistentLengthError,
    InvalidParameterError,
    OutOfBoundsError,
)
from mlx_distributions.samplers.alias import AliasTable

__all__ = [
    "Categorical",
    "CategoricalStats",
    "add_categorical_counts",
    "AliasTable",
    "DistributionError",
    "InvalidParameterError",
    "DomainError",
    "InconsistentLengthError",
    "OutOfBoundsError",
    "ConsumedStatisticsError",
]
