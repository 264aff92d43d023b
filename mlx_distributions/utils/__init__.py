"""Vector helpers shared by distribution implementations."""

from mlx_distributions.utils.probvec import (
    PROBVEC_RTOL,
    entropy,
    is_probability_vector,
    normalize_inplace,
)

__all__ = [
    "PROBVEC_RTOL",
    "entropy",
    "is_probability_vector",
    "normalize_inplace",
]
