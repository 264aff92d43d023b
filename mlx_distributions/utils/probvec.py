"""Probability vector checks and normalisation."""

import numpy as np
from scipy.special import entr

from mlx_distributions.errors import InvalidParameterError

# Default relative tolerance for "sums to one": sqrt of float64 machine epsilon
PROBVEC_RTOL = float(np.sqrt(np.finfo(np.float64).eps))


def is_probability_vector(p, rtol=PROBVEC_RTOL, atol=0.0):
    """
    Check whether p is a probability vector.

    A probability vector is a non-empty 1-d array of non-negative reals
    whose sum is approximately one.

    Parameters
    ----------
    p : array_like
        Candidate vector
    rtol : float, optional
        Relative tolerance on the sum (default: sqrt(eps))
    atol : float, optional
        Absolute tolerance on the sum (default: 0.0)

    Returns
    -------
    ok : bool
    """
    p = np.asarray(p)
    if p.ndim != 1 or p.size == 0:
        return False
    if not np.issubdtype(p.dtype, np.number) or np.iscomplexobj(p):
        return False
    if not np.all(np.isfinite(p)) or np.any(p < 0):
        return False
    return bool(np.isclose(np.sum(p), 1.0, rtol=rtol, atol=atol))


def normalize_inplace(x):
    """
    Divide every entry of x by the sum of x, in place.

    Parameters
    ----------
    x : numpy.ndarray
        Float array to normalise; modified in place

    Returns
    -------
    x : numpy.ndarray
        The same array, now summing to one

    Raises
    ------
    InvalidParameterError
        If the sum of x is not positive
    """
    s = np.sum(x)
    if not s > 0:
        raise InvalidParameterError(
            f"Cannot normalize a vector whose sum is {s}; the sum must be positive."
        )
    x /= s
    return x


def entropy(p):
    """Shannon entropy -sum(p * log(p)) in nats, with 0 * log(0) = 0."""
    return float(np.sum(entr(np.asarray(p, dtype=np.float64))))
