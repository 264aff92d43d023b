"""Categorical distribution."""

import math
import numbers

import mlx.core as mx
import numpy as np

from mlx_distributions.distributions.base import (
    DiscreteUnivariateDistribution,
    SufficientStats,
)
from mlx_distributions.errors import (
    ConsumedStatisticsError,
    DomainError,
    InconsistentLengthError,
    InvalidParameterError,
    OutOfBoundsError,
    check_args,
)
from mlx_distributions.samplers.alias import AliasTable
from mlx_distributions.utils.probvec import (
    entropy,
    is_probability_vector,
    normalize_inplace,
)


class Categorical(DiscreteUnivariateDistribution):
    """Categorical distribution.

    A discrete distribution over the K labels 1, ..., K:

        P(X = k) = p[k - 1]    for k = 1, 2, ..., K

    Parameters
    ----------
    probs : array_like
        Probability of each category. Entries must be non-negative and sum
        to 1; otherwise InvalidParameterError is raised.

    Notes
    -----
    A float64 numpy array passed as ``probs`` is kept as the distribution's
    parameter without being copied. Callers must not modify it afterwards.
    Use ``pdf()`` to get a copy that is safe to mutate.

    Examples
    --------
    >>> from mlx_distributions import Categorical
    >>>
    >>> d = Categorical([0.2, 0.5, 0.3])
    >>> d.mean()
    2.1
    >>> d.quantile(0.5)
    2
    >>>
    >>> # Uniform over 4 categories
    >>> d = Categorical.uniform(4)
    >>>
    >>> # Maximum likelihood fit from observed labels
    >>> d = Categorical.fit_mle([1, 1, 2, 3, 3, 3])
    """

    def __init__(self, probs):
        try:
            p = np.asarray(probs, dtype=np.float64)
        except (TypeError, ValueError):
            # Ragged, complex or non-numeric input
            p = None
        check_args(
            "Categorical",
            p is not None and is_probability_vector(p),
            "is_probability_vector(probs)",
        )
        self._bind(p)

    def _bind(self, p):
        self.probs = p
        self.num_categories = p.shape[0]

    @classmethod
    def from_trusted(cls, probs):
        """Build a distribution from probs without validating or copying it.

        Only for callers that already guarantee ``probs`` is a 1-d float64
        probability vector, such as the fitting routines below.
        """
        d = cls.__new__(cls)
        d._bind(np.asarray(probs, dtype=np.float64))
        return d

    @classmethod
    def uniform(cls, k):
        """Uniform distribution over k categories, each with probability 1/k."""
        check_args("Categorical", _is_category_count(k), "k >= 1")
        return cls.from_trusted(np.full(int(k), 1.0 / k))

    def ncategories(self):
        return self.num_categories

    def params(self):
        return (self.probs,)

    def minimum(self):
        return 1

    def maximum(self):
        return self.num_categories

    def _labels(self):
        return np.arange(1, self.num_categories + 1, dtype=np.float64)

    def _central_moment(self, order):
        d = self._labels() - self.mean()
        return float(np.sum(d ** order * self.probs))

    def mean(self):
        """
        Compute the mean of the distribution.

        Returns
        -------
        mean : float
            Mean: sum(k * p[k])
        """
        return float(np.sum(self._labels() * self.probs))

    def median(self):
        """
        Smallest label whose cumulative probability reaches 0.5.

        If rounding keeps the running total below 0.5, K is returned.
        """
        cp = 0.0
        for i, pi in enumerate(self.probs, start=1):
            cp += pi
            if cp >= 0.5:
                return i
        return self.num_categories

    def variance(self):
        """
        Compute the variance of the distribution.

        Returns
        -------
        variance : float
            Variance: sum((k - mean)^2 * p[k])
        """
        return self._central_moment(2)

    def skewness(self):
        """Third standardised moment. NaN when the variance is zero."""
        v = np.float64(self.variance())
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self._central_moment(3)) / (v * np.sqrt(v)))

    def kurtosis(self):
        """Excess kurtosis: fourth standardised moment minus 3."""
        v = np.float64(self.variance())
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self._central_moment(4)) / (v * v) - 3.0)

    def entropy(self):
        """
        Compute the entropy of the distribution.

        Returns
        -------
        entropy : float
            Entropy in nats: -sum(p * log(p))
        """
        return entropy(self.probs)

    def mgf(self, t, exact=False):
        """
        Moment generating function evaluated at t.

        Parameters
        ----------
        t : float
            Argument of the MGF
        exact : bool, optional
            If False (default), every term uses exp(t), giving
            sum(p[k] * exp(t)). This keeps results identical to earlier
            releases. If True, use the textbook categorical MGF
            sum(p[k] * exp(t * k)).

        Returns
        -------
        mgf : float
        """
        if exact:
            return float(np.sum(self.probs * np.exp(t * self._labels())))
        return float(np.sum(self.probs * np.exp(t)))

    def cf(self, t, exact=False):
        """
        Characteristic function evaluated at t.

        With ``exact=False`` (default) every term uses exp(i*t); with
        ``exact=True`` the k-th term uses exp(i*t*k). See ``mgf``.

        Returns
        -------
        cf : complex
        """
        if exact:
            return complex(np.sum(self.probs * np.exp(1j * t * self._labels())))
        return complex(np.sum(self.probs * np.exp(1j * t)))

    def mode(self):
        """
        Compute the mode of the distribution.

        Returns
        -------
        mode : int
            Label with highest probability (the first one on ties)
        """
        return int(np.argmax(self.probs)) + 1

    def modes(self):
        """All labels attaining the maximum probability, in increasing order."""
        maxp = np.max(self.probs)
        return [int(i) + 1 for i in np.flatnonzero(self.probs == maxp)]

    def cdf(self, x):
        """P(X <= x). Non-integer x is rounded down."""
        if math.isnan(x):
            raise DomainError("cdf: x must not be NaN")
        k = self.num_categories
        if x < 1:
            return 0.0
        if x >= k:
            return 1.0
        n = math.floor(x)
        return float(np.cumsum(self.probs[:n])[-1])

    def pdf(self, x=None):
        """
        Probability mass at x.

        Parameters
        ----------
        x : int, optional
            Label at which to evaluate. If omitted, a copy of the whole
            probability vector is returned.

        Returns
        -------
        pdf : float or numpy.ndarray
            p[x] for x in 1..K, otherwise 0.0
        """
        if x is None:
            return self.probs.copy()
        if not self.insupport(x):
            return 0.0
        return float(self.probs[int(x) - 1])

    def log_prob(self, value):
        """Compute log probability mass.

        Parameters
        ----------
        value : array_like
            Label(s) (1 to K) at which to evaluate the log probability

        Returns
        -------
        log_prob : mlx.core.array
            Log probability mass, -inf outside the support
        """
        v = np.asarray(value, dtype=np.float64)
        valid = (v >= 1) & (v <= self.num_categories) & (np.floor(v) == v)
        idx = np.where(valid, v, 1).astype(np.int64) - 1

        with np.errstate(divide='ignore'):
            log_p = np.where(valid, np.log(self.probs[idx]), -np.inf)

        return mx.array(log_p.astype(np.float32))

    def fill_pdf_range(self, out, rng):
        """
        Write pdf(v) for each v in rng into out[0:len(rng)].

        The range may extend past either end of the support; those
        positions receive 0.0.

        Parameters
        ----------
        out : numpy.ndarray
            Output buffer with at least len(rng) entries
        rng : range
            Contiguous range of values (step 1)

        Returns
        -------
        out : numpy.ndarray
        """
        if rng.step != 1:
            raise ValueError(f"fill_pdf_range requires a unit-step range, got {rng!r}")
        n = len(rng)
        if len(out) < n:
            raise InconsistentLengthError(
                f"Output buffer has {len(out)} entries, range needs {n}."
            )

        first = rng.start
        last = rng.stop - 1
        vl = max(first, 1)
        vr = min(last, self.num_categories)

        out[:n] = 0.0
        if vl <= vr:
            out[vl - first:vr - first + 1] = self.probs[vl - 1:vr]
        return out

    def quantile(self, p):
        """
        Smallest label i with cdf(i) >= p.

        Parameters
        ----------
        p : float
            Probability in [0, 1]

        Returns
        -------
        label : int
            Never larger than K, even if rounding keeps the cumulative
            probability below p

        Raises
        ------
        DomainError
            If p is outside [0, 1]
        """
        if not 0.0 <= p <= 1.0:
            raise DomainError(f"quantile: p must lie in [0, 1], got {p}")
        k = self.num_categories
        i = 1
        v = self.probs[0]
        while v < p and i < k:
            i += 1
            v += self.probs[i - 1]
        return i

    def sampler(self):
        """Alias table over the probability vector (indices 0..K-1)."""
        return AliasTable(self.probs)

    def sample(self, key, shape=()):
        """Draw samples from the distribution.

        Parameters
        ----------
        key : array_like
            Random key for sampling
        shape : tuple, optional
            Shape of samples to draw

        Returns
        -------
        samples : mlx.core.array
            Labels in 1..K sampled from the distribution
        """
        return self.sampler().sample(key, shape) + 1

    @classmethod
    def suffstats(cls, k, x=None, w=None):
        """
        Count (optionally weighted) occurrences of each label in x.

        Also accepts the data pair form ``suffstats((k, x))`` and
        ``suffstats((k, x), w)``.

        Parameters
        ----------
        k : int or tuple (k, x)
            Number of categories, or a (k, labels) pair
        x : array_like of int
            Observed labels in 1..k (the weights when k is a pair)
        w : array_like of float, optional
            Weight of each observation

        Returns
        -------
        stats : CategoricalStats
        """
        if _is_data_tuple(k):
            if w is not None:
                raise TypeError("weights given twice for the (k, x) data form")
            (k, x), w = k, x
        elif x is None:
            raise TypeError("suffstats() requires the observed labels x")
        check_args("Categorical", _is_category_count(k), "k >= 1")
        return CategoricalStats(add_categorical_counts(np.zeros(int(k)), x, w))

    @classmethod
    def fit_mle(cls, data, w=None, k=None, verbose=False):
        """
        Maximum likelihood estimate of the category probabilities.

        Parameters
        ----------
        data : CategoricalStats, array_like of int, or tuple (k, x)
            Either sufficient statistics (which are consumed by the fit),
            observed labels, or a (k, labels) pair
        w : array_like of float, optional
            Observation weights (not allowed with CategoricalStats)
        k : int, optional
            Number of categories. Inferred as max(x) when omitted.
        verbose : bool, optional
            If True, print a summary of the fit (default: False)

        Returns
        -------
        dist : Categorical
            The fitted distribution. It owns the normalised counts vector.

        Raises
        ------
        InvalidParameterError
            If k cannot be inferred or the total weight is not positive
        OutOfBoundsError
            If a label falls outside 1..k
        InconsistentLengthError
            If x and w have different lengths
        ConsumedStatisticsError
            If the given CategoricalStats were already fitted
        """
        if isinstance(data, CategoricalStats):
            if w is not None or k is not None:
                raise TypeError("fit_mle(stats) does not accept w or k")
            total = data.total()
            # Fails before the stats are consumed if the counts are all zero
            normalize_inplace(data.counts)
            dist = cls.from_trusted(data.consume())
            num_obs = None
        else:
            if _is_data_tuple(data):
                if k is not None:
                    raise TypeError("k given both in the data tuple and as a keyword")
                k, data = data
            x = _as_labels(data)
            if k is None:
                if x.size == 0:
                    raise InvalidParameterError(
                        "Categorical: cannot infer the number of categories from an empty sample."
                    )
                k = int(np.max(x))
                check_args("Categorical", k >= 1, "maximum(x) >= 1")
            else:
                check_args("Categorical", _is_category_count(k), "k >= 1")
            counts = add_categorical_counts(np.zeros(int(k)), x, w)
            num_obs = x.size
            total = float(np.sum(counts))
            dist = cls.from_trusted(normalize_inplace(counts))

        if verbose:
            _print_fit_summary(dist, total, num_obs)

        return dist

    fit = fit_mle

    def __repr__(self):
        return f"Categorical(K={self.num_categories}, probs={self.probs.tolist()})"


class CategoricalStats(SufficientStats):
    """Per-category (weighted) counts: the sufficient statistics of a Categorical.

    Fitting consumes the statistics: the counts array is normalised in place
    and becomes the fitted distribution's probability vector, after which
    ``counts`` is None and a second fit raises ConsumedStatisticsError.

    Parameters
    ----------
    counts : array_like
        Non-negative count for each of the K categories
    """

    def __init__(self, counts):
        self.counts = np.asarray(counts, dtype=np.float64)
        self.num_categories = self.counts.shape[0]

    @property
    def consumed(self):
        return self.counts is None

    def total(self):
        """Total (weighted) number of observations."""
        if self.consumed:
            raise ConsumedStatisticsError("CategoricalStats were already consumed by a fit")
        return float(np.sum(self.counts))

    def consume(self):
        """Hand over the counts array and invalidate these statistics."""
        if self.consumed:
            raise ConsumedStatisticsError("CategoricalStats were already consumed by a fit")
        counts, self.counts = self.counts, None
        return counts

    def __repr__(self):
        if self.consumed:
            return f"CategoricalStats(K={self.num_categories}, consumed)"
        return f"CategoricalStats(counts={self.counts.tolist()})"


def add_categorical_counts(counts, x, w=None):
    """
    Add observed labels to a counts vector.

    counts[k - 1] is incremented by 1 (or by the matching weight) for every
    occurrence of label k in x. All labels are checked before any count is
    modified.

    Parameters
    ----------
    counts : numpy.ndarray
        Float64 counts vector, updated in place. A list or tuple is
        converted to a new float64 array, which is what gets updated and
        returned.
    x : array_like of int
        Observed labels, each in 1..len(counts)
    w : array_like of float, optional
        Weight of each observation

    Returns
    -------
    counts : numpy.ndarray

    Raises
    ------
    InvalidParameterError
        If counts is an ndarray whose dtype is not float64
    InconsistentLengthError
        If x and w have different lengths
    OutOfBoundsError
        If a label falls outside 1..len(counts)
    """
    if isinstance(counts, np.ndarray):
        if counts.dtype != np.float64:
            raise InvalidParameterError(
                f"Categorical: counts must be a float64 array to be updated in place, got dtype {counts.dtype}."
            )
    else:
        counts = np.asarray(counts, dtype=np.float64)
    x = _as_labels(x)

    if w is not None:
        w = np.asarray(w, dtype=np.float64).ravel()
        if w.shape[0] != x.shape[0]:
            raise InconsistentLengthError(
                f"Inconsistent array lengths: {x.shape[0]} labels, {w.shape[0]} weights."
            )

    k = counts.shape[0]
    bad = (x < 1) | (x > k)
    if np.any(bad):
        raise OutOfBoundsError(
            f"Label {int(x[bad][0])} is outside the valid range [1, {k}]."
        )

    np.add.at(counts, x - 1, 1.0 if w is None else w)
    return counts


def _as_labels(x):
    x = np.asarray(x)
    if x.size == 0:
        return x.ravel().astype(np.int64)
    if not np.issubdtype(x.dtype, np.integer):
        raise InvalidParameterError(
            f"Categorical: sample labels must be integers, got dtype {x.dtype}."
        )
    return x.ravel()


def _is_category_count(k):
    return isinstance(k, numbers.Integral) and not isinstance(k, bool) and k >= 1


def _is_data_tuple(data):
    return (
        isinstance(data, tuple)
        and len(data) == 2
        and np.ndim(data[0]) == 0
        and np.ndim(data[1]) >= 1
    )


def _print_fit_summary(dist, total, num_obs):
    print(f"\n{'='*70}")
    print("MLX-Distributions: Categorical maximum likelihood fit")
    print(f"{'='*70}")
    print(f"  Categories:    {dist.num_categories}")
    if num_obs is not None:
        print(f"  Observations:  {num_obs}")
    print(f"  Total weight:  {total:.6g}")
    print(f"  Probabilities: {np.round(dist.probs, 4).tolist()}")
    print(f"{'='*70}\n")
