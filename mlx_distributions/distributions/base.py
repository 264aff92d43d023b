"""Base classes for probability distributions."""

import math


class Distribution:
    """Base class for all probability distributions.

    All distributions must implement:
    - log_prob(value): Compute log probability density/mass
    - sample(key, shape): Draw samples from the distribution
    """

    def log_prob(self, value):
        """
        Compute log probability density or mass function.

        Parameters
        ----------
        value : mlx.core.array or float
            Value(s) at which to evaluate log probability

        Returns
        -------
        log_prob : mlx.core.array
            Log probability at the given value(s)
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement log_prob()"
        )

    def sample(self, key, shape=()):
        """
        Draw samples from the distribution.

        Parameters
        ----------
        key : mlx.core.array
            Random key for sampling
        shape : tuple, optional
            Shape of samples to draw

        Returns
        -------
        samples : mlx.core.array
            Samples from the distribution
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement sample()"
        )

    def __repr__(self):
        """String representation of the distribution."""
        return f"{self.__class__.__name__}()"


class DiscreteUnivariateDistribution(Distribution):
    """Interface for distributions over a contiguous range of integers.

    Subclasses provide the support bounds, pointwise evaluation, moments and
    a sampling table. Sampling and the complementary CDF are derived here.
    """

    def minimum(self):
        """Smallest value in the support."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement minimum()"
        )

    def maximum(self):
        """Largest value in the support."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement maximum()"
        )

    def support(self):
        """Return the support bounds as a (minimum, maximum) tuple."""
        return self.minimum(), self.maximum()

    def insupport(self, x):
        """True if x is an integral value within the support bounds."""
        if isinstance(x, bool):
            return False
        try:
            xf = float(x)
        except (TypeError, ValueError):
            return False
        if not xf.is_integer():
            return False
        return self.minimum() <= xf <= self.maximum()

    def pdf(self, x):
        """Probability mass at x."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement pdf()"
        )

    def log_pdf(self, x):
        """Log probability mass at x, with log(0) = -inf."""
        p = self.pdf(x)
        return math.log(p) if p > 0 else -math.inf

    def cdf(self, x):
        """P(X <= x)."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement cdf()"
        )

    def ccdf(self, x):
        """P(X > x)."""
        return 1.0 - self.cdf(x)

    def quantile(self, p):
        """Smallest x in the support with cdf(x) >= p."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement quantile()"
        )

    def sampler(self):
        """Return an object with a sample(key, shape) method."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement sampler()"
        )

    def mean(self):
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement mean()"
        )

    def variance(self):
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement variance()"
        )

    def std(self):
        """Standard deviation: sqrt(variance)."""
        return math.sqrt(self.variance())


class SufficientStats:
    """Marker base class for sufficient statistics used in model fitting."""
