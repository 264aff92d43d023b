"""Walker/Vose alias table for O(1) draws from a finite distribution."""

import mlx.core as mx
import numpy as np


class AliasTable:
    """Alias-method sampler over the indices 0, ..., K-1.

    Construction is O(K) (Vose's variant of Walker's method). Each draw costs
    one uniform column pick and one uniform coin flip, independent of K.

    Parameters
    ----------
    probs : array_like
        Non-negative weights for each index. They are rescaled by their sum,
        so they only need to be proportional to the target probabilities.

    Attributes
    ----------
    accept : numpy.ndarray
        Probability of keeping column i when it is picked
    alias : numpy.ndarray
        Index returned instead of i when column i is rejected

    Examples
    --------
    >>> table = AliasTable([0.2, 0.5, 0.3])
    >>> idx = table.sample(mx.random.key(0), shape=(1000,))
    """

    def __init__(self, probs):
        p = np.asarray(probs, dtype=np.float64)
        if p.ndim != 1 or p.size == 0:
            raise ValueError("AliasTable requires a non-empty 1-d weight vector")

        k = p.shape[0]
        scaled = p * (k / np.sum(p))
        accept = np.ones(k, dtype=np.float64)
        alias = np.arange(k, dtype=np.int64)

        small = [i for i in range(k) if scaled[i] < 1.0]
        large = [i for i in range(k) if scaled[i] >= 1.0]

        while small and large:
            s = small.pop()
            l = large.pop()
            accept[s] = scaled[s]
            alias[s] = l
            # Column l donates the mass that column s is missing
            scaled[l] = (scaled[l] + scaled[s]) - 1.0
            if scaled[l] < 1.0:
                small.append(l)
            else:
                large.append(l)

        # Whatever is left is full up to rounding error
        for i in small + large:
            accept[i] = 1.0
            alias[i] = i

        self.num_outcomes = k
        self.accept = accept
        self.alias = alias

    def sample(self, key, shape=()):
        """
        Draw indices from the table.

        Parameters
        ----------
        key : mlx.core.array
            Random key for sampling
        shape : tuple, optional
            Shape of samples to draw

        Returns
        -------
        samples : mlx.core.array
            Integer indices in [0, K)
        """
        col_key, coin_key = mx.random.split(key)
        col = mx.random.randint(0, self.num_outcomes, shape=shape, key=col_key)
        u = mx.random.uniform(shape=shape, key=coin_key)

        accept = mx.array(self.accept.astype(np.float32))
        alias = mx.array(self.alias.astype(np.int32))

        return mx.where(u < mx.take(accept, col), col, mx.take(alias, col))

    def __len__(self):
        return self.num_outcomes

    def __repr__(self):
        return f"AliasTable(num_outcomes={self.num_outcomes})"
