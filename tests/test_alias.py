"""Tests for the alias-table sampler."""

import pytest
import mlx.core as mx
import numpy as np
from mlx_distributions.samplers import AliasTable


def implied_probs(table):
    """Probability of each index encoded by the accept/alias columns."""
    k = len(table)
    p = table.accept.copy()
    for i in range(k):
        p[table.alias[i]] += 1.0 - table.accept[i]
    return p / k


class TestAliasTable:
    """Tests for AliasTable construction and draws."""

    @pytest.mark.parametrize("probs", [
        [0.2, 0.5, 0.3],
        [0.5, 0.0, 0.5],
        [1.0],
        [0.01, 0.01, 0.01, 0.97],
        [0.1] * 10,
    ])
    def test_table_encodes_probs(self, probs):
        """Test the table reproduces the input probabilities exactly."""
        table = AliasTable(probs)
        assert np.allclose(implied_probs(table), probs)

    def test_uniform_table(self):
        """Test a uniform vector never needs an alias."""
        table = AliasTable([0.25] * 4)
        assert np.allclose(table.accept, 1.0)
        assert np.array_equal(table.alias, np.arange(4))

    def test_unnormalised_weights(self):
        """Test weights are rescaled by their sum."""
        table = AliasTable([1.0, 3.0])
        assert np.allclose(implied_probs(table), [0.25, 0.75])

    def test_invalid(self):
        """Test empty or multi-dimensional weights are rejected."""
        with pytest.raises(ValueError):
            AliasTable([])
        with pytest.raises(ValueError):
            AliasTable([[0.5, 0.5]])

    def test_sample_shape_and_range(self):
        """Test draws are indices in [0, K)."""
        table = AliasTable([0.2, 0.5, 0.3])
        samples = table.sample(mx.random.key(0), shape=(500,))
        assert samples.shape == (500,)
        assert mx.all(samples >= 0)
        assert mx.all(samples < 3)

    def test_sample_statistics(self):
        """Test draw frequencies match the weights."""
        table = AliasTable([0.7, 0.1, 0.2])
        samples = table.sample(mx.random.key(11), shape=(20000,))
        freqs = [float(mx.sum(samples == i)) / 20000 for i in range(3)]
        assert np.allclose(freqs, [0.7, 0.1, 0.2], atol=0.02)

    def test_same_key_same_draws(self):
        """Test draws are reproducible from the key."""
        table = AliasTable([0.2, 0.5, 0.3])
        a = table.sample(mx.random.key(5), shape=(100,))
        b = table.sample(mx.random.key(5), shape=(100,))
        assert mx.array_equal(a, b)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
