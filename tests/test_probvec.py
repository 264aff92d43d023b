"""Tests for probability vector helpers and error types."""

import pytest
import numpy as np
from mlx_distributions import errors
from mlx_distributions.utils import (
    PROBVEC_RTOL,
    entropy,
    is_probability_vector,
    normalize_inplace,
)


class TestIsProbabilityVector:
    """Tests for is_probability_vector."""

    def test_valid(self):
        """Test ordinary probability vectors."""
        assert is_probability_vector([0.2, 0.8])
        assert is_probability_vector(np.array([1.0]))
        assert is_probability_vector([0.0, 1.0, 0.0])

    def test_rounding_tolerated(self):
        """Test sums off by rounding error are accepted."""
        assert is_probability_vector([0.1] * 10)
        assert is_probability_vector([1.0 + PROBVEC_RTOL / 2, 0.0])

    @pytest.mark.parametrize("p", [
        [0.5, 0.6],
        [-0.1, 1.1],
        [],
        [[0.5, 0.5]],
        [np.inf, 0.0],
        ["a", "b"],
        [0.5 + 0.5j, 0.5],
    ])
    def test_invalid(self, p):
        """Test vectors that are not probability vectors."""
        assert not is_probability_vector(p)

    def test_custom_tolerance(self):
        """Test a looser absolute tolerance."""
        assert not is_probability_vector([0.5, 0.49])
        assert is_probability_vector([0.5, 0.49], atol=0.05)


class TestNormalizeInplace:
    """Tests for normalize_inplace."""

    def test_normalize(self):
        """Test entries are divided by their sum in place."""
        x = np.array([1.0, 3.0])
        result = normalize_inplace(x)
        assert result is x
        assert np.allclose(x, [0.25, 0.75])

    def test_zero_sum(self):
        """Test a vector with zero sum cannot be normalised."""
        x = np.zeros(3)
        with pytest.raises(errors.InvalidParameterError):
            normalize_inplace(x)
        assert np.array_equal(x, np.zeros(3))


class TestEntropy:
    """Tests for entropy."""

    def test_values(self):
        """Test entropy in nats."""
        assert np.isclose(entropy([0.5, 0.5]), np.log(2))
        assert entropy([1.0, 0.0]) == 0.0


class TestErrors:
    """Tests for the error hierarchy."""

    def test_hierarchy(self):
        """Test errors subclass both the package base and a builtin."""
        assert issubclass(errors.InvalidParameterError, ValueError)
        assert issubclass(errors.DomainError, ValueError)
        assert issubclass(errors.InconsistentLengthError, ValueError)
        assert issubclass(errors.OutOfBoundsError, IndexError)
        assert issubclass(errors.ConsumedStatisticsError, RuntimeError)
        for exc in (
            errors.InvalidParameterError,
            errors.DomainError,
            errors.InconsistentLengthError,
            errors.OutOfBoundsError,
            errors.ConsumedStatisticsError,
        ):
            assert issubclass(exc, errors.DistributionError)

    def test_check_args(self):
        """Test the argument check message."""
        errors.check_args("Foo", True, "x > 0")
        with pytest.raises(errors.InvalidParameterError, match="Foo: the condition x > 0"):
            errors.check_args("Foo", False, "x > 0")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
