"""Exceptions raised by MLX-Distributions."""


class DistributionError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(DistributionError, ValueError):
    """A distribution was constructed with parameters outside its domain."""


class DomainError(DistributionError, ValueError):
    """A function argument lies outside the function's domain."""


class InconsistentLengthError(DistributionError, ValueError):
    """Two arrays that must be paired element-wise have different lengths."""


class OutOfBoundsError(DistributionError, IndexError):
    """An observed label does not index into the counts vector."""


class ConsumedStatisticsError(DistributionError, RuntimeError):
    """Sufficient statistics were used after being consumed by a fit."""


def check_args(dist_name, condition, cond_str):
    """
    Raise InvalidParameterError unless condition holds.

    Parameters
    ----------
    dist_name : str
        Name of the distribution being constructed
    condition : bool
        Result of the argument check
    cond_str : str
        Human readable form of the condition, used in the message

    Raises
    ------
    InvalidParameterError
        If condition is false
    """
    if not condition:
        raise InvalidParameterError(
            f"{dist_name}: the condition {cond_str} is not satisfied."
        )
