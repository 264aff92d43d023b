"""Sampling tables for discrete distributions."""

from mlx_distributions.samplers.alias import AliasTable

__all__ = ["AliasTable"]
