"""Shared helpers for the trait engine."""

from heritage.util.rng import MissingRNGError, invocation_rng, require_rng_param

__all__ = ["MissingRNGError", "invocation_rng", "require_rng_param"]
