"""RNG utilities for reproducible trait draws.

Every birth gets its own random source. Nothing in the engine touches the
module-level ``random`` functions, so tests can script the exact draw
sequence and concurrent births never share generator state.
"""

import random
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from heritage.protocols import RandomSource


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not passed in.

    Low-level helpers never invent their own generator; the engine creates
    one per invocation and hands it down.
    """

    pass


def require_rng_param(rng: Optional["RandomSource"], context: str) -> "RandomSource":
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The random source that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated random source

    Raises:
        MissingRNGError: If rng is None

    Example:
        def apply(self, conditions, lineage, inbreeding, rng=None):
            rng = require_rng_param(rng, "TraitRuleEngine.apply")
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the invocation RNG explicitly."
        )
    return rng


def invocation_rng(
    rng: Optional["RandomSource"] = None, seed: Optional[int] = None
) -> "RandomSource":
    """Return the caller's RNG, or a new generator scoped to one invocation.

    Args:
        rng: Caller-supplied source (used as-is when given)
        seed: Seed for the new generator; None gives an unseeded one

    Returns:
        A random source owned by this invocation only
    """
    if rng is not None:
        return rng
    return random.Random(seed)
