"""Rearing planner exception hierarchy.

Centralised base classes so callers can catch planner failures narrowly
instead of relying on ``ValueError`` or bare ``except Exception`` blocks.
"""


class RearingError(Exception):
    """Root of all rearing-planner domain exceptions."""


class InvalidConfigurationError(RearingError):
    """Species, food or server settings that cannot produce finite results.

    Raised for zero growth or hatch divisors, negative food values and
    item weights that would make carry capacity unbounded.
    """


class MissingInputError(RearingError):
    """A required record (species, food item) was not supplied."""
