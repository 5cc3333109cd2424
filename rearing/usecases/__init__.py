"""Application-level entry points that combine the calculators."""

from rearing.usecases.breeding_stats import (
    BreedingStats,
    calculate_breeding_stats,
    calculate_breeding_stats_strict,
    validate_breeding_inputs,
)

__all__ = [
    "BreedingStats",
    "calculate_breeding_stats",
    "calculate_breeding_stats_strict",
    "validate_breeding_inputs",
]
