"""Creature instances: a species at some point of its growth."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from rearing.models.species import CreatureSpecies


def clamp_maturation(progress: float) -> float:
    """Clamp a maturation fraction to ``[0, 1]``; NaN counts as newborn."""
    if progress is None or math.isnan(progress):
        return 0.0
    return min(1.0, max(0.0, float(progress)))


@dataclass(frozen=True)
class CreatureInstance:
    """One (or ``quantity`` identical) growing creatures.

    Attributes:
        species: Reference record for the creature's species.
        maturation_progress: Fraction of growth elapsed, clamped to [0, 1].
        quantity: Number of identical instances (batched trough scenarios).
        max_food_capacity: Creature-specific stomach cap, enables the
            growth-fill bonus in the trough simulation.
        name: Optional label supplied by the caller.
    """

    species: CreatureSpecies
    maturation_progress: float = 0.0
    quantity: int = 1
    max_food_capacity: Optional[float] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "maturation_progress", clamp_maturation(self.maturation_progress))
        object.__setattr__(self, "quantity", max(0, int(self.quantity)))
