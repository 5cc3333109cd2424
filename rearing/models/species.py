"""Creature species reference records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from rearing.config.simulation import FALLBACK_DIET


class BirthType(Enum):
    """How a species' offspring arrives."""

    INCUBATION = "Incubation"
    GESTATION = "Gestation"


@dataclass(frozen=True)
class CreatureSpecies:
    """Immutable growth-rate constants for one species.

    Attributes:
        name: Display name (catalog key).
        agespeed: Base maturation progress per second.
        agespeedmult: Species multiplier on ``agespeed``.
        eggspeed: Egg incubation progress per second (Incubation only).
        eggspeedmult: Species multiplier on ``eggspeed``.
        gestationspeed: Pregnancy progress per second (Gestation only).
        gestationspeedmult: Species multiplier on ``gestationspeed``.
        basefoodrate: Adult food drain in points per second.
        babyfoodrate: Newborn multiplier on ``basefoodrate``.
        extrababyfoodrate: Additional newborn multiplier.
        weight: Reference weight stat of an adult.
        birthtype: Incubation or Gestation.
        diet: Key into the diet lists (e.g. ``"Carnivore"``).
        food_multipliers: Per-food nutrition multipliers (missing = 1).
        waste_multipliers: Per-food waste multipliers (missing = 1).
    """

    name: str
    agespeed: float
    agespeedmult: float
    basefoodrate: float
    babyfoodrate: float
    extrababyfoodrate: float
    weight: float = 0.0
    birthtype: BirthType = BirthType.INCUBATION
    eggspeed: Optional[float] = None
    eggspeedmult: Optional[float] = None
    gestationspeed: Optional[float] = None
    gestationspeedmult: Optional[float] = None
    diet: str = FALLBACK_DIET
    food_multipliers: Mapping[str, float] = field(default_factory=dict)
    waste_multipliers: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, name: str, raw: Mapping[str, Any]) -> "CreatureSpecies":
        """Build a species from a catalog entry (game field names)."""
        return cls(
            name=name,
            agespeed=float(raw["agespeed"]),
            agespeedmult=float(raw["agespeedmult"]),
            basefoodrate=float(raw["basefoodrate"]),
            babyfoodrate=float(raw["babyfoodrate"]),
            extrababyfoodrate=float(raw["extrababyfoodrate"]),
            weight=float(raw.get("weight") or 0.0),
            birthtype=BirthType(raw.get("birthtype", BirthType.INCUBATION.value)),
            eggspeed=raw.get("eggspeed"),
            eggspeedmult=raw.get("eggspeedmult"),
            gestationspeed=raw.get("gestationspeed"),
            gestationspeedmult=raw.get("gestationspeedmult"),
            diet=raw.get("type") or FALLBACK_DIET,
            food_multipliers=dict(raw.get("foodmultipliers") or {}),
            waste_multipliers=dict(raw.get("wastemultipliers") or {}),
        )

    def food_multiplier(self, food_name: str) -> float:
        # A zero multiplier in the catalog means "not set".
        return self.food_multipliers.get(food_name) or 1.0

    def waste_multiplier(self, food_name: str) -> float:
        return self.waste_multipliers.get(food_name) or 1.0
