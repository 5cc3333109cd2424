"""Growth model: maturation and birth timings and the food-rate curve.

A baby's food drain starts at ``basefoodrate × babyfoodrate ×
extrababyfoodrate`` and falls linearly to the adult ``basefoodrate`` over
the maturation time. Server speed settings scale both axes.

All timings are in seconds and all rates in food points per second.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import (
    GEN2_GROWTH_DIVISOR,
    GEN2_HATCH_DIVISOR,
    INCUBATION_SCALE,
    JUVENILE_FRACTION,
)
from rearing.exceptions import InvalidConfigurationError
from rearing.models.species import BirthType, CreatureSpecies


def _timing(what: str, numerator: float, divisors: Sequence[Tuple[str, Optional[float]]]) -> float:
    """Divide ``numerator`` by every divisor, refusing non-finite results."""
    product = 1.0
    for label, value in divisors:
        if not value:
            raise InvalidConfigurationError(f"{what}: {label} must be non-zero (got {value!r})")
        product *= value
    result = numerator / product
    if not (math.isfinite(result) and result > 0):
        raise InvalidConfigurationError(f"{what} is not a finite positive time ({result!r})")
    return result


def calculate_maturation_time(species: CreatureSpecies, settings: SettingsLike = None) -> float:
    """Seconds from birth to adulthood.

    Raises:
        InvalidConfigurationError: If a growth divisor is zero.
    """
    settings = resolve_settings(settings)
    base_time = _timing(
        f"{species.name} maturation time",
        1.0,
        (
            ("agespeed", species.agespeed),
            ("agespeedmult", species.agespeedmult),
            ("maturationSpeed", settings.maturation_speed),
        ),
    )
    return base_time / GEN2_GROWTH_DIVISOR if settings.gen2_growth_effect else base_time


def calculate_baby_time(species: CreatureSpecies, settings: SettingsLike = None) -> float:
    """Seconds until the Juvenile threshold (10% maturation)."""
    return calculate_maturation_time(species, settings) * JUVENILE_FRACTION


def calculate_birth_time(species: CreatureSpecies, settings: SettingsLike = None) -> float:
    """Seconds of incubation or gestation before birth.

    Raises:
        InvalidConfigurationError: If the species lacks the speeds for its
            birth type or a divisor is zero.
    """
    settings = resolve_settings(settings)
    what = f"{species.name} birth time"
    if species.birthtype is BirthType.INCUBATION:
        base_time = _timing(
            what,
            INCUBATION_SCALE,
            (
                ("eggspeed", species.eggspeed),
                ("eggspeedmult", species.eggspeedmult),
                ("hatchSpeed", settings.hatch_speed),
            ),
        )
    else:
        base_time = _timing(
            what,
            1.0,
            (
                ("gestationspeed", species.gestationspeed),
                ("gestationspeedmult", species.gestationspeedmult),
                ("hatchSpeed", settings.hatch_speed),
            ),
        )
    return base_time / GEN2_HATCH_DIVISOR if settings.gen2_hatch_effect else base_time


@dataclass(frozen=True)
class FoodRates:
    """Endpoints and slope of the food-rate curve.

    Attributes:
        max_food_rate: Newborn drain (points/sec).
        min_food_rate: Adult drain (points/sec), the floor of the curve.
        decay_per_second: How much the drain falls per second of growth.
        maturation_time: Seconds over which the drain falls.
    """

    max_food_rate: float
    min_food_rate: float
    decay_per_second: float
    maturation_time: float


def calculate_food_rates(species: CreatureSpecies, settings: SettingsLike = None) -> FoodRates:
    settings = resolve_settings(settings)
    maturation_time = calculate_maturation_time(species, settings)
    max_food_rate = (
        species.basefoodrate
        * species.babyfoodrate
        * species.extrababyfoodrate
        * settings.consumption_speed
    )
    min_food_rate = species.basefoodrate * settings.consumption_speed
    decay = (max_food_rate - min_food_rate) / maturation_time
    return FoodRates(max_food_rate, min_food_rate, decay, maturation_time)


@dataclass(frozen=True)
class GrowthModel:
    """Everything the simulators need to know about one species' growth.

    Built once per calculation with :meth:`for_species`; the model itself is
    immutable and safe to share between concurrent callers.
    """

    maturation_time: float
    baby_time: float
    max_food_rate: float
    min_food_rate: float
    decay_per_second: float

    @classmethod
    def for_species(cls, species: CreatureSpecies, settings: SettingsLike = None) -> "GrowthModel":
        rates = calculate_food_rates(species, resolve_settings(settings))
        return cls(
            maturation_time=rates.maturation_time,
            baby_time=rates.maturation_time * JUVENILE_FRACTION,
            max_food_rate=rates.max_food_rate,
            min_food_rate=rates.min_food_rate,
            decay_per_second=rates.decay_per_second,
        )

    def elapsed_at(self, progress: float) -> float:
        """Seconds of growth elapsed at maturation fraction ``progress``."""
        return self.maturation_time * progress

    def linear_rate_at(self, elapsed: float) -> float:
        """Food rate on the straight part of the curve, without the adult floor."""
        return self.max_food_rate - self.decay_per_second * elapsed

    def rate_at(self, elapsed: float) -> float:
        """Instantaneous food rate after ``elapsed`` seconds of growth."""
        return max(self.min_food_rate, self.linear_rate_at(elapsed))
