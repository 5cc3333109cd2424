"""When can a baby stop being hand fed?

A baby's carry capacity grows with its maturation. Hand feeding can stop at
the earliest maturation fraction where the food the baby can carry (simulated
with spoilage) lasts until it reaches the Juvenile threshold.

The bisection assumes buffer time never decreases as maturation grows. That
holds when carry capacity grows at least as fast as consumption, but is not
guaranteed for every species, food and settings combination.
:func:`find_buffer_regressions` samples the curve to detect inputs where the
assumption breaks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from rearing.buffer import StackSpoilageSimulator, calculate_carry_weight, calculate_food_capacity
from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import HAND_FEED_ITERATIONS, HAND_FEED_SAMPLES, JUVENILE_FRACTION
from rearing.growth import GrowthModel
from rearing.models.food import FoodItem
from rearing.models.species import CreatureSpecies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandFeedThreshold:
    """Maturation point after which the baby feeds itself.

    Attributes:
        threshold_percent: Maturation percentage, within [0, 10].
        threshold_time_seconds: Growth time until that point.
    """

    threshold_percent: float
    threshold_time_seconds: float


def calculate_hand_feed_threshold(
    species: CreatureSpecies,
    food: FoodItem,
    creature_weight: float,
    settings: SettingsLike = None,
) -> HandFeedThreshold:
    """Find the earliest self-sustaining maturation fraction by bisection.

    Runs a fixed number of iterations over ``[0, 0.1]``. When no probed
    point is sustainable the threshold stays at 0, the last feasible
    midpoint found (none).
    """
    settings = resolve_settings(settings)
    model = GrowthModel.for_species(species, settings)
    simulator = StackSpoilageSimulator(food, model, settings)

    low = 0.0
    high = JUVENILE_FRACTION
    threshold = 0.0
    for _ in range(HAND_FEED_ITERATIONS):
        mid = (low + high) / 2
        time_to_juvenile = model.baby_time - model.elapsed_at(mid)
        if time_to_juvenile <= 0:
            high = mid
            continue

        capacity = calculate_food_capacity(calculate_carry_weight(creature_weight, mid), food)
        buffer_time = simulator.run(capacity, mid)
        if buffer_time >= time_to_juvenile:
            threshold = mid
            high = mid
        else:
            low = mid

    logger.debug("Hand-feed threshold for %s on %s: %.4f", species.name, food.name, threshold)
    return HandFeedThreshold(
        threshold_percent=threshold * 100,
        threshold_time_seconds=model.maturation_time * threshold,
    )


def find_buffer_regressions(
    species: CreatureSpecies,
    food: FoodItem,
    creature_weight: float,
    settings: SettingsLike = None,
    samples: int = HAND_FEED_SAMPLES,
) -> List[Tuple[float, float, float]]:
    """Sample buffer time over ``(0, 0.1]`` and report where it drops.

    Returns:
        ``(fraction, previous_buffer, buffer)`` for every sample whose buffer
        time is lower than the previous sample's. An empty list means the
        bisection's monotonicity assumption held at every sample.
    """
    settings = resolve_settings(settings)
    model = GrowthModel.for_species(species, settings)
    simulator = StackSpoilageSimulator(food, model, settings)

    regressions: List[Tuple[float, float, float]] = []
    previous = 0.0
    for index in range(1, samples + 1):
        fraction = JUVENILE_FRACTION * index / samples
        capacity = calculate_food_capacity(calculate_carry_weight(creature_weight, fraction), food)
        buffer_time = simulator.run(capacity, fraction)
        if buffer_time < previous:
            regressions.append((fraction, previous, buffer_time))
        previous = buffer_time
    return regressions
