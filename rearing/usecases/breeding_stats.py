"""Breeding statistics for a single creature.

One call computes everything a rearing planner shows for a baby: birth and
maturation timings, progress, food requirements, carry capacity, buffer,
hand-feed threshold and the daily food breakdown.

Two entry points share the calculation:

- :func:`calculate_breeding_stats` is lenient. Interactive callers (a form
  mid-edit) pass whatever the user typed; an out-of-range maturation becomes
  0 and a non-positive weight becomes the species' reference weight.
- :func:`calculate_breeding_stats_strict` validates instead and returns a
  :class:`~rearing.result.Result` with every problem listed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from rearing.buffer import calculate_carry_weight, calculate_food_capacity
from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import MIN_FOOD_RATE_EPSILON, SECONDS_PER_MINUTE
from rearing.exceptions import InvalidConfigurationError, MissingInputError
from rearing.growth import GrowthModel, calculate_birth_time
from rearing.hand_feed import HandFeedThreshold, calculate_hand_feed_threshold
from rearing.integrator import calculate_daily_food, integrate_food
from rearing.models.food import FoodItem, food_points_to_items
from rearing.models.species import CreatureSpecies
from rearing.result import Err, Ok, Result, collect_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreedingStats:
    """Everything the planner reports for one creature.

    Times are in seconds, food amounts in items of the chosen food.

    Attributes:
        birth_label: "Incubation" or "Gestation".
        birth_time: Incubation or gestation duration.
        maturation_time: Birth to adult.
        baby_time: Birth to Juvenile (10%).
        maturation_time_complete: Growth already elapsed.
        maturation_time_remaining: Growth left until adult.
        baby_time_remaining: Growth left until Juvenile (0 once past it).
        total_food_items: Food from birth to adult.
        to_juvenile_food_items: Food from now to Juvenile.
        to_adult_food_items: Food from now to adult.
        current_buffer: How long a full inventory lasts at the current rate,
            ignoring spoilage.
        food_capacity: Items that fit in the creature's inventory now.
        current_food_rate: Current drain in points per minute.
        hand_feed_until: Maturation percentage where hand feeding can stop.
        hand_feed_time: Growth time until that point.
        daily_food: Items needed per day of growth.
    """

    birth_label: str
    birth_time: float
    maturation_time: float
    baby_time: float
    maturation_time_complete: float
    maturation_time_remaining: float
    baby_time_remaining: float
    total_food_items: int
    to_juvenile_food_items: int
    to_adult_food_items: int
    current_buffer: float
    food_capacity: int
    current_food_rate: float
    hand_feed_until: float
    hand_feed_time: float
    daily_food: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def _normalize_maturation(maturation_progress: Optional[float]) -> float:
    if maturation_progress is not None and 0 <= maturation_progress <= 1:
        return float(maturation_progress)
    return 0.0


def _normalize_weight(weight: Optional[float], species: CreatureSpecies) -> float:
    if weight is not None and weight > 0:
        return float(weight)
    return species.weight or 1.0


def _compute(
    species: CreatureSpecies,
    food: FoodItem,
    weight: float,
    maturation_progress: float,
    settings: SettingsLike,
) -> BreedingStats:
    settings = resolve_settings(settings)
    model = GrowthModel.for_species(species, settings)
    birth_time = calculate_birth_time(species, settings)

    elapsed = model.elapsed_at(maturation_progress)
    total_food = integrate_food(model, 0, model.maturation_time)
    to_juvenile_food = integrate_food(model, elapsed, model.baby_time)
    to_adult_food = integrate_food(model, elapsed, model.maturation_time)

    current_food_rate = model.linear_rate_at(elapsed)
    safe_food_rate = max(current_food_rate, MIN_FOOD_RATE_EPSILON)

    # Without an item weight nothing can be carried, so there is no buffer
    # and no point where the baby feeds itself.
    if food.weight > 0:
        food_capacity = calculate_food_capacity(calculate_carry_weight(weight, maturation_progress), food)
        hand_feed = calculate_hand_feed_threshold(species, food, weight, settings)
    else:
        logger.debug("%s has no item weight; carry capacity is zero", food.name)
        food_capacity = 0
        hand_feed = HandFeedThreshold(0.0, 0.0)
    current_buffer = food_capacity * food.points / safe_food_rate if food_capacity > 0 else 0.0

    return BreedingStats(
        birth_label=species.birthtype.value,
        birth_time=birth_time,
        maturation_time=model.maturation_time,
        baby_time=model.baby_time,
        maturation_time_complete=elapsed,
        maturation_time_remaining=model.maturation_time - elapsed,
        baby_time_remaining=max(0.0, model.baby_time - elapsed),
        total_food_items=math.ceil(food_points_to_items(total_food, food)),
        to_juvenile_food_items=math.ceil(food_points_to_items(to_juvenile_food, food)),
        to_adult_food_items=math.ceil(food_points_to_items(to_adult_food, food)),
        current_buffer=current_buffer,
        food_capacity=food_capacity,
        current_food_rate=current_food_rate * SECONDS_PER_MINUTE,
        hand_feed_until=hand_feed.threshold_percent,
        hand_feed_time=hand_feed.threshold_time_seconds,
        daily_food=calculate_daily_food(species, food, settings),
    )


def calculate_breeding_stats(
    species: Optional[CreatureSpecies],
    food: Optional[FoodItem],
    weight: Optional[float] = None,
    maturation_progress: Optional[float] = 0.0,
    settings: SettingsLike = None,
) -> BreedingStats:
    """Compute all breeding statistics, normalizing numeric input.

    Args:
        species: Species of the creature.
        food: Food it is fed. A food without item weight gives zero carry
            capacity, buffer and hand-feed threshold.
        weight: Creature weight stat; non-positive or missing falls back to
            the species' reference weight.
        maturation_progress: Fraction in [0, 1]; anything else counts as 0.
        settings: Server settings.

    Raises:
        MissingInputError: If species or food is missing.
        InvalidConfigurationError: If the species' growth rates are unusable.
    """
    if species is None:
        raise MissingInputError("Creature data is required")
    if food is None:
        raise MissingInputError("Food data is required")

    safe_maturation = _normalize_maturation(maturation_progress)
    if safe_maturation != maturation_progress:
        logger.debug("Maturation %r normalized to %s", maturation_progress, safe_maturation)

    return _compute(
        species, food, _normalize_weight(weight, species), safe_maturation, settings
    )


def _check(condition: bool, message: str) -> Result[None, str]:
    return Ok(None) if condition else Err(message)


def validate_breeding_inputs(
    species: Optional[CreatureSpecies],
    food: Optional[FoodItem],
    weight: Optional[float],
    maturation_progress: Optional[float],
) -> Result[None, str]:
    """Check breeding-stat inputs without normalizing them."""
    food_weight = food.weight if food is not None else None
    return collect_errors(
        [
            _check(species is not None, "Creature data is required"),
            _check(food is not None, "Food data is required"),
            _check(
                maturation_progress is not None and 0 <= maturation_progress <= 1,
                f"Maturation progress must be within [0, 1] (got {maturation_progress!r})",
            ),
            _check(weight is not None and weight > 0, f"Weight must be positive (got {weight!r})"),
            _check(
                food_weight is None or food_weight > 0,
                f"Food item weight must be positive (got {food_weight!r})",
            ),
        ]
    )


def calculate_breeding_stats_strict(
    species: Optional[CreatureSpecies],
    food: Optional[FoodItem],
    weight: Optional[float],
    maturation_progress: Optional[float],
    settings: SettingsLike = None,
) -> Result[BreedingStats, str]:
    """Compute breeding statistics, rejecting input instead of normalizing it.

    Returns:
        Ok(BreedingStats), or Err with every validation problem, or Err with
        the configuration problem that made a timing unusable.
    """
    validation = validate_breeding_inputs(species, food, weight, maturation_progress)
    if validation.is_err():
        return validation
    try:
        return Ok(_compute(species, food, float(weight), float(maturation_progress), settings))
    except InvalidConfigurationError as e:
        return Err(str(e))
