"""Food needed over a period of growth.

The food-rate curve is linear between birth and adulthood, so the food eaten
over any window is the area of a trapezoid. Everything here is closed-form;
no simulation is involved.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable

from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import DAILY_FOOD_MAX_DAYS, SECONDS_PER_DAY
from rearing.growth import GrowthModel
from rearing.models.creature import CreatureInstance, clamp_maturation
from rearing.models.food import FoodItem, FoodValue, food_points_to_items
from rearing.models.species import CreatureSpecies

logger = logging.getLogger(__name__)


def integrate_food(model: GrowthModel, start: float, end: float) -> float:
    """Food points consumed between ``start`` and ``end`` seconds of growth.

    ``end`` is clamped to ``[start, maturation_time]``; an empty or inverted
    window consumes nothing.
    """
    clamped_end = min(model.maturation_time, max(start, end))
    total_time = clamped_end - start
    if total_time <= 0:
        return 0.0

    start_rate = model.linear_rate_at(start)
    end_rate = model.linear_rate_at(clamped_end)
    return 0.5 * total_time * (start_rate - end_rate) + end_rate * total_time


def calculate_food_for_period(
    start: float, end: float, species: CreatureSpecies, settings: SettingsLike = None
) -> float:
    """Food points a creature of ``species`` eats between two growth times."""
    return integrate_food(GrowthModel.for_species(species, settings), start, end)


def calculate_food_to_maturation(
    species: CreatureSpecies,
    from_progress: float,
    to_progress: float = 1.0,
    settings: SettingsLike = None,
) -> float:
    """Food points needed to grow from one maturation fraction to another."""
    model = GrowthModel.for_species(species, settings)
    return integrate_food(
        model,
        model.elapsed_at(clamp_maturation(from_progress)),
        model.elapsed_at(clamp_maturation(to_progress)),
    )


def apply_loss_factor(food_points: float, settings: SettingsLike = None) -> float:
    """Add the server's loss-factor surcharge (a percentage) to a food total."""
    return food_points * (1 + resolve_settings(settings).loss_factor / 100)


def calculate_daily_food(
    species: CreatureSpecies, food: FoodItem, settings: SettingsLike = None
) -> Dict[int, int]:
    """Items of ``food`` needed on each day of growth.

    Days are numbered from 1. The last day is cut at the maturation time and
    days without consumption are left out. The breakdown stops after
    100 days for very slow growth settings.
    """
    settings = resolve_settings(settings)
    model = GrowthModel.for_species(species, settings)

    daily_food: Dict[int, int] = {}
    day = 1
    current = 0.0
    while current < model.maturation_time:
        start = (day - 1) * SECONDS_PER_DAY
        end = min(day * SECONDS_PER_DAY, model.maturation_time)

        food_points = integrate_food(model, start, end)
        if food_points > 0:
            daily_food[day] = math.ceil(
                food_points_to_items(apply_loss_factor(food_points, settings), food)
            )

        current = end
        day += 1
        if day > DAILY_FOOD_MAX_DAYS:
            logger.debug(
                "Daily food for %s truncated at %d days (maturation %.0fs)",
                species.name,
                DAILY_FOOD_MAX_DAYS,
                model.maturation_time,
            )
            break

    return daily_food


def calculate_total_food_to_adult(
    creatures: Iterable[CreatureInstance], food: FoodItem, settings: SettingsLike = None
) -> int:
    """Items of ``food`` needed to raise a group to adulthood, ignoring spoilage.

    The nursing multiplier raises the effective value of each item.
    """
    settings = resolve_settings(settings)
    effective_food = FoodValue.from_food_item(food).with_nursing_effectiveness(
        settings.nursing_multiplier
    )
    if effective_food.points <= 0:
        return 0

    total_items = 0.0
    for creature in creatures:
        model = GrowthModel.for_species(creature.species, settings)
        current = model.elapsed_at(creature.maturation_progress)
        if current >= model.maturation_time:
            continue
        points = integrate_food(model, current, model.maturation_time)
        total_items += points / effective_food.points * creature.quantity

    return math.ceil(total_items)
