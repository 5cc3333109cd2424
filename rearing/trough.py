"""Shared feeding container ("trough") simulation.

Several creatures feed from one container holding stacks of one or more
food types. The simulation ticks once per simulated second:

- every creature that is still growing builds up hunger at its current food
  rate (plus a growth-fill bonus when its stomach capacity is known) and,
  once hunger reaches 20 points, eats one item from the first non-empty stack
  it can digest,
- every non-empty stack counts down its own spoil timer and loses one item
  each time the timer runs out.

The run ends when the container is empty or after three simulated days.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import (
    FALLBACK_DIET,
    GROWTH_FILL_COEFFICIENT,
    HUNGER_THRESHOLD,
    TROUGH_MAX_SECONDS,
)
from rearing.growth import GrowthModel
from rearing.models.creature import CreatureInstance, clamp_maturation
from rearing.models.food import FoodItem, FoodValue
from rearing.models.species import CreatureSpecies

logger = logging.getLogger(__name__)


@dataclass
class FoodStack:
    """One container slot during a simulation run."""

    food_type: str
    item_count: int
    spoil_countdown: float
    spoil_seconds: float
    points: float
    waste_points: float


@dataclass
class _TroughCreature:
    name: Optional[str]
    species: CreatureSpecies
    min_food_rate: float
    decay_per_second: float
    food_rate: float
    growth_fill_rate: float
    diet: Sequence[str]
    hunger: float = 0.0


@dataclass(frozen=True)
class TroughResult:
    """Outcome of a trough simulation.

    ``total_food == eaten_food + spoiled_food`` and
    ``total_points == eaten_points + spoiled_points + wasted_points``.
    """

    time: int = 0
    total_food: int = 0
    total_points: float = 0.0
    eaten_food: int = 0
    eaten_points: float = 0.0
    spoiled_food: int = 0
    spoiled_points: float = 0.0
    wasted_points: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def _build_stacks(
    food_stacks: Mapping[str, float], foods: Mapping[str, FoodItem], container_multiplier: float
) -> List[FoodStack]:
    # Stacks are laid out in catalog order, not in the order of the request.
    stacks: List[FoodStack] = []
    for food_name, food in foods.items():
        requested = food_stacks.get(food_name)
        if requested is None or requested <= 0:
            continue

        full_stacks = math.floor(requested)
        partial = requested - full_stacks
        spoil_seconds = food.spoil_seconds * container_multiplier
        for index in range(math.ceil(requested)):
            item_count = math.floor(food.stack_size * partial) if index == full_stacks else food.stack_size
            stacks.append(
                FoodStack(
                    food_type=food_name,
                    item_count=item_count,
                    spoil_countdown=spoil_seconds,
                    spoil_seconds=spoil_seconds,
                    points=food.points,
                    waste_points=food.waste_points,
                )
            )
    return stacks


def _build_creatures(
    creatures: Iterable[CreatureInstance],
    diets: Mapping[str, Sequence[str]],
    settings: SettingsLike,
) -> List[_TroughCreature]:
    trough_creatures: List[_TroughCreature] = []
    for creature in creatures:
        species = creature.species
        model = GrowthModel.for_species(species, settings)
        diet = diets.get(species.diet) or diets.get(FALLBACK_DIET) or ()

        growth_fill_rate = 0.0
        if creature.max_food_capacity:
            growth_fill_rate = GROWTH_FILL_COEFFICIENT * creature.max_food_capacity / model.maturation_time

        for _ in range(creature.quantity):
            trough_creatures.append(
                _TroughCreature(
                    name=creature.name or species.name,
                    species=species,
                    min_food_rate=model.min_food_rate,
                    decay_per_second=model.decay_per_second,
                    food_rate=model.linear_rate_at(model.elapsed_at(creature.maturation_progress)),
                    growth_fill_rate=growth_fill_rate,
                    diet=diet,
                )
            )
    return trough_creatures


def simulate_trough(
    creatures: Sequence[CreatureInstance],
    food_stacks: Mapping[str, float],
    foods: Mapping[str, FoodItem],
    diets: Mapping[str, Sequence[str]],
    container_multiplier: float,
    settings: SettingsLike = None,
) -> TroughResult:
    """Run the per-second trough simulation.

    Args:
        creatures: Creatures feeding from the trough (``quantity`` expands
            into identical copies).
        food_stacks: Number of stacks per food name; fractions give a
            partial last stack.
        foods: Food catalog; its order decides the stack order.
        diets: Diet lists keyed by diet type (species ``diet``).
        container_multiplier: Spoil-time multiplier of the container.
        settings: Server settings (nursing multiplier, growth speeds).

    Returns:
        A :class:`TroughResult`; all zeros when there are no creatures.
    """
    if not creatures:
        return TroughResult()

    settings = resolve_settings(settings)
    stacks = _build_stacks(food_stacks, foods, container_multiplier)
    trough_creatures = _build_creatures(creatures, diets, settings)
    nursing_multiplier = settings.nursing_multiplier

    eaten_food = 0
    eaten_points = 0.0
    spoiled_food = 0
    spoiled_points = 0.0
    wasted_points = 0.0
    remaining_stacks = sum(1 for stack in stacks if stack.item_count > 0)

    time = 0
    while remaining_stacks > 0 and time < TROUGH_MAX_SECONDS:
        time += 1

        for creature in trough_creatures:
            # Adults stop growing and leave the simulation.
            if creature.food_rate < creature.min_food_rate:
                continue

            creature.food_rate -= creature.decay_per_second
            creature.hunger += creature.food_rate + creature.growth_fill_rate
            if creature.hunger < HUNGER_THRESHOLD:
                continue

            for stack in stacks:
                if stack.item_count <= 0 or stack.food_type not in creature.diet:
                    continue

                food_value = FoodValue(stack.points, stack.spoil_seconds).with_nursing_effectiveness(
                    nursing_multiplier
                )
                effective_points = food_value.points * creature.species.food_multiplier(stack.food_type)
                if effective_points < creature.hunger:
                    stack.item_count -= 1
                    eaten_food += 1
                    eaten_points += effective_points
                    wasted_points += stack.waste_points * creature.species.waste_multiplier(
                        stack.food_type
                    )
                    creature.hunger -= effective_points
                    if stack.item_count == 0:
                        remaining_stacks -= 1
                break

        for stack in stacks:
            if stack.item_count <= 0:
                continue
            stack.spoil_countdown -= 1
            if stack.spoil_countdown <= 0:
                stack.item_count -= 1
                stack.spoil_countdown = stack.spoil_seconds
                spoiled_food += 1
                spoiled_points += stack.points
                wasted_points += stack.waste_points
                if stack.item_count == 0:
                    remaining_stacks -= 1

    if remaining_stacks > 0:
        logger.debug("Trough simulation hit the %ds cap with %d stacks left", time, remaining_stacks)

    return TroughResult(
        time=time,
        total_food=eaten_food + spoiled_food,
        total_points=eaten_points + spoiled_points + wasted_points,
        eaten_food=eaten_food,
        eaten_points=eaten_points,
        spoiled_food=spoiled_food,
        spoiled_points=spoiled_points,
        wasted_points=wasted_points,
    )


def estimate_stacks_for_duration(
    species: CreatureSpecies,
    food: FoodItem,
    duration: float,
    maturation_progress: float,
    settings: SettingsLike = None,
) -> int:
    """Quick single-creature estimate of stacks needed for ``duration`` seconds.

    Uses the average food rate over the window and ignores spoilage.
    """
    model = GrowthModel.for_species(species, settings)
    current_rate = model.linear_rate_at(model.elapsed_at(clamp_maturation(maturation_progress)))
    average_rate = current_rate - model.decay_per_second * duration / 2
    food_items = average_rate * duration / food.points
    return math.ceil(food_items / food.stack_size)
