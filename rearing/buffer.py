"""Buffer time: how long a creature survives on the food it carries.

Food in an inventory is split into stacks and every stack spoils on its own
timer, so a full inventory loses one item per stack each spoil interval on
top of what the creature eats. The simulation advances in one-minute steps:

1. on every consolidation boundary the remaining items are pooled and
   re-stacked (players "auto-sort" their inventory),
2. every non-empty stack loses ``step / spoil_time`` items to spoilage,
3. the step's consumption is drawn only from the first stack that still
   holds items after spoilage; whatever that stack cannot cover is lost,
4. stacks that went negative are clamped to zero.

It stops when every stack is empty or after 100 simulated days; callers treat
the 100-day result as "effectively unlimited".
"""

from __future__ import annotations

import logging
import math
from typing import List

from rearing.config.settings import ServerSettings, SettingsLike, resolve_settings
from rearing.config.simulation import (
    BUFFER_MAX_SECONDS,
    BUFFER_STEP_SECONDS,
    INVENTORY_SPOIL_MULTIPLIER,
)
from rearing.exceptions import InvalidConfigurationError
from rearing.growth import GrowthModel
from rearing.models.creature import clamp_maturation
from rearing.models.food import FoodItem
from rearing.models.species import CreatureSpecies

logger = logging.getLogger(__name__)


def build_stacks(total_items: float, stack_size: float) -> List[float]:
    """Split ``total_items`` into full stacks plus a trailing partial stack."""
    stacks: List[float] = []
    filled = 0.0
    while filled < total_items:
        stacks.append(min(stack_size, total_items - filled))
        filled += stack_size
    return stacks


class StackSpoilageSimulator:
    """Fixed-step spoilage and consumption of one food type in an inventory.

    Each call to :meth:`run` owns its stack list; the simulator can be reused
    for any number of runs with the same food, growth model and settings.

    Attributes:
        food: The food item carried.
        model: Growth model of the creature eating it.
        stack_size: Items per stack after the server stack multiplier.
        effective_spoil_seconds: Seconds for one item to spoil in the
            creature's inventory.
    """

    def __init__(self, food: FoodItem, model: GrowthModel, settings: ServerSettings) -> None:
        self.food = food
        self.model = model
        self.stack_size = food.stack_size * settings.stack_multiplier
        self.effective_spoil_seconds = (
            food.spoil_seconds * INVENTORY_SPOIL_MULTIPLIER * settings.consumables_spoil_time
        )
        if self.stack_size <= 0:
            raise InvalidConfigurationError(
                f"{food.name}: stack size must be positive (got {self.stack_size!r})"
            )

    def run(
        self,
        initial_items: float,
        maturation_progress: float,
        consolidation_interval: float = 0,
    ) -> float:
        """Simulate until the food runs out.

        Args:
            initial_items: Items carried at the start.
            maturation_progress: Creature's maturation fraction at the start.
            consolidation_interval: Seconds between re-stacking passes
                (0 never re-stacks).

        Returns:
            Seconds of unattended survival, at most 100 days.
        """
        if initial_items <= 0 or self.effective_spoil_seconds <= 0:
            return 0.0
        if self.food.points <= 0:
            logger.debug("%s has no food value; buffer time is zero", self.food.name)
            return 0.0

        start_time = self.model.elapsed_at(clamp_maturation(maturation_progress))
        spoilage_per_step = BUFFER_STEP_SECONDS / self.effective_spoil_seconds
        stacks = build_stacks(initial_items, self.stack_size)

        elapsed = 0
        consolidations = 0
        while elapsed < BUFFER_MAX_SECONDS and any(count > 0 for count in stacks):
            if consolidation_interval > 0 and elapsed > 0:
                boundary = int(elapsed // consolidation_interval)
                if boundary > consolidations:
                    consolidations = boundary
                    pooled = sum(max(0.0, count) for count in stacks)
                    stacks = build_stacks(pooled, self.stack_size)

            rate = self.model.rate_at(start_time + elapsed)
            items_to_consume = rate * BUFFER_STEP_SECONDS / self.food.points

            stacks = [count - spoilage_per_step if count > 0 else count for count in stacks]
            for index, count in enumerate(stacks):
                if count > 0:
                    stacks[index] = count - min(count, items_to_consume)
                    break
            stacks = [max(0.0, count) for count in stacks]

            elapsed += BUFFER_STEP_SECONDS

        if elapsed >= BUFFER_MAX_SECONDS:
            logger.debug(
                "Buffer for %d x %s hit the %ds cap", initial_items, self.food.name, BUFFER_MAX_SECONDS
            )
        return float(elapsed)


def calculate_buffer_time(
    initial_items: float,
    food: FoodItem,
    species: CreatureSpecies,
    maturation_progress: float,
    settings: SettingsLike = None,
    consolidation_interval: float = 0,
) -> float:
    """Seconds a creature of ``species`` survives on ``initial_items`` of ``food``."""
    settings = resolve_settings(settings)
    simulator = StackSpoilageSimulator(food, GrowthModel.for_species(species, settings), settings)
    return simulator.run(initial_items, maturation_progress, consolidation_interval)


def calculate_carry_weight(creature_weight: float, maturation_progress: float) -> float:
    """Carry weight of a creature at ``maturation_progress``."""
    return creature_weight * maturation_progress


def calculate_food_capacity(carry_weight: float, food: FoodItem) -> int:
    """How many whole items of ``food`` fit in ``carry_weight``.

    Raises:
        InvalidConfigurationError: If the food has no positive weight.
    """
    if food.weight <= 0:
        raise InvalidConfigurationError(f"{food.name}: item weight must be positive")
    return max(0, math.floor(carry_weight / food.weight))
