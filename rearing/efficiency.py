"""Steady-state trough efficiency ("smart fill").

Closed-form estimates used for instant recommendations instead of a full
trough simulation. In a container each stack spoils on its own timer, so
every extra stack adds a fixed amount of spoilage per second. The largest
efficient fill is the number of stacks whose combined spoilage the
creatures' consumption can still keep pace with.

These are equilibrium approximations; transient effects are left to
:func:`rearing.trough.simulate_trough`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from rearing.config.settings import SettingsLike, resolve_settings
from rearing.config.simulation import SECONDS_PER_HOUR
from rearing.exceptions import MissingInputError
from rearing.growth import GrowthModel
from rearing.models.creature import CreatureInstance
from rearing.models.food import ConsumptionRate, FoodItem, FoodValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TroughEfficiency:
    """Smart-fill recommendation for one food type.

    Attributes:
        max_stacks: Largest fill (in stacks) at which consumption keeps pace
            with spoilage.
        consumption_rate: Aggregate consumption of all creatures.
        spoilage_rate_per_stack: Items per second one stack loses to spoilage.
        recommended_items: ``max_stacks`` expressed in items.
    """

    max_stacks: int
    consumption_rate: ConsumptionRate
    spoilage_rate_per_stack: float
    recommended_items: int = 0


@dataclass(frozen=True)
class StacksForDuration:
    """How much to put in a trough to last a desired duration.

    Attributes:
        stacks_needed: Stacks to load into this trough.
        total_stacks: Stacks needed overall (can exceed one trough).
        max_achievable_duration_hours: Longest duration one full trough gives.
        is_achievable: Whether the desired duration fits in one trough.
        limit_reason: ``"spoilage"`` when no fill can reach the duration.
        troughs_needed: Containers needed when one is not enough.
    """

    stacks_needed: float
    total_stacks: float
    max_achievable_duration_hours: float
    is_achievable: bool
    limit_reason: Optional[str] = None
    troughs_needed: Optional[float] = None


def aggregate_food_rate(creatures: Sequence[CreatureInstance], settings: SettingsLike = None) -> float:
    """Combined instantaneous food drain of a group, in points per second."""
    settings = resolve_settings(settings)
    total = 0.0
    for creature in creatures:
        model = GrowthModel.for_species(creature.species, settings)
        rate = model.rate_at(model.elapsed_at(creature.maturation_progress))
        total += rate * creature.quantity
    return total


def calculate_trough_efficiency(
    creatures: Sequence[CreatureInstance],
    food: Optional[FoodItem],
    container_multiplier: float,
    settings: SettingsLike = None,
) -> TroughEfficiency:
    """Maximum efficient fill of ``food`` for a group of creatures.

    Raises:
        MissingInputError: If no food item is given.
    """
    if food is None:
        raise MissingInputError("A food item is required for trough efficiency")
    if not creatures:
        return TroughEfficiency(0, ConsumptionRate(0.0, 0.0), 0.0)

    settings = resolve_settings(settings)
    effective_food = FoodValue.from_food_item(food).with_nursing_effectiveness(
        settings.nursing_multiplier
    )
    consumption = ConsumptionRate.from_points_and_food(
        aggregate_food_rate(creatures, settings), effective_food
    )

    effective_spoil_seconds = food.spoil_seconds * container_multiplier
    if effective_spoil_seconds <= 0:
        logger.debug("%s spoils instantly; no efficient fill", food.name)
        return TroughEfficiency(0, consumption, math.inf)

    spoilage_rate_per_stack = 1 / effective_spoil_seconds
    max_stacks = math.floor(consumption.items_per_second / spoilage_rate_per_stack)
    return TroughEfficiency(
        max_stacks=max_stacks,
        consumption_rate=consumption,
        spoilage_rate_per_stack=spoilage_rate_per_stack,
        recommended_items=max_stacks * food.stack_size,
    )


def calculate_stacks_for_duration(
    creatures: Sequence[CreatureInstance],
    food: FoodItem,
    container_multiplier: float,
    desired_hours: float,
    max_slots: float = math.inf,
    settings: SettingsLike = None,
) -> StacksForDuration:
    """Stacks of ``food`` needed for the trough to last ``desired_hours``.

    A single full stack bounds how long any fill can last, because stacks
    spoil in parallel. Past that ceiling the request is unachievable no
    matter how many stacks are loaded. Below it, the result is capped by the
    container's slots; otherwise stacks are counted under one of two
    spoilage accountings:

    - stasis (offline container): spoilage is charged once over the whole
      duration, shrinking every stack's usable size,
    - render (online container): consumption and sequential spoilage losses
      add up.

    Args:
        creatures: Creatures feeding from the trough.
        food: Food to load.
        container_multiplier: Spoil-time multiplier of the container.
        desired_hours: Target duration.
        max_slots: Slot count of the container (unbounded by default).
        settings: Server settings; ``use_stasis_mode`` picks the accounting.
    """
    settings = resolve_settings(settings)
    efficiency = calculate_trough_efficiency(creatures, food, container_multiplier, settings)
    items_per_second = efficiency.consumption_rate.items_per_second
    if items_per_second <= 0:
        return StacksForDuration(0, 0, 0.0, False)

    desired_seconds = desired_hours * SECONDS_PER_HOUR
    spoil_seconds = food.spoil_seconds * container_multiplier
    absolute_max_seconds = food.stack_size * spoil_seconds

    if desired_seconds > absolute_max_seconds:
        return StacksForDuration(
            stacks_needed=max_slots,
            total_stacks=max_slots,
            max_achievable_duration_hours=absolute_max_seconds / SECONDS_PER_HOUR,
            is_achievable=False,
            limit_reason="spoilage",
            troughs_needed=1,
        )

    effective_max_stacks = min(efficiency.max_stacks, max_slots)

    # A full trough lasts until whichever comes first: it is eaten, or it spoils.
    consumption_seconds = max_slots * food.stack_size / items_per_second
    max_duration_hours = min(consumption_seconds, absolute_max_seconds) / SECONDS_PER_HOUR

    if desired_hours > max_duration_hours:
        stacks_needed = math.ceil(items_per_second * desired_seconds / food.stack_size)
        return StacksForDuration(
            stacks_needed=effective_max_stacks,
            total_stacks=stacks_needed,
            max_achievable_duration_hours=max_duration_hours,
            is_achievable=False,
            troughs_needed=math.ceil(stacks_needed / max_slots),
        )

    total_consumption = items_per_second * desired_seconds
    if settings.use_stasis_mode:
        if desired_seconds >= spoil_seconds:
            return StacksForDuration(
                stacks_needed=effective_max_stacks,
                total_stacks=math.inf,
                max_achievable_duration_hours=spoil_seconds / SECONDS_PER_HOUR,
                is_achievable=False,
                troughs_needed=math.inf,
            )
        effective_stack_size = food.stack_size * (1 - desired_seconds / spoil_seconds)
        stacks_needed = math.ceil(total_consumption / effective_stack_size)
    else:
        total_spoilage = desired_seconds / spoil_seconds if spoil_seconds > 0 else 0.0
        stacks_needed = math.ceil((total_consumption + total_spoilage) / food.stack_size)

    return StacksForDuration(
        stacks_needed=max(1, min(stacks_needed, effective_max_stacks)),
        total_stacks=max(1, stacks_needed),
        max_achievable_duration_hours=max_duration_hours,
        is_achievable=stacks_needed <= effective_max_stacks,
    )
