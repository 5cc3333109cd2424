"""Food records and the value objects derived from them.

``FoodItem`` is the catalog record. ``FoodValue`` and ``ConsumptionRate``
are immutable value objects used by the calculators: a food value can be
re-derived with a container spoil multiplier or a nursing bonus, and a
consumption rate converts points per second into items per second.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from rearing.config.simulation import DEFAULT_SPOIL_SECONDS, DEFAULT_STACK_SIZE
from rearing.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class FoodItem:
    """A food item as listed in the catalog.

    Attributes:
        name: Display name (catalog key).
        points: Nutritional value of one item.
        spoil_seconds: Time for one item to spoil in a player inventory.
        stack_size: Maximum items per inventory stack.
        weight: Weight of one item.
        waste_points: Points produced as waste when an item spoils or is eaten.
    """

    name: str
    points: float
    spoil_seconds: float = DEFAULT_SPOIL_SECONDS
    stack_size: int = DEFAULT_STACK_SIZE
    weight: float = 0.0
    waste_points: float = 0.0

    @classmethod
    def from_dict(cls, name: str, raw: Mapping[str, Any]) -> "FoodItem":
        """Build a food item from a catalog entry (``food``/``spoil``/``stack``)."""
        return cls(
            name=name,
            points=float(raw["food"]),
            spoil_seconds=float(raw.get("spoil") or DEFAULT_SPOIL_SECONDS),
            stack_size=int(raw.get("stack") or DEFAULT_STACK_SIZE),
            weight=float(raw.get("weight") or 0.0),
            waste_points=float(raw.get("waste") or 0.0),
        )


@dataclass(frozen=True)
class FoodValue:
    """Nutritional value and spoilage of one food item.

    Raises:
        InvalidConfigurationError: If points or spoil time are negative.
    """

    points: float
    spoil_seconds: float
    waste_points: float = 0.0

    def __post_init__(self) -> None:
        if self.points < 0:
            raise InvalidConfigurationError("FoodValue: points cannot be negative")
        if self.spoil_seconds < 0:
            raise InvalidConfigurationError("FoodValue: spoil time cannot be negative")

    @classmethod
    def from_food_item(cls, food: FoodItem) -> "FoodValue":
        return cls(food.points, food.spoil_seconds, food.waste_points)

    def with_spoil_multiplier(self, multiplier: float) -> "FoodValue":
        """Food value as kept in a container that slows spoilage."""
        return FoodValue(self.points, self.spoil_seconds * multiplier, self.waste_points)

    def with_nursing_effectiveness(self, multiplier: float) -> "FoodValue":
        """Food value when a nursing bonus makes each item go further."""
        return FoodValue(self.points * multiplier, self.spoil_seconds, self.waste_points)

    def total_points(self, quantity: float) -> float:
        return self.points * quantity


@dataclass(frozen=True)
class ConsumptionRate:
    """Rate at which food is consumed, in points and in items per second."""

    points_per_second: float
    items_per_second: float

    def __post_init__(self) -> None:
        if self.points_per_second < 0:
            raise InvalidConfigurationError("ConsumptionRate: points per second cannot be negative")
        if self.items_per_second < 0:
            raise InvalidConfigurationError("ConsumptionRate: items per second cannot be negative")

    @classmethod
    def from_points_and_food(
        cls, points_per_second: float, food_value: Optional[FoodValue]
    ) -> "ConsumptionRate":
        """Convert a points rate into an items rate for ``food_value``.

        A missing or zero-point food yields 0 items per second.
        """
        if food_value is None or food_value.points == 0:
            return cls(points_per_second, 0.0)
        return cls(points_per_second, points_per_second / food_value.points)


def food_points_to_items(food_points: float, food: FoodItem, food_multiplier: float = 1.0) -> float:
    """Convert food points into a number of items of ``food``.

    Args:
        food_points: Points needed.
        food: The food item being fed.
        food_multiplier: Species-specific nutrition multiplier for this food.

    Returns:
        Items needed (fractional; callers round as they see fit). A food
        without nutritional value converts to 0 items.
    """
    item_points = food.points * food_multiplier
    if item_points <= 0:
        return 0.0
    return food_points / item_points
