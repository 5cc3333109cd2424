"""Plain data records consumed and produced by the planner."""

from rearing.models.creature import CreatureInstance, clamp_maturation
from rearing.models.food import ConsumptionRate, FoodItem, FoodValue, food_points_to_items
from rearing.models.species import BirthType, CreatureSpecies

__all__ = [
    "BirthType",
    "ConsumptionRate",
    "CreatureInstance",
    "CreatureSpecies",
    "FoodItem",
    "FoodValue",
    "clamp_maturation",
    "food_points_to_items",
]
