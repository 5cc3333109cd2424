"""Creature rearing planner: growth and feeding calculations.

Pure, synchronous calculations for raising creatures in a survival game:

- growth: maturation/birth timings and the food-rate curve
- integrator: food needed over a period, per day, or to adulthood
- buffer: how long carried food lasts with per-stack spoilage
- trough: per-second simulation of a shared feeding container
- efficiency: steady-state "smart fill" recommendations
- hand_feed: when a baby can stop being hand fed
- usecases: all statistics for one creature in one call

Nothing here performs I/O apart from loading the reference catalog, and no
state is kept between calls.
"""

from rearing.buffer import calculate_buffer_time
from rearing.catalog import Catalog, default_catalog, load_catalog
from rearing.config.settings import DEFAULT_SETTINGS, ServerSettings
from rearing.efficiency import calculate_stacks_for_duration, calculate_trough_efficiency
from rearing.exceptions import InvalidConfigurationError, MissingInputError, RearingError
from rearing.growth import (
    GrowthModel,
    calculate_baby_time,
    calculate_birth_time,
    calculate_food_rates,
    calculate_maturation_time,
)
from rearing.hand_feed import calculate_hand_feed_threshold
from rearing.integrator import (
    calculate_daily_food,
    calculate_food_for_period,
    calculate_total_food_to_adult,
)
from rearing.models import (
    BirthType,
    ConsumptionRate,
    CreatureInstance,
    CreatureSpecies,
    FoodItem,
    FoodValue,
    food_points_to_items,
)
from rearing.trough import simulate_trough
from rearing.usecases import calculate_breeding_stats, calculate_breeding_stats_strict

__version__ = "1.0.0"

__all__ = [
    "BirthType",
    "Catalog",
    "ConsumptionRate",
    "CreatureInstance",
    "CreatureSpecies",
    "DEFAULT_SETTINGS",
    "FoodItem",
    "FoodValue",
    "GrowthModel",
    "InvalidConfigurationError",
    "MissingInputError",
    "RearingError",
    "ServerSettings",
    "calculate_baby_time",
    "calculate_birth_time",
    "calculate_breeding_stats",
    "calculate_breeding_stats_strict",
    "calculate_buffer_time",
    "calculate_daily_food",
    "calculate_food_for_period",
    "calculate_food_rates",
    "calculate_hand_feed_threshold",
    "calculate_maturation_time",
    "calculate_stacks_for_duration",
    "calculate_total_food_to_adult",
    "calculate_trough_efficiency",
    "default_catalog",
    "food_points_to_items",
    "load_catalog",
    "simulate_trough",
]
