"""Game calibration constants for the growth and feeding simulators.

These values come from the host game's behaviour and existing planner
expectations. They are not tuning knobs: changing any of them changes the
numbers players compare against in game.
"""

# =============================================================================
# TIME
# =============================================================================
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

# =============================================================================
# GROWTH
# =============================================================================
# A creature counts as "Juvenile" once 10% of maturation has elapsed.
JUVENILE_FRACTION = 0.1

# Incubation speeds are expressed per 100% of egg health.
INCUBATION_SCALE = 100.0

GEN2_GROWTH_DIVISOR = 2.0
GEN2_HATCH_DIVISOR = 1.5

# =============================================================================
# STACK SPOILAGE SIMULATION (buffer time)
# =============================================================================
BUFFER_STEP_SECONDS = 60
BUFFER_MAX_SECONDS = 100 * SECONDS_PER_DAY  # 8,640,000 s, "effectively unlimited"

# A creature's own inventory keeps food 4x longer than a player inventory.
INVENTORY_SPOIL_MULTIPLIER = 4

# Fallbacks when a food record has no spoil time / stack size.
DEFAULT_SPOIL_SECONDS = 600
DEFAULT_STACK_SIZE = 40

# =============================================================================
# TROUGH SIMULATION
# =============================================================================
TROUGH_MAX_SECONDS = 3 * SECONDS_PER_DAY
HUNGER_THRESHOLD = 20.0  # Points of hunger before a creature tries to eat
GROWTH_FILL_COEFFICIENT = 0.75  # Share of stomach capacity refilled while growing

# Diet used when a species' diet list is unknown.
FALLBACK_DIET = "Carnivore"

# =============================================================================
# DERIVED QUERIES
# =============================================================================
DAILY_FOOD_MAX_DAYS = 100
HAND_FEED_ITERATIONS = 50
HAND_FEED_SAMPLES = 20  # Probe count for buffer-time regression checks

# Floor used by the closed-form buffer estimate to avoid dividing by zero.
MIN_FOOD_RATE_EPSILON = 0.000001
