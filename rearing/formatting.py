"""Display helpers for durations and maturation percentages."""

import math

from rearing.config.simulation import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE


def format_time(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``, or ``Nd:HH:MM:SS`` past one day.

    Zero, negative and missing values format as ``00:00:00``.
    """
    if not seconds or seconds < 0 or math.isnan(seconds):
        return "00:00:00"

    days = int(seconds // SECONDS_PER_DAY)
    hours = int((seconds % SECONDS_PER_DAY) // SECONDS_PER_HOUR)
    minutes = int((seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE)
    secs = int(seconds % SECONDS_PER_MINUTE)

    clock = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if days > 0:
        return f"{days}d:{clock}"
    return clock


def format_percentage(value: float) -> str:
    """Format a fraction as a percentage with one decimal, rounding up.

    ``0.105`` gives ``"10.5"`` and ``0.1054`` gives ``"10.6"``.
    """
    return f"{math.ceil(value * 1000) / 10:.1f}"
