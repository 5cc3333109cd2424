"""Configuration package for the rearing planner.

- simulation: game calibration constants used by the simulators
- containers: feeding container types (spoil multiplier, slot count)
- settings: ``ServerSettings``, the per-server configuration record
"""

from rearing.config.containers import CONTAINER_TYPES, ContainerType, get_container_type
from rearing.config.settings import DEFAULT_SETTINGS, ServerSettings, resolve_settings

__all__ = [
    "CONTAINER_TYPES",
    "ContainerType",
    "DEFAULT_SETTINGS",
    "ServerSettings",
    "get_container_type",
    "resolve_settings",
]
