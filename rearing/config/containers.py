"""Feeding container types.

Base food spoil times are player-inventory times (raw meat: 600 s). A
container multiplies that time. ``slots`` is the number of inventory slots,
``None`` when the container is limited by weight instead.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from rearing.exceptions import MissingInputError


@dataclass(frozen=True)
class ContainerType:
    """A feeding container and how long it keeps food fresh."""

    name: str
    spoil_multiplier: float
    slots: Optional[int]


CONTAINER_TYPES: Dict[str, ContainerType] = {
    "Normal": ContainerType("Normal", spoil_multiplier=4, slots=60),
    "Tek Trough": ContainerType("Tek Trough", spoil_multiplier=100, slots=100),
    # A Maewing nurses from its own inventory: same spoilage as a creature
    # inventory, capacity bounded by weight.
    "Maewing": ContainerType("Maewing", spoil_multiplier=4, slots=None),
}


def get_container_type(name: str) -> ContainerType:
    """Look up a container type by name.

    Raises:
        MissingInputError: If ``name`` is not a known container type.
    """
    try:
        return CONTAINER_TYPES[name]
    except KeyError:
        known = ", ".join(sorted(CONTAINER_TYPES))
        raise MissingInputError(f"Unknown container type {name!r} (known: {known})") from None
