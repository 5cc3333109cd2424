"""Static reference data: species, food items and diet lists.

The bundled JSON files under ``rearing/data`` are a small sample catalog.
Collaborators that maintain the full game catalog load their own directory
with :func:`load_catalog`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Union

from rearing.config.simulation import FALLBACK_DIET
from rearing.exceptions import MissingInputError
from rearing.models.food import FoodItem
from rearing.models.species import CreatureSpecies

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

DEFAULT_FOOD_NAME = "Raw Meat"


@dataclass(frozen=True)
class Catalog:
    """Species, foods and diet lists, keyed by name.

    ``foods`` keeps file order, which is also the order trough stacks are
    laid out in. All three mappings are read-only views (diet lists become
    tuples), so a shared catalog cannot be changed by its callers.
    """

    species: Mapping[str, CreatureSpecies] = field(default_factory=dict)
    foods: Mapping[str, FoodItem] = field(default_factory=dict)
    diets: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "species", MappingProxyType(dict(self.species)))
        object.__setattr__(self, "foods", MappingProxyType(dict(self.foods)))
        diets = {name: tuple(items) for name, items in self.diets.items()}
        object.__setattr__(self, "diets", MappingProxyType(diets))

    @classmethod
    def from_dicts(
        cls,
        creatures: Mapping[str, Mapping[str, Any]],
        foods: Mapping[str, Mapping[str, Any]],
        diets: Mapping[str, Sequence[str]],
    ) -> "Catalog":
        return cls(
            species={name: CreatureSpecies.from_dict(name, raw) for name, raw in creatures.items()},
            foods={name: FoodItem.from_dict(name, raw) for name, raw in foods.items()},
            diets=diets,
        )

    def get_species(self, name: str) -> CreatureSpecies:
        try:
            return self.species[name]
        except KeyError:
            raise MissingInputError(f"Unknown species {name!r}") from None

    def get_food(self, name: str) -> FoodItem:
        try:
            return self.foods[name]
        except KeyError:
            raise MissingInputError(f"Unknown food {name!r}") from None

    def get_creature_diet(self, species_name: str) -> List[str]:
        """Foods a species can eat, in preference order.

        Unknown species can eat anything; unknown diet types fall back to
        the carnivore list.
        """
        species = self.species.get(species_name)
        if species is None:
            return list(self.foods)
        return list(self.diets.get(species.diet) or self.diets.get(FALLBACK_DIET, []))

    def get_default_food(self, species_name: str) -> str:
        """The preferred food of a species."""
        diet = self.get_creature_diet(species_name)
        return diet[0] if diet else DEFAULT_FOOD_NAME


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_catalog(data_dir: Optional[Union[str, Path]] = None) -> Catalog:
    """Load ``creatures.json``, ``foods.json`` and ``diets.json`` from a directory."""
    directory = Path(data_dir) if data_dir is not None else DATA_DIR
    catalog = Catalog.from_dicts(
        _read_json(directory / "creatures.json"),
        _read_json(directory / "foods.json"),
        _read_json(directory / "diets.json"),
    )
    logger.debug(
        "Loaded catalog from %s: %d species, %d foods",
        directory,
        len(catalog.species),
        len(catalog.foods),
    )
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The bundled sample catalog, loaded once per process."""
    return load_catalog()
