"""Pytest configuration and fixtures for rearing planner tests."""

import pytest

from rearing.config.settings import ServerSettings
from rearing.models import BirthType, CreatureInstance, CreatureSpecies, FoodItem


@pytest.fixture
def settings():
    """Default server settings."""
    return ServerSettings()


@pytest.fixture
def argentavis():
    """Incubation species with reference growth constants."""
    return CreatureSpecies(
        name="Argentavis",
        birthtype=BirthType.INCUBATION,
        diet="Carnivore",
        basefoodrate=0.001852,
        babyfoodrate=25.5,
        extrababyfoodrate=20,
        agespeed=0.000003,
        agespeedmult=1.7,
        eggspeed=0.005556,
        eggspeedmult=1.7,
        weight=400,
    )


@pytest.fixture
def basilosaurus():
    """Gestation species."""
    return CreatureSpecies(
        name="Basilosaurus",
        birthtype=BirthType.GESTATION,
        diet="Carnivore",
        basefoodrate=0.002929,
        babyfoodrate=25.5,
        extrababyfoodrate=20,
        agespeed=0.000003,
        agespeedmult=0.8,
        gestationspeed=0.000035,
        gestationspeedmult=1.0,
        weight=700,
    )


@pytest.fixture
def drakeling():
    return CreatureSpecies(
        name="Drakeling",
        diet="Carnivore",
        basefoodrate=0.001302,
        babyfoodrate=25.5,
        extrababyfoodrate=20,
        agespeed=0.000003,
        agespeedmult=1,
        food_multipliers={"Raw Meat": 1},
    )


@pytest.fixture
def raw_meat():
    return FoodItem(name="Raw Meat", points=50, stack_size=40, spoil_seconds=600, weight=0.1)


@pytest.fixture
def trough_meat():
    """Meat with a 20-item stack, as used by the trough scenarios."""
    return FoodItem(name="Raw Meat", points=50, stack_size=20, spoil_seconds=600)


@pytest.fixture
def trough_catalog(trough_meat):
    """Food catalog and diet lists for a single-food trough."""
    return {"Raw Meat": trough_meat}, {"Carnivore": ["Raw Meat"]}


@pytest.fixture
def baby_drakeling(drakeling):
    return CreatureInstance(species=drakeling, maturation_progress=0.1, quantity=1, name="Drakeling")
