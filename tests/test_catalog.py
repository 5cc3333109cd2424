"""Tests for the reference catalog."""

import json

import pytest

from rearing.catalog import Catalog, default_catalog, load_catalog
from rearing.exceptions import MissingInputError
from rearing.growth import calculate_maturation_time
from rearing.models import BirthType


@pytest.fixture
def catalog():
    return default_catalog()


def test_bundled_catalog_loads(catalog):
    assert "Argentavis" in catalog.species
    assert "Raw Meat" in catalog.foods
    assert "Carnivore" in catalog.diets


def test_default_catalog_is_cached():
    assert default_catalog() is default_catalog()


def test_shared_catalog_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog.foods["Raw Meat"] = None
    with pytest.raises(TypeError):
        del catalog.species["Argentavis"]
    with pytest.raises(AttributeError):
        catalog.diets["Carnivore"].append("Rock")

    catalog.get_creature_diet("Argentavis").append("Rock")
    assert "Rock" not in default_catalog().get_creature_diet("Argentavis")
    assert "Raw Meat" in default_catalog().foods


def test_catalog_copies_its_input():
    diets = {"Carnivore": ["Raw Meat"]}
    catalog = Catalog(diets=diets)
    diets["Carnivore"].append("Rock")
    assert catalog.diets["Carnivore"] == ("Raw Meat",)


def test_species_fields(catalog):
    argentavis = catalog.get_species("Argentavis")
    assert argentavis.birthtype is BirthType.INCUBATION
    assert argentavis.diet == "Carnivore"
    assert argentavis.weight == 400
    assert calculate_maturation_time(argentavis) == pytest.approx(1 / (0.000003 * 1.7))


def test_food_fields(catalog):
    raw_meat = catalog.get_food("Raw Meat")
    assert raw_meat.points == 50
    assert raw_meat.stack_size == 40
    assert raw_meat.spoil_seconds == 600


def test_unknown_names_raise(catalog):
    with pytest.raises(MissingInputError):
        catalog.get_species("Unicorn")
    with pytest.raises(MissingInputError):
        catalog.get_food("Ambrosia")


class TestDiets:
    def test_species_diet(self, catalog):
        assert catalog.get_creature_diet("Parasaur")[0] == "Mejoberry"

    def test_unknown_species_can_eat_anything(self, catalog):
        assert catalog.get_creature_diet("Unicorn") == list(catalog.foods)

    def test_unknown_diet_type_falls_back_to_carnivore(self):
        catalog = Catalog.from_dicts(
            {
                "Rockling": {
                    "agespeed": 1e-5,
                    "agespeedmult": 1,
                    "basefoodrate": 0.001,
                    "babyfoodrate": 25.5,
                    "extrababyfoodrate": 20,
                    "type": "Lithovore",
                }
            },
            {"Raw Meat": {"food": 50}},
            {"Carnivore": ["Raw Meat"]},
        )
        assert catalog.get_creature_diet("Rockling") == ["Raw Meat"]

    def test_default_food(self, catalog):
        assert catalog.get_default_food("Argentavis") == "Raw Meat"
        assert catalog.get_default_food("Parasaur") == "Mejoberry"

    def test_default_food_without_diet(self):
        assert Catalog().get_default_food("Anything") == "Raw Meat"


def test_load_catalog_from_directory(tmp_path):
    (tmp_path / "creatures.json").write_text(
        json.dumps(
            {
                "Dodo": {
                    "birthtype": "Incubation",
                    "type": "Herbivore",
                    "basefoodrate": 0.000868,
                    "babyfoodrate": 25.5,
                    "extrababyfoodrate": 20,
                    "agespeed": 0.000003,
                    "agespeedmult": 4,
                    "eggspeed": 0.005556,
                    "eggspeedmult": 2,
                }
            }
        )
    )
    (tmp_path / "foods.json").write_text(json.dumps({"Mejoberry": {"food": 30, "stack": 100}}))
    (tmp_path / "diets.json").write_text(json.dumps({"Herbivore": ["Mejoberry"]}))

    catalog = load_catalog(tmp_path)

    assert list(catalog.species) == ["Dodo"]
    assert catalog.get_food("Mejoberry").spoil_seconds == 600
    assert catalog.get_default_food("Dodo") == "Mejoberry"
