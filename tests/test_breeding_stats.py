"""Tests for the single-creature breeding statistics use case."""

from dataclasses import replace

import pytest

from rearing.exceptions import InvalidConfigurationError, MissingInputError
from rearing.growth import calculate_baby_time, calculate_birth_time, calculate_maturation_time
from rearing.integrator import calculate_daily_food
from rearing.result import Err, Ok
from rearing.usecases import (
    calculate_breeding_stats,
    calculate_breeding_stats_strict,
    validate_breeding_inputs,
)


class TestBreedingStats:
    def test_newborn(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)

        assert stats.birth_label == "Incubation"
        assert stats.birth_time == pytest.approx(calculate_birth_time(argentavis))
        assert stats.maturation_time == pytest.approx(calculate_maturation_time(argentavis))
        assert stats.baby_time == pytest.approx(calculate_baby_time(argentavis))
        assert stats.maturation_time_complete == 0
        assert stats.maturation_time_remaining == pytest.approx(stats.maturation_time)
        assert stats.baby_time_remaining == pytest.approx(stats.baby_time)
        assert stats.to_adult_food_items == stats.total_food_items
        assert 0 < stats.to_juvenile_food_items < stats.to_adult_food_items

    def test_newborn_carries_nothing(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)
        assert stats.food_capacity == 0
        assert stats.current_buffer == 0

    def test_current_food_rate_is_per_minute(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)
        # 0.001852 * 25.5 * 20 points per second at birth.
        assert stats.current_food_rate == pytest.approx(0.94452 * 60)

    def test_past_juvenile(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.5)

        assert stats.baby_time_remaining == 0
        assert stats.to_juvenile_food_items == 0
        assert stats.maturation_time_complete == pytest.approx(stats.maturation_time / 2)
        assert stats.to_adult_food_items < stats.total_food_items
        assert stats.food_capacity > 0
        assert stats.current_buffer == pytest.approx(
            stats.food_capacity * raw_meat.points / (stats.current_food_rate / 60)
        )

    def test_hand_feed_threshold_included(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)
        assert 0 <= stats.hand_feed_until <= 10
        assert stats.hand_feed_time == pytest.approx(
            stats.maturation_time * stats.hand_feed_until / 100
        )

    def test_daily_breakdown(self, argentavis, raw_meat):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)
        assert stats.daily_food == calculate_daily_food(argentavis, raw_meat)

    def test_gestation_label(self, basilosaurus, raw_meat):
        stats = calculate_breeding_stats(basilosaurus, raw_meat, 700, 0.0)
        assert stats.birth_label == "Gestation"

    def test_settings_are_applied(self, argentavis, raw_meat):
        normal = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0)
        fast = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0, {"maturationSpeed": 2})
        assert fast.maturation_time == pytest.approx(normal.maturation_time / 2)

    def test_to_dict(self, argentavis, raw_meat):
        data = calculate_breeding_stats(argentavis, raw_meat, 400, 0.0).to_dict()
        assert data["birth_label"] == "Incubation"
        assert "daily_food" in data


class TestLenientNormalization:
    @pytest.mark.parametrize("maturation", [-0.5, 1.5, None])
    def test_out_of_range_maturation_counts_as_newborn(self, argentavis, raw_meat, maturation):
        stats = calculate_breeding_stats(argentavis, raw_meat, 400, maturation)
        assert stats.maturation_time_complete == 0

    @pytest.mark.parametrize("weight", [None, 0, -5])
    def test_bad_weight_falls_back_to_species_weight(self, argentavis, raw_meat, weight):
        assert calculate_breeding_stats(argentavis, raw_meat, weight, 0.5) == calculate_breeding_stats(
            argentavis, raw_meat, 400, 0.5
        )

    def test_missing_species(self, raw_meat):
        with pytest.raises(MissingInputError, match="Creature data is required"):
            calculate_breeding_stats(None, raw_meat, 400, 0.0)

    def test_missing_food(self, argentavis):
        with pytest.raises(MissingInputError, match="Food data is required"):
            calculate_breeding_stats(argentavis, None, 400, 0.0)

    def test_weightless_food_carries_nothing(self, argentavis, trough_meat):
        stats = calculate_breeding_stats(argentavis, trough_meat, 400, 0.05)

        assert stats.food_capacity == 0
        assert stats.current_buffer == 0
        assert stats.hand_feed_until == 0
        assert stats.hand_feed_time == 0
        assert stats.to_adult_food_items > 0

    def test_food_without_value(self, argentavis, raw_meat):
        rock = replace(raw_meat, name="Rock", points=0)
        stats = calculate_breeding_stats(argentavis, rock, 400, 0.05)

        assert stats.total_food_items == 0
        assert stats.to_adult_food_items == 0
        assert stats.food_capacity > 0
        assert stats.current_buffer == 0
        assert set(stats.daily_food.values()) == {0}

    def test_broken_species_still_raises(self, argentavis, raw_meat):
        with pytest.raises(InvalidConfigurationError):
            calculate_breeding_stats(replace(argentavis, agespeed=0), raw_meat, 400, 0.0)


class TestStrictEntryPoint:
    def test_valid_input(self, argentavis, raw_meat):
        result = calculate_breeding_stats_strict(argentavis, raw_meat, 400, 0.05)
        assert isinstance(result, Ok)
        assert result.unwrap() == calculate_breeding_stats(argentavis, raw_meat, 400, 0.05)

    def test_out_of_range_maturation_is_rejected(self, argentavis, raw_meat):
        result = calculate_breeding_stats_strict(argentavis, raw_meat, 400, 1.5)
        assert result.is_err()
        assert "Maturation progress" in result.error

    def test_all_problems_are_reported(self, argentavis):
        result = calculate_breeding_stats_strict(argentavis, None, -1, 2)
        assert result.error.count(";") == 2
        assert "Food data is required" in result.error
        assert "Weight must be positive" in result.error

    def test_weightless_food_is_rejected(self, argentavis, trough_meat):
        result = calculate_breeding_stats_strict(argentavis, trough_meat, 400, 0.05)
        assert result == Err("Food item weight must be positive (got 0.0)")

    def test_configuration_problem_becomes_err(self, argentavis, raw_meat):
        result = calculate_breeding_stats_strict(replace(argentavis, agespeed=0), raw_meat, 400, 0.05)
        assert isinstance(result, Err)
        assert "Argentavis" in result.error

    def test_validation_only(self, argentavis, raw_meat):
        assert validate_breeding_inputs(argentavis, raw_meat, 400, 0.0) == Ok(None)
        assert validate_breeding_inputs(None, raw_meat, 400, 0.0) == Err("Creature data is required")
