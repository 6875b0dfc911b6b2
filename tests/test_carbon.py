"""Unit tests for the carbon calculator."""

import pytest

from carbon import CLEANER_THAN_PERCENT_DEFAULT, calculate_carbon

from conftest import MIB


class TestCalculateCarbon:
    """Tests for calculate_carbon."""

    def test_one_megabyte_grey(self) -> None:
        carbon = calculate_carbon(MIB, is_green=False)
        assert carbon.grams_co2_per_view == 0.5
        assert carbon.equivalence.trees_planted == 0.00008
        assert carbon.equivalence.kettles_boiled == 0.03
        assert carbon.equivalence.km_driven == 0.004

    def test_four_megabytes_green(self) -> None:
        carbon = calculate_carbon(4 * MIB, is_green=True)
        assert carbon.grams_co2_per_view == 1.0

    def test_large_page_equivalences(self) -> None:
        carbon = calculate_carbon(120 * MIB, is_green=False)
        assert carbon.grams_co2_per_view == 60.0
        assert carbon.equivalence.trees_planted == 0.01
        assert carbon.equivalence.kettles_boiled == 4.0
        assert carbon.equivalence.km_driven == 0.5

    def test_empty_page(self) -> None:
        carbon = calculate_carbon(0, is_green=False)
        assert carbon.grams_co2_per_view == 0
        assert carbon.equivalence.trees_planted == 0
        assert carbon.equivalence.kettles_boiled == 0
        assert carbon.equivalence.km_driven == 0

    def test_headline_rounded_to_two_places(self) -> None:
        carbon = calculate_carbon(1_500_000, is_green=False)
        assert carbon.grams_co2_per_view == 0.72

    def test_cleaner_than_is_placeholder(self) -> None:
        assert calculate_carbon(MIB, False).cleaner_than_percent == CLEANER_THAN_PERCENT_DEFAULT == 50

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValueError):
            calculate_carbon(-1, is_green=False)

    @pytest.mark.parametrize("page_weight", [0, 2 * MIB, 4 * MIB, 10 * MIB, 64 * MIB])
    def test_green_hosting_halves_emissions(self, page_weight: int) -> None:
        grey = calculate_carbon(page_weight, is_green=False).grams_co2_per_view
        green = calculate_carbon(page_weight, is_green=True).grams_co2_per_view
        assert green == grey / 2

    @pytest.mark.parametrize("page_weight", [1, 777, 123_456, 3_000_001, 9_999_999])
    def test_green_within_rounding_of_half(self, page_weight: int) -> None:
        grey = calculate_carbon(page_weight, is_green=False).grams_co2_per_view
        green = calculate_carbon(page_weight, is_green=True).grams_co2_per_view
        assert green >= 0
        assert green == pytest.approx(grey / 2, abs=0.01)

    def test_serializes_with_wire_names(self) -> None:
        data = calculate_carbon(MIB, False).model_dump(by_alias=True)
        assert set(data) == {"gramsCO2PerView", "equivalence", "cleanerThanPercent"}
        assert set(data["equivalence"]) == {"treesPlanted", "kettlesBoiled", "kmDriven"}
