"""Carbon estimate for a single page view, from transferred bytes."""

from models import CarbonEstimate, Equivalence

BYTES_PER_MEGABYTE = 1024 * 1024
GRAMS_CO2_PER_MB = 0.5
GREEN_HOSTING_DISCOUNT = 0.5

GRAMS_CO2_PER_TREE_YEAR = 6000  # one tree absorbs ~6 kg CO2 per year
GRAMS_CO2_PER_KETTLE = 15
GRAMS_CO2_PER_KM_DRIVEN = 120

# Placeholder: share of sites this page is cleaner than. Not measured.
CLEANER_THAN_PERCENT_DEFAULT = 50


def calculate_carbon(page_weight: int, is_green: bool) -> CarbonEstimate:
    if page_weight < 0:
        raise ValueError("page_weight must be >= 0")

    grams = page_weight / BYTES_PER_MEGABYTE * GRAMS_CO2_PER_MB
    if is_green:
        grams *= GREEN_HOSTING_DISCOUNT

    return CarbonEstimate(
        grams_co2_per_view=round(grams, 2),
        equivalence=Equivalence(
            trees_planted=round(grams / GRAMS_CO2_PER_TREE_YEAR, 5),
            kettles_boiled=round(grams / GRAMS_CO2_PER_KETTLE, 2),
            km_driven=round(grams / GRAMS_CO2_PER_KM_DRIVEN, 3),
        ),
        cleaner_than_percent=CLEANER_THAN_PERCENT_DEFAULT,
    )
