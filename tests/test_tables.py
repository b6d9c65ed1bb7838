import pytest

from feasibility.domain.tables import (
    BUILD_COST_PER_SQFT,
    MARKET_BASELINES,
    REHAB_COST_PER_SQFT,
    build_cost_per_sqft,
    condition_discount,
    land_ratio,
    market_baseline,
    property_tax_rate,
    rehab_cost_per_sqft,
)

QUALITIES = ["basic", "standard", "premium", "luxury"]


@pytest.mark.parametrize("quality", QUALITIES)
def test_full_build_always_costs_more_than_rehab(quality):
    assert build_cost_per_sqft(quality) > rehab_cost_per_sqft(quality)


def test_cost_tables_cover_every_finish_quality():
    assert set(BUILD_COST_PER_SQFT) == set(QUALITIES)
    assert set(REHAB_COST_PER_SQFT) == set(QUALITIES)


@pytest.mark.parametrize("state", ["TX", "CA", "", None, "Maryland"])
def test_unknown_state_falls_back_to_default(state):
    b = market_baseline(state)
    assert b.price_per_sqft == 220
    assert b.days_on_market == 30


def test_known_states_and_case():
    assert market_baseline("MD").price_per_sqft == 240
    assert market_baseline("dc").price_per_sqft == 420
    assert len(MARKET_BASELINES) == 6


def test_land_ratio_matrix_and_default():
    assert land_ratio("flip", "single-family") == 0.16
    assert land_ratio("flip", "commercial") == 0.22
    assert land_ratio("ground-up", "mixed-use") == 0.32
    assert land_ratio("government", "multi-family") == 0.15
    assert land_ratio("wholesale", "commercial") == 0.20
    assert land_ratio("", "single-family") == 0.20


def test_condition_discount_steps_down_with_finish():
    steps = [condition_discount(q) for q in QUALITIES]
    assert steps == [0.92, 0.88, 0.83, 0.78]


def test_property_tax_rates():
    assert property_tax_rate("MD") == 1.1
    assert property_tax_rate("VA") == 1.0
    assert property_tax_rate("PA") == 1.2
    assert property_tax_rate(None) == 1.2
