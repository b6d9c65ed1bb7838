from feasibility.analysis.costs import estimate_building_costs, is_flip_scenario, total_project_cost
from feasibility.analysis.pricing import price_property
from feasibility.analysis.rounding import money
from feasibility.domain.evaluation import DevelopmentOptions
from feasibility.domain.tables import market_baseline


def _options(**kw):
    base = dict(property_type="single-family", square_feet=2000, stories=1, finish_quality="standard")
    base.update(kw)
    return DevelopmentOptions(**base)


def test_money_rounds_half_up():
    assert money(0.5) == 1
    assert money(1.5) == 2
    assert money(2.5) == 3
    assert money(-2.5) == -2
    assert money(76800.00000000001) == 76800


def test_money_does_not_round_up_just_below_half():
    # largest double below 0.5; naive floor(n + 0.5) gives 1
    assert money(0.49999999999999994) == 0
    assert money(-0.5) == 0
    assert money(-0.5000000000000001) == -1
    assert money(4646.4) == 4646


def test_maryland_flip_pricing_scenario():
    p = price_property(_options(), "flip", market_baseline("MD"))
    assert p.estimated_sell_price == 480000
    assert p.land_ratio == 0.16
    assert p.land_value == 76800
    assert p.condition_discount == 0.88
    assert p.purchase_price == 354816


def test_unknown_strategy_uses_default_land_ratio():
    p = price_property(_options(), "wholesale", market_baseline("TX"))
    assert p.estimated_sell_price == 440000
    assert p.land_value == 88000


def test_flip_classification_ignores_strategy():
    assert is_flip_scenario(_options()) is True
    assert is_flip_scenario(_options(finish_quality="luxury")) is False
    assert is_flip_scenario(_options(property_type="commercial")) is False


def test_flip_breakdown_uses_rehab_rates():
    c = estimate_building_costs(_options(), is_flip=True)
    assert c.construction == 90000
    assert c.cost_per_sqft == 45
    assert c.architecture == 1800
    assert c.land_preparation == 2700
    assert c.total == (
        c.construction + c.permits_and_fees + c.architecture
        + c.soft_costs + c.contingency + c.land_preparation
    )


def test_ground_up_breakdown_uses_build_rates():
    c = estimate_building_costs(_options(finish_quality="luxury", square_feet=1000), is_flip=False)
    assert c.construction == 310000
    assert c.permits_and_fees == 18600
    assert c.architecture == 15500
    assert c.soft_costs == 21700
    assert c.contingency == 31000
    assert c.land_preparation == 21700
    assert c.total == 418500


def test_total_project_cost_sums_purchase_land_and_build():
    c = estimate_building_costs(_options(), is_flip=True)
    assert total_project_cost(354816, 76800, c) == 546816
