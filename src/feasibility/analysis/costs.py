# src/feasibility/analysis/costs.py
from __future__ import annotations

from dataclasses import dataclass

from feasibility.domain.evaluation import DevelopmentOptions
from feasibility.domain.tables import build_cost_per_sqft, rehab_cost_per_sqft

from .rounding import money


@dataclass(frozen=True)
class SoftCostRates:
    permits_and_fees: float
    architecture: float
    soft_costs: float
    contingency: float
    land_preparation: float


FLIP_RATES = SoftCostRates(
    permits_and_fees=0.06,
    architecture=0.02,
    soft_costs=0.07,
    contingency=0.10,
    land_preparation=0.03,
)

GROUND_UP_RATES = SoftCostRates(
    permits_and_fees=0.06,
    architecture=0.05,
    soft_costs=0.07,
    contingency=0.10,
    land_preparation=0.07,
)


@dataclass(frozen=True)
class BuildingCosts:
    land_preparation: int
    construction: int
    permits_and_fees: int
    architecture: int
    soft_costs: int
    contingency: int
    total: int
    cost_per_sqft: float


def is_flip_scenario(options: DevelopmentOptions) -> bool:
    # Decided by the asset alone, not by the caller's strategy.
    return options.property_type == "single-family" and options.finish_quality != "luxury"


def estimate_building_costs(options: DevelopmentOptions, *, is_flip: bool) -> BuildingCosts:
    """Flips are priced with rehab cost per sqft, everything else with full build cost."""
    if is_flip:
        per_sqft = rehab_cost_per_sqft(options.finish_quality)
        rates = FLIP_RATES
    else:
        per_sqft = build_cost_per_sqft(options.finish_quality)
        rates = GROUND_UP_RATES

    construction = money(per_sqft * options.square_feet)

    permits_and_fees = money(construction * rates.permits_and_fees)
    architecture = money(construction * rates.architecture)
    soft_costs = money(construction * rates.soft_costs)
    contingency = money(construction * rates.contingency)
    land_preparation = money(construction * rates.land_preparation)

    total = (
        land_preparation
        + construction
        + permits_and_fees
        + architecture
        + soft_costs
        + contingency
    )

    return BuildingCosts(
        land_preparation=land_preparation,
        construction=construction,
        permits_and_fees=permits_and_fees,
        architecture=architecture,
        soft_costs=soft_costs,
        contingency=contingency,
        total=total,
        cost_per_sqft=per_sqft,
    )


def total_project_cost(purchase_price: int, land_value: int, building: BuildingCosts) -> int:
    return money(purchase_price + land_value + building.total)
