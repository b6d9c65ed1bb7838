# src/feasibility/analysis/pricing.py
from __future__ import annotations

from dataclasses import dataclass

from feasibility.domain.evaluation import DevelopmentOptions
from feasibility.domain.tables import (
    MarketBaseline,
    condition_discount,
    land_ratio,
)

from .rounding import money


@dataclass(frozen=True)
class Pricing:
    average_price_per_sqft: float
    estimated_sell_price: int
    land_ratio: float
    land_value: int
    condition_discount: float
    purchase_price: int


def price_property(
    options: DevelopmentOptions,
    strategy: str | None,
    market: MarketBaseline,
) -> Pricing:
    """
    v1 land + purchase heuristic.

    Sell price comes straight from the state baseline. Land is a fixed share of
    that value (heavier for commercial / mixed-use). The purchase price is the
    remaining improvement value discounted by the condition implied by the
    target finish.
    """
    sell = money(market.price_per_sqft * options.square_feet)

    ratio = land_ratio(strategy, options.property_type)
    land = money(sell * ratio)

    discount = condition_discount(options.finish_quality)
    purchase = money((sell - land) * discount)

    return Pricing(
        average_price_per_sqft=market.price_per_sqft,
        estimated_sell_price=sell,
        land_ratio=ratio,
        land_value=land,
        condition_discount=discount,
        purchase_price=purchase,
    )
