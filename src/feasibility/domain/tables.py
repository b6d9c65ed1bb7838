# src/feasibility/domain/tables.py
"""
Static v1 market and cost tables.

Every lookup here is total: unknown keys resolve to a DEFAULT / fallback row
instead of raising, so the estimator always produces a number. Replace the
state baselines with real comps once they exist.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .evaluation import FinishQuality, PropertyType

DEFAULT_KEY = "DEFAULT"


@dataclass(frozen=True)
class MarketBaseline:
    price_per_sqft: float
    days_on_market: int


MARKET_BASELINES: Mapping[str, MarketBaseline] = MappingProxyType({
    "MD": MarketBaseline(price_per_sqft=240, days_on_market=22),
    "VA": MarketBaseline(price_per_sqft=230, days_on_market=24),
    "DC": MarketBaseline(price_per_sqft=420, days_on_market=18),
    "PA": MarketBaseline(price_per_sqft=210, days_on_market=28),
    "DE": MarketBaseline(price_per_sqft=200, days_on_market=27),
    DEFAULT_KEY: MarketBaseline(price_per_sqft=220, days_on_market=30),
})

BUILD_COST_PER_SQFT: Mapping[FinishQuality, float] = MappingProxyType({
    "basic": 120,
    "standard": 165,
    "premium": 230,
    "luxury": 310,
})

REHAB_COST_PER_SQFT: Mapping[FinishQuality, float] = MappingProxyType({
    "basic": 25,     # light cosmetic
    "standard": 45,  # moderate rehab
    "premium": 70,   # heavy rehab
    "luxury": 95,    # high-end / full gut
})

# (strategy, property type) -> share of finished value attributed to land
LAND_RATIOS: Mapping[str, Mapping[PropertyType, float]] = MappingProxyType({
    "flip": MappingProxyType({
        "commercial": 0.22,
        "mixed-use": 0.20,
        "multi-family": 0.18,
        "single-family": 0.16,
    }),
    "ground-up": MappingProxyType({
        "commercial": 0.35,
        "mixed-use": 0.32,
        "multi-family": 0.28,
        "single-family": 0.25,
    }),
    "government": MappingProxyType({
        "commercial": 0.18,
        "mixed-use": 0.17,
        "multi-family": 0.15,
        "single-family": 0.14,
    }),
})
DEFAULT_LAND_RATIO = 0.20

# Purchase discount implied by the finish the buyer plans to reach
CONDITION_DISCOUNT: Mapping[FinishQuality, float] = MappingProxyType({
    "basic": 0.92,
    "standard": 0.88,
    "premium": 0.83,
    "luxury": 0.78,
})

CONDITION_LABELS: Mapping[FinishQuality, str] = MappingProxyType({
    "basic": "Fair (cosmetic updates)",
    "standard": "Average (moderate rehab)",
    "premium": "Poor (heavy rehab)",
    "luxury": "Full gut / high complexity",
})

# Property tax rate in percent of assessed value
STATE_TAX_RATES: Mapping[str, float] = MappingProxyType({
    "MD": 1.1,
    "VA": 1.0,
})
DEFAULT_TAX_RATE = 1.2
ASSESSMENT_RATIO = 0.88

PLACEHOLDER_YEAR_BUILT = 1985


def market_baseline(state: str | None) -> MarketBaseline:
    if not state:
        return MARKET_BASELINES[DEFAULT_KEY]
    return MARKET_BASELINES.get(state.upper(), MARKET_BASELINES[DEFAULT_KEY])


def build_cost_per_sqft(finish_quality: FinishQuality) -> float:
    return BUILD_COST_PER_SQFT[finish_quality]


def rehab_cost_per_sqft(finish_quality: FinishQuality) -> float:
    return REHAB_COST_PER_SQFT[finish_quality]


def land_ratio(strategy: str | None, property_type: PropertyType) -> float:
    by_type = LAND_RATIOS.get(strategy)
    if by_type is None:
        return DEFAULT_LAND_RATIO
    return by_type[property_type]


def condition_discount(finish_quality: FinishQuality) -> float:
    return CONDITION_DISCOUNT[finish_quality]


def condition_label(finish_quality: FinishQuality) -> str:
    return CONDITION_LABELS[finish_quality]


def property_tax_rate(state: str | None) -> float:
    return STATE_TAX_RATES.get((state or "").upper(), DEFAULT_TAX_RATE)
