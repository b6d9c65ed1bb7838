# src/feasibility/domain/evaluation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PropertyType = Literal["single-family", "multi-family", "commercial", "mixed-use"]
FinishQuality = Literal["basic", "standard", "premium", "luxury"]
MarketTrend = Literal["hot", "moderate", "slow"]

# Known strategies. Anything else is accepted and priced with the fallback rows.
KNOWN_STRATEGIES = ("flip", "ground-up", "government")

MIN_SQUARE_FEET = 300


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DevelopmentOptions(_CamelModel):
    property_type: PropertyType
    square_feet: int | float = Field(..., ge=MIN_SQUARE_FEET)
    units: int | None = None  # multi-family / mixed-use only
    stories: int = Field(default=1, ge=1)
    finish_quality: FinishQuality


class FinancingInputs(_CamelModel):
    """
    Optional caller overrides. Only fields that were actually sent take part in
    the merge with the strategy defaults; an explicit null falls back to the
    hard default for that field.
    """
    enabled: bool | None = None
    loan_to_cost: float | None = None      # 0.8 = 80% LTC
    interest_rate: float | None = None     # 0.105 = 10.5%
    points: float | None = None            # 0.02 = 2 points
    holding_months: float | None = None
    closing_cost_rate: float | None = None  # share of sale price
    down_payment_rate: float | None = None  # accepted, not used by the model


class EvaluationRequest(_CamelModel):
    address: str
    development_options: DevelopmentOptions
    strategy: str | None = None  # unknown or missing -> fallback rows
    financing: FinancingInputs | None = None


@dataclass(frozen=True)
class GeocodeResult:
    formatted_address: str
    lat: float
    lng: float
    state: str | None
    county: str | None
    city: str | None
