# src/feasibility/domain/report.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .evaluation import MarketTrend, PropertyType


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinates(_ReportModel):
    lat: float
    lng: float


class Zoning(_ReportModel):
    code: str = "UNKNOWN"
    description: str = "Zoning not yet integrated (v1)."
    allowed_uses: list[PropertyType] = Field(default_factory=list)


class ExistingProperty(_ReportModel):
    year_built: int
    square_feet: int | float
    condition: str
    estimated_value: int


class BuildingCostsOut(_ReportModel):
    land_preparation: int
    construction: int
    permits_and_fees: int
    architecture: int
    soft_costs: int
    contingency: int
    total: int
    cost_per_sqft: float = Field(..., alias="costPerSqFt")


class MarketAnalysis(_ReportModel):
    average_price_per_sqft: float = Field(..., alias="averagePricePerSqFt")
    estimated_sell_price: int
    days_on_market: int
    market_trend: MarketTrend
    comparables: list[dict[str, Any]] = Field(default_factory=list)  # no comps in v1


class FinancialAnalysisOut(_ReportModel):
    total_investment: int
    estimated_profit: int
    profit_margin: float
    roi: float
    break_even_price: int


class TaxInfo(_ReportModel):
    annual_property_tax: int
    tax_rate: float
    assessed_value: int


class EvaluationReport(_ReportModel):
    """
    Fixed-shape feasibility report.

    ``existing_property`` is only present for flip scenarios; serialize with
    ``to_payload()`` so it drops out of the JSON entirely otherwise.
    """
    address: str
    formatted_address: str
    coordinates: Coordinates
    zoning: Zoning
    land_value: int
    existing_property: ExistingProperty | None = None
    building_costs: BuildingCostsOut
    market_analysis: MarketAnalysis
    financial_analysis: FinancialAnalysisOut
    tax_info: TaxInfo
    recommendations: list[str]
    risks: list[str]

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
