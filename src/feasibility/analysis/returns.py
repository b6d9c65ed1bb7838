# src/feasibility/analysis/returns.py
from __future__ import annotations

from dataclasses import dataclass

from feasibility.domain.evaluation import MarketTrend
from feasibility.domain.tables import ASSESSMENT_RATIO, property_tax_rate

from .rounding import money


@dataclass(frozen=True)
class FinancialAnalysis:
    total_investment: int
    estimated_profit: int
    profit_margin: float  # percent of sell price
    roi: float            # percent of equity
    break_even_price: int


@dataclass(frozen=True)
class TaxEstimate:
    annual_property_tax: int
    tax_rate: float  # percent
    assessed_value: int


def analyze_returns(
    *,
    estimated_sell_price: int,
    total_investment: int,
    equity_required: int,
) -> FinancialAnalysis:
    profit = money(estimated_sell_price - total_investment)

    # Both ratios report 0 rather than dividing by a zero base.
    margin = (profit / estimated_sell_price) * 100 if estimated_sell_price > 0 else 0
    roi = (profit / equity_required) * 100 if equity_required > 0 else 0

    return FinancialAnalysis(
        total_investment=total_investment,
        estimated_profit=profit,
        profit_margin=margin,
        roi=roi,
        break_even_price=total_investment,
    )


def market_trend(days_on_market: int) -> MarketTrend:
    if days_on_market <= 21:
        return "hot"
    if days_on_market <= 45:
        return "moderate"
    return "slow"


def estimate_property_tax(estimated_sell_price: int, state: str | None) -> TaxEstimate:
    """Flat state rate on an assessed value; swap for county assessor data later."""
    assessed = money(estimated_sell_price * ASSESSMENT_RATIO)
    rate = property_tax_rate(state)
    return TaxEstimate(
        annual_property_tax=money(assessed * (rate / 100)),
        tax_rate=rate,
        assessed_value=assessed,
    )
