# src/feasibility/analysis/financing.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from feasibility.domain.evaluation import FinancingInputs

from .rounding import clamp, money


@dataclass(frozen=True)
class FinancingTerms:
    enabled: bool
    loan_to_cost: float
    interest_rate: float     # annual, interest-only
    points: float            # origination, share of loan
    holding_months: float
    closing_cost_rate: float  # sale-side, share of sell price


@dataclass(frozen=True)
class FinancingCosts:
    loan_amount: int
    equity_required: int
    monthly_interest_only: float
    interest_total: int
    origination_points: int
    sale_closing_costs: int
    total_investment: int


# Strategy-aware defaults (hard money for flips, construction loans for
# ground-up, subsidised debt for government work).
STRATEGY_DEFAULTS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "flip": MappingProxyType({
        "loan_to_cost": 0.80,
        "interest_rate": 0.12,
        "points": 0.02,
        "holding_months": 6,
        "closing_cost_rate": 0.03,
    }),
    "ground-up": MappingProxyType({
        "loan_to_cost": 0.70,
        "interest_rate": 0.08,
        "points": 0.015,
        "holding_months": 18,
        "closing_cost_rate": 0.025,
    }),
    "government": MappingProxyType({
        "loan_to_cost": 0.60,
        "interest_rate": 0.05,
        "points": 0.01,
        "holding_months": 24,
        "closing_cost_rate": 0.02,
    }),
})

FALLBACK_DEFAULTS: Mapping[str, float] = MappingProxyType({
    "loan_to_cost": 0.75,
    "interest_rate": 0.09,
    "points": 0.02,
    "holding_months": 12,
    "closing_cost_rate": 0.03,
})

# field -> (lo, hi)
BOUNDS: Mapping[str, tuple[float, float]] = MappingProxyType({
    "loan_to_cost": (0.0, 0.95),
    "interest_rate": (0.0, 0.5),
    "points": (0.0, 0.08),
    "holding_months": (1.0, 36.0),
    "closing_cost_rate": (0.0, 0.08),
})

# Used when a caller explicitly nulls a field out.
_NULL_FALLBACKS: Mapping[str, float] = MappingProxyType({
    "loan_to_cost": 0.8,
    "interest_rate": 0.105,
    "points": 0.02,
    "closing_cost_rate": 0.03,
})


def strategy_defaults(strategy: str | None) -> Mapping[str, float]:
    return STRATEGY_DEFAULTS.get(strategy, FALLBACK_DEFAULTS)


def _field(merged: Mapping[str, Any], name: str, null_fallback: float) -> float:
    value = merged.get(name)
    if value is None:
        value = null_fallback
    lo, hi = BOUNDS[name]
    return clamp(float(value), lo, hi)


def resolve_financing_terms(
    strategy: str | None,
    overrides: FinancingInputs | None,
    *,
    is_flip: bool,
) -> FinancingTerms:
    """
    Shallow-merge caller overrides over the strategy defaults, then clamp.

    Only fields the caller actually sent replace a default. Out-of-range
    numbers are clamped to the nearest bound, never rejected.
    """
    merged: dict[str, Any] = {"enabled": True, **strategy_defaults(strategy)}
    if overrides is not None:
        merged.update(overrides.model_dump(exclude_unset=True))

    return FinancingTerms(
        enabled=merged.get("enabled") is not False,
        loan_to_cost=_field(merged, "loan_to_cost", _NULL_FALLBACKS["loan_to_cost"]),
        interest_rate=_field(merged, "interest_rate", _NULL_FALLBACKS["interest_rate"]),
        points=_field(merged, "points", _NULL_FALLBACKS["points"]),
        holding_months=_field(merged, "holding_months", 6 if is_flip else 12),
        closing_cost_rate=_field(merged, "closing_cost_rate", _NULL_FALLBACKS["closing_cost_rate"]),
    )


def compute_financing_costs(
    terms: FinancingTerms,
    *,
    total_project_cost: int,
    estimated_sell_price: int,
) -> FinancingCosts:
    """Interest-only carry over the holding period plus points and sale-side closing."""
    loan_amount = money(total_project_cost * terms.loan_to_cost) if terms.enabled else 0
    equity_required = total_project_cost - loan_amount

    monthly = (loan_amount * terms.interest_rate) / 12 if terms.enabled else 0.0
    interest_total = money(monthly * terms.holding_months)

    origination = money(loan_amount * terms.points) if terms.enabled else 0
    closing = money(estimated_sell_price * terms.closing_cost_rate)

    total_investment = money(total_project_cost + interest_total + origination + closing)

    return FinancingCosts(
        loan_amount=loan_amount,
        equity_required=equity_required,
        monthly_interest_only=monthly,
        interest_total=interest_total,
        origination_points=origination,
        sale_closing_costs=closing,
        total_investment=total_investment,
    )
