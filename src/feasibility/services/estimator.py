from __future__ import annotations

from typing import Any

from feasibility.adapters.logging_utils import get_logger, log_context
from feasibility.analysis.costs import (
    estimate_building_costs,
    is_flip_scenario,
    total_project_cost,
)
from feasibility.analysis.financing import compute_financing_costs, resolve_financing_terms
from feasibility.analysis.pricing import price_property
from feasibility.analysis.returns import analyze_returns, estimate_property_tax, market_trend
from feasibility.domain.evaluation import EvaluationRequest, GeocodeResult
from feasibility.domain.ports import Geocoder
from feasibility.domain.report import (
    BuildingCostsOut,
    Coordinates,
    EvaluationReport,
    ExistingProperty,
    FinancialAnalysisOut,
    MarketAnalysis,
    TaxInfo,
    Zoning,
)
from feasibility.domain.rules import apply_rules
from feasibility.domain.tables import (
    PLACEHOLDER_YEAR_BUILT,
    condition_label,
    market_baseline,
)
from feasibility.services.validation import validate_and_prepare_payload

logger = get_logger(__name__)


def build_report(request: EvaluationRequest, geo: GeocodeResult) -> EvaluationReport:
    """
    Pure part of the pipeline: everything after the address is resolved.

    Same request + same geocode result always gives the same report.
    """
    options = request.development_options
    strategy = request.strategy

    # --- Market baseline (unknown state -> DEFAULT row) ---
    market = market_baseline(geo.state)

    # --- Land + purchase price ---
    pricing = price_property(options, strategy, market)

    # --- Construction / rehab ---
    is_flip = is_flip_scenario(options)
    building = estimate_building_costs(options, is_flip=is_flip)
    project_cost = total_project_cost(pricing.purchase_price, pricing.land_value, building)

    # --- Financing ---
    terms = resolve_financing_terms(strategy, request.financing, is_flip=is_flip)
    financing = compute_financing_costs(
        terms,
        total_project_cost=project_cost,
        estimated_sell_price=pricing.estimated_sell_price,
    )

    # --- Returns, tax, advice ---
    returns = analyze_returns(
        estimated_sell_price=pricing.estimated_sell_price,
        total_investment=financing.total_investment,
        equity_required=financing.equity_required,
    )
    tax = estimate_property_tax(pricing.estimated_sell_price, geo.state)
    advice = apply_rules(
        roi=returns.roi,
        estimated_profit=returns.estimated_profit,
        holding_months=terms.holding_months,
        finish_quality=options.finish_quality,
        is_flip=is_flip,
    )

    existing = None
    if is_flip:
        existing = ExistingProperty(
            year_built=PLACEHOLDER_YEAR_BUILT,
            square_feet=options.square_feet,
            condition=condition_label(options.finish_quality),
            estimated_value=pricing.purchase_price,
        )

    return EvaluationReport(
        address=request.address,
        formatted_address=geo.formatted_address,
        coordinates=Coordinates(lat=geo.lat, lng=geo.lng),
        zoning=Zoning(allowed_uses=[options.property_type]),
        land_value=pricing.land_value,
        existing_property=existing,
        building_costs=BuildingCostsOut(
            land_preparation=building.land_preparation,
            construction=building.construction,
            permits_and_fees=building.permits_and_fees,
            architecture=building.architecture,
            soft_costs=building.soft_costs,
            contingency=building.contingency,
            total=building.total,
            cost_per_sqft=building.cost_per_sqft,
        ),
        market_analysis=MarketAnalysis(
            average_price_per_sqft=pricing.average_price_per_sqft,
            estimated_sell_price=pricing.estimated_sell_price,
            days_on_market=market.days_on_market,
            market_trend=market_trend(market.days_on_market),
        ),
        financial_analysis=FinancialAnalysisOut(
            total_investment=returns.total_investment,
            estimated_profit=returns.estimated_profit,
            profit_margin=returns.profit_margin,
            roi=returns.roi,
            break_even_price=returns.break_even_price,
        ),
        tax_info=TaxInfo(
            annual_property_tax=tax.annual_property_tax,
            tax_rate=tax.tax_rate,
            assessed_value=tax.assessed_value,
        ),
        recommendations=advice.recommendations,
        risks=advice.risks,
    )


def evaluate_property(request: EvaluationRequest, geocoder: Geocoder) -> EvaluationReport:
    # The geocoder is the only I/O; nothing downstream runs until it returns.
    geo = geocoder.geocode(request.address)
    report = build_report(request, geo)

    logger.info(
        "evaluation_completed",
        extra=log_context(
            state=geo.state,
            strategy=request.strategy,
            property_type=request.development_options.property_type,
            is_flip=report.existing_property is not None,
            estimated_profit=report.financial_analysis.estimated_profit,
        ),
    )
    return report


def evaluate_payload(raw_payload: Any, geocoder: Geocoder) -> EvaluationReport:
    """Validate a raw JSON payload, then evaluate it. Raises ValidationError first."""
    request = validate_and_prepare_payload(raw_payload)
    return evaluate_property(request, geocoder)
