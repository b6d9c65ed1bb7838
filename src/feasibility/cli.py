from __future__ import annotations

import json
from typing import Any, Optional

import typer

from feasibility.adapters.geocoding import GeocodingError, make_geocoder
from feasibility.services.estimator import evaluate_payload
from feasibility.services.validation import ValidationError

app = typer.Typer(help="Feasibility estimator (flip / ground-up / government).")


@app.callback()
def main() -> None:
    """Feasibility estimator commands."""


@app.command("evaluate")
def evaluate(
    address: str = typer.Argument(..., help="Postal address to evaluate"),
    square_feet: int = typer.Option(..., "--square-feet", help="Finished square feet (>= 300)"),
    property_type: str = typer.Option(
        "single-family", help="single-family|multi-family|commercial|mixed-use"
    ),
    finish_quality: str = typer.Option("standard", help="basic|standard|premium|luxury"),
    stories: int = typer.Option(1, help="Number of stories"),
    units: Optional[int] = typer.Option(None, help="Units (multi-family / mixed-use)"),
    strategy: str = typer.Option("flip", help="flip|ground-up|government"),
    loan_to_cost: Optional[float] = typer.Option(None, help="Override loan-to-cost, e.g. 0.8"),
    interest_rate: Optional[float] = typer.Option(None, help="Override annual rate, e.g. 0.105"),
    points: Optional[float] = typer.Option(None, help="Override origination points, e.g. 0.02"),
    holding_months: Optional[float] = typer.Option(None, help="Override holding period"),
    closing_cost_rate: Optional[float] = typer.Option(None, help="Override sale closing cost rate"),
    no_financing: bool = typer.Option(False, "--no-financing", help="Evaluate as an all-cash deal"),
) -> None:
    """
    Evaluate one address and print the report as JSON.
    """
    options: dict[str, Any] = {
        "propertyType": property_type,
        "squareFeet": square_feet,
        "stories": stories,
        "finishQuality": finish_quality,
    }
    if units is not None:
        options["units"] = units

    # Only pass what was given so strategy defaults still apply per field.
    overrides = {
        "loanToCost": loan_to_cost,
        "interestRate": interest_rate,
        "points": points,
        "holdingMonths": holding_months,
        "closingCostRate": closing_cost_rate,
    }
    financing: dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
    if no_financing:
        financing["enabled"] = False

    payload: dict[str, Any] = {
        "address": address,
        "developmentOptions": options,
        "strategy": strategy,
    }
    if financing:
        payload["financing"] = financing

    try:
        report = evaluate_payload(payload, make_geocoder())
    except ValidationError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2) from e
    except GeocodingError as e:
        typer.echo(f"geocoding failed: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(report.to_payload(), indent=2))


if __name__ == "__main__":
    app()
