# tests/fixtures/geo.py

from feasibility.domain.evaluation import EvaluationRequest, GeocodeResult


class StubGeocoder:
    """Deterministic geocoder that records every address it was asked for."""

    def __init__(self, state="MD", error=None):
        self.state = state
        self.error = error
        self.calls = []

    def geocode(self, address):
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        return GeocodeResult(
            formatted_address=f"{address}, USA",
            lat=39.0,
            lng=-77.1,
            state=self.state,
            county="Montgomery County",
            city="Rockville",
        )


def md_geo(state="MD") -> GeocodeResult:
    return GeocodeResult(
        formatted_address="1 Test Way, Rockville, MD 20850, USA",
        lat=39.08,
        lng=-77.15,
        state=state,
        county="Montgomery County",
        city="Rockville",
    )


def payload(**overrides) -> dict:
    """Flip / single-family / standard / 2,000 sqft unless overridden."""
    options = {
        "propertyType": "single-family",
        "squareFeet": 2000,
        "stories": 2,
        "finishQuality": "standard",
    }
    options.update(overrides.pop("developmentOptions", {}))
    body = {
        "address": "1 Test Way, Rockville, MD",
        "developmentOptions": options,
        "strategy": "flip",
    }
    body.update(overrides)
    return body


def request(**overrides) -> EvaluationRequest:
    return EvaluationRequest.model_validate(payload(**overrides))
