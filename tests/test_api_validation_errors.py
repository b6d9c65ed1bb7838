# tests/test_api_validation_errors.py
import pytest

from .fixtures.geo import payload


@pytest.mark.parametrize("sqft", [0, 120, 299, 299.9, "250", None])
def test_small_square_feet_returns_400_without_geocoding(client, geocoder, sqft):
    r = client.post("/api/evaluate-property", json=payload(developmentOptions={"squareFeet": sqft}))
    assert r.status_code == 400
    assert r.json() == {"error": "Square feet must be at least 300"}
    assert geocoder.calls == []


@pytest.mark.parametrize("address", ["", "   ", None])
def test_blank_address_returns_400(client, geocoder, address):
    r = client.post("/api/evaluate-property", json=payload(address=address))
    assert r.status_code == 400
    assert r.json() == {"error": "Address is required"}
    assert geocoder.calls == []


def test_missing_development_options_reports_square_feet(client, geocoder):
    body = payload()
    del body["developmentOptions"]
    r = client.post("/api/evaluate-property", json=body)
    assert r.status_code == 400
    assert r.json()["error"] == "Square feet must be at least 300"


def test_unknown_finish_quality_is_a_400(client, geocoder):
    r = client.post(
        "/api/evaluate-property",
        json=payload(developmentOptions={"finishQuality": "gold-plated"}),
    )
    assert r.status_code == 400
    assert "finishQuality" in r.json()["error"]
    assert geocoder.calls == []


def test_invalid_json_body_is_a_400(client, geocoder):
    r = client.post(
        "/api/evaluate-property",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid JSON body"}


def test_non_object_body_is_a_400(client, geocoder):
    r = client.post("/api/evaluate-property", json=["1 Test Way"])
    assert r.status_code == 400
