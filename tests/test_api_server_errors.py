# tests/test_api_server_errors.py
from feasibility.adapters.geocoding import GeocodingError

from .fixtures.geo import payload


def test_geocoding_failure_is_generic_500(client, geocoder):
    geocoder.error = GeocodingError("Geocoding failed: ZERO_RESULTS - No message")

    r = client.post("/api/evaluate-property", json=payload())

    assert r.status_code == 500
    # no detail leaks to the caller
    assert r.json() == {"error": "Server error"}
    assert geocoder.calls == ["1 Test Way, Rockville, MD"]


def test_unexpected_exception_is_generic_500(client, geocoder):
    geocoder.error = KeyError("results")

    r = client.post("/api/evaluate-property", json=payload())

    assert r.status_code == 500
    assert r.json() == {"error": "Server error"}
