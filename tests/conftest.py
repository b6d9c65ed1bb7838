# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from feasibility.api.http import app, get_geocoder  # ensures imports resolve; run tests from repo root

from .fixtures.geo import StubGeocoder


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def geocoder():
    """Maryland stub wired into the app; tests may swap .state or .error."""
    stub = StubGeocoder(state="MD")
    app.dependency_overrides[get_geocoder] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_geocoder, None)
