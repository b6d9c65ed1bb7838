# src/feasibility/domain/ports.py
from __future__ import annotations

from typing import Protocol

from .evaluation import GeocodeResult


# ----------------------------
# Geocoding (address -> location)
# ----------------------------

class Geocoder(Protocol):
    def geocode(self, address: str) -> GeocodeResult:
        """Resolve one address or raise GeocodingError. Single attempt."""
        ...
