# src/feasibility/adapters/geocoding.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from feasibility.adapters.config import config
from feasibility.adapters.logging_utils import get_logger, log_context
from feasibility.domain.evaluation import GeocodeResult

logger = get_logger(__name__)


class GeocodingError(RuntimeError):
    pass


def _component(components: List[Dict[str, Any]], kind: str, name: str = "long_name") -> Optional[str]:
    for c in components:
        if kind in (c.get("types") or []):
            return c.get(name) or None
    return None


@dataclass(frozen=True)
class GoogleGeocodingClient:
    """
    Google Geocoding client.

    One GET per address, no retries: a failure aborts the evaluation and the
    caller resubmits. ``timeout_s=None`` leaves timeouts to the transport.
    """
    api_key: Optional[str]
    base_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    timeout_s: Optional[float] = None

    def geocode(self, address: str) -> GeocodeResult:
        if not self.api_key:
            raise GeocodingError("Missing GOOGLE_MAPS_SERVER_KEY")

        logger.debug("geocode_request", extra=log_context(address=address))

        try:
            resp = requests.get(
                self.base_url,
                params={"address": address, "key": self.api_key},
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise GeocodingError(f"Google API unreachable: {e}") from e

        if not resp.ok:
            raise GeocodingError(f"Google API HTTP error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise GeocodingError("Google API returned a non-JSON body") from e

        status = data.get("status")
        if status != "OK":
            raise GeocodingError(
                f"Geocoding failed: {status} - {data.get('error_message') or 'No message'}"
            )

        results = data.get("results") or []
        if not results:
            raise GeocodingError("No geocoding results found")

        return self._parse_result(results[0])

    @staticmethod
    def _parse_result(result: Dict[str, Any]) -> GeocodeResult:
        components = result.get("address_components") or []
        location = (result.get("geometry") or {}).get("location") or {}

        try:
            lat = float(location["lat"])
            lng = float(location["lng"])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError("Geocoding result has no usable location") from e

        return GeocodeResult(
            formatted_address=result.get("formatted_address", ""),
            lat=lat,
            lng=lng,
            # short_name is the two-letter code ("MD") that keys the baselines
            state=_component(components, "administrative_area_level_1", "short_name"),
            county=_component(components, "administrative_area_level_2"),
            city=_component(components, "locality"),
        )


def make_geocoder() -> GoogleGeocodingClient:
    return GoogleGeocodingClient(
        api_key=config.GOOGLE_MAPS_SERVER_KEY,
        base_url=config.GEOCODE_URL,
        timeout_s=config.GEOCODE_TIMEOUT_S,
    )
