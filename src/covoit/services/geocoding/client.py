"""HTTP client for a Nominatim-compatible geocoding service."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from ...config import settings

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 5


@dataclass(frozen=True, slots=True)
class GeocodeResult:
    name: str
    lat: float
    lng: float


def format_coordinates(lat: float, lng: float) -> str:
    return f"{lat:.6f}, {lng:.6f}"


class GeocodingClient:
    """Best-effort geocoding: failures degrade instead of propagating."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geocoding_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.geocoding_timeout_seconds
        self.user_agent = user_agent or settings.geocoding_user_agent
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": self.user_agent, "Accept-Language": "fr"},
            transport=self._transport,
        )

    def reverse_geocode(self, lat: float, lng: float) -> str:
        """Return a place name for the coordinates, or the raw coordinates on failure."""

        params = {"format": "json", "lat": lat, "lon": lng, "zoom": 14}
        try:
            with self._get_client() as client:
                response = client.get("/reverse", params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Reverse geocoding failed for ({lat}, {lng}): {exc}")
            return format_coordinates(lat, lng)

        address = payload.get("address") or {}
        name = (
            address.get("city")
            or address.get("town")
            or address.get("village")
            or payload.get("display_name")
        )
        return name or format_coordinates(lat, lng)

    def forward_geocode(
        self,
        query: str,
        country_code: str | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[GeocodeResult]:
        """Search places matching the query, restricted to one country. Empty list on failure."""

        if not query.strip():
            return []
        params = {
            "format": "json",
            "q": query,
            "countrycodes": country_code or settings.geocoding_country_code,
            "limit": limit,
        }
        try:
            with self._get_client() as client:
                response = client.get("/search", params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Forward geocoding failed for '{query}': {exc}")
            return []

        results: list[GeocodeResult] = []
        for item in payload if isinstance(payload, list) else []:
            try:
                results.append(
                    GeocodeResult(
                        name=str(item["display_name"]),
                        lat=float(item["lat"]),
                        lng=float(item["lon"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                logger.debug(f"Skipping malformed geocoding result: {exc}")
        return results
