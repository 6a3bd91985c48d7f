"""
Nominatim reverse geocoding client.

One blocking GET per coordinate pair, no caching and no retries: a failed
lookup raises a GeocodingError subclass and the caller decides what to do
with the row.
"""
import re
import logging
from typing import Any, Dict, Optional

import requests

from src.geocoding.exceptions import HttpError, InvalidCoordinates, RateLimited, TransportError

# Constants
NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org/reverse"
USER_AGENT = "OSMReverseGeocoder/1.0"
REQUEST_TIMEOUT = 10
ZOOM_LEVEL = 18

# Leading numeric prefix, e.g. "41.2N" -> "41.2"
_FLOAT_PREFIX = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?")

# Get logger
logger = logging.getLogger(__name__)


def to_float(value: Any) -> float:
    """
    Best effort numeric coercion: parse the leading number of the value and
    fall back to 0.0 when there is none.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return 0.0
    return float(match.group(0))


def valid_coordinates(latitude: float, longitude: float) -> bool:
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def _first_present(addr, *keys):
    for key in keys:
        if addr.get(key) is not None:
            return addr[key]
    return None


def parse_address(data: Dict[str, Any]) -> str:
    """
    Turn a Nominatim reverse response into a single address line.

    The precomposed display_name wins; otherwise the line is assembled from
    the structured address parts.
    """
    if data.get("error") is not None:
        return "No address found"

    if data.get("display_name") is not None:
        return str(data["display_name"])

    addr = data.get("address")
    if isinstance(addr, dict):
        components = []

        house_number, road = addr.get("house_number"), addr.get("road")
        if house_number is not None or road is not None:
            components.append(f"{house_number or ''} {road or ''}".strip())

        city = _first_present(addr, "city", "town", "village", "hamlet")
        if city is not None:
            components.append(city)

        state = _first_present(addr, "state", "province")
        if state is not None:
            components.append(state)

        if addr.get("postcode") is not None:
            components.append(addr["postcode"])

        if addr.get("country") is not None:
            components.append(addr["country"])

        if components:
            return ", ".join(str(c) for c in components)

    return "Address not found"


def get_address_from_coordinates(latitude: float, longitude: float, timeout: Optional[float] = REQUEST_TIMEOUT) -> str:
    """
    Resolve a coordinate pair to an address via Nominatim.

    Raises:
        InvalidCoordinates: coordinates out of range, no request is sent.
        RateLimited: Nominatim answered 429.
        HttpError: any other non-200 status.
        TransportError: network failure, timeout or a body that is not JSON.
    """
    if not valid_coordinates(latitude, longitude):
        raise InvalidCoordinates(latitude, longitude)

    params = {
        "format": "json",
        "lat": latitude,
        "lon": longitude,
        "zoom": ZOOM_LEVEL,
        "addressdetails": 1
    }

    headers = {
        "User-Agent": USER_AGENT
    }

    try:
        response = requests.get(
            NOMINATIM_BASE_URL,
            params=params,
            headers=headers,
            timeout=timeout
        )
    except requests.RequestException as e:
        logger.debug(f"Network error for coordinates ({latitude}, {longitude}): {e}")
        raise TransportError(str(e)) from e

    if response.status_code == 429:
        raise RateLimited()
    if response.status_code != 200:
        raise HttpError(response.status_code, response.reason)

    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise TransportError(f"Unexpected response type: {type(data).__name__}")

    address = parse_address(data)
    logger.debug(f"Geocoded coordinates ({latitude}, {longitude})")
    return address
