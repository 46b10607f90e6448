import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import requests
from flask import current_app

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Location not available"


@dataclass(frozen=True)
class LocationResult:
    location: str
    resolved: bool
    source: Optional[str] = None


def format_coords(lat: float, lng: float) -> str:
    return f"{lat}, {lng}"


def locate(default: str = DEFAULT_LOCATION, coords: Optional[Tuple[float, float]] = None,
           client_ip: Optional[str] = None) -> LocationResult:
    """Best-effort position lookup.

    Caller-supplied coordinates win. Otherwise, when the caller kept the
    default location, an IP lookup is attempted within GEOLOCATION_TIMEOUT.
    Any failure keeps the default string.
    """
    if coords is not None:
        return LocationResult(format_coords(*coords), True, "client")

    url = current_app.config.get("GEOLOCATION_URL")
    if default != DEFAULT_LOCATION or not url:
        return LocationResult(default, False)

    try:
        params = {"ip": client_ip} if client_ip else None
        resp = requests.get(url, params=params, timeout=current_app.config.get("GEOLOCATION_TIMEOUT", 10))
        resp.raise_for_status()
        data = resp.json()
        lat, lng = data.get("latitude"), data.get("longitude")
        if lat is None or lng is None:
            return LocationResult(default, False)
        return LocationResult(format_coords(float(lat), float(lng)), True, "ip")
    except (requests.RequestException, ValueError, TypeError) as e:
        logger.info("Could not get location: %s", e)
        return LocationResult(default, False)
