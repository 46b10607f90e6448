import logging
from typing import Any, Dict, List

import requests
from flask import current_app

logger = logging.getLogger(__name__)

PLACES_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"


class MapsNotConfigured(Exception):
    pass


class MapsLookupError(Exception):
    pass


def find_nearby(lat: float, lng: float, radius: int = 5000) -> List[Dict[str, Any]]:
    """Hospitals near a point, using the Places nearby search.

    Raises:
        MapsNotConfigured: when GOOGLE_MAPS_API_KEY is unset
        MapsLookupError: on network or API errors
    """
    api_key = current_app.config.get("GOOGLE_MAPS_API_KEY")
    if not api_key:
        raise MapsNotConfigured("Google Maps API key is not configured")

    params = {
        "location": f"{lat},{lng}",
        "radius": radius,
        "type": "hospital",
        "key": api_key,
    }
    try:
        resp = requests.get(PLACES_URL, params=params, timeout=current_app.config.get("SMS_TIMEOUT", 15))
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Places lookup failed: %s", e)
        raise MapsLookupError(str(e)) from e

    status = data.get("status")
    if status not in ("OK", "ZERO_RESULTS"):
        raise MapsLookupError(data.get("error_message") or status or "Unknown error")

    places = []
    for place in data.get("results", []):
        loc = (place.get("geometry") or {}).get("location") or {}
        places.append({
            "name": place.get("name"),
            "address": place.get("vicinity"),
            "lat": loc.get("lat"),
            "lng": loc.get("lng"),
            "rating": place.get("rating"),
            "open_now": (place.get("opening_hours") or {}).get("open_now"),
            "place_id": place.get("place_id"),
        })
    return places
