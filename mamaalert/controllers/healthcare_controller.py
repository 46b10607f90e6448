from mamaalert.services.healthcare_service import find_nearby, MapsNotConfigured, MapsLookupError
from mamaalert.utils.http import ok, error, arg_float, arg_int


def nearby_handler():
    lat, lng = arg_float("lat"), arg_float("lng")
    if lat is None or lng is None:
        return error("VALIDATION_ERROR", "lat and lng are required", 400)
    radius = arg_int("radius", 5000, min_value=500, max_value=50000)

    try:
        places = find_nearby(lat, lng, radius)
    except MapsNotConfigured as e:
        return error("CONFIG_ERROR", str(e), 503)
    except MapsLookupError as e:
        return error("UPSTREAM_ERROR", f"Could not load nearby healthcare centers: {e}", 502)
    return ok({"items": places})
