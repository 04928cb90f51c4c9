import math
from typing import Iterable, List, TypeVar

T = TypeVar("T")

EARTH_RADIUS_KM = 6371
MILES_PER_METER = 0.000621371192
NEARBY_RADIUS_MILES = 10.0


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle (haversine) distance between two points, in statute miles."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    # rounding can push near-antipodal pairs just past 1.0
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * 1000 * c * MILES_PER_METER


def find_nearby(
    latitude: float,
    longitude: float,
    candidates: Iterable[T],
    radius_miles: float = NEARBY_RADIUS_MILES,
) -> List[T]:
    """
    Keep the candidates strictly closer than radius_miles to the query point.
    Candidates need `latitude` and `longitude` attributes; source order is kept.
    """
    return [
        c for c in candidates
        if distance_miles(latitude, longitude, c.latitude, c.longitude) < radius_miles
    ]
