"""
Great-circle distance helpers
"""

import math
from typing import Sequence

import numpy as np

EARTH_RADIUS_KM = 6371.0

def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance in kilometres between two (lat, lon) points in degrees
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c

def distances_km(
    lat: float,
    lon: float,
    lats: Sequence[float],
    lons: Sequence[float]
) -> np.ndarray:
    """
    Vectorised haversine from one point to many points
    """
    lat1 = np.radians(lat)
    lat2 = np.radians(np.asarray(lats, dtype=float))
    d_lat = lat2 - lat1
    d_lon = np.radians(np.asarray(lons, dtype=float) - lon)

    a = np.sin(d_lat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(d_lon / 2) ** 2
    # Clip guards sqrt(1 - a) against float drift above 1
    a = np.clip(a, 0.0, 1.0)
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
