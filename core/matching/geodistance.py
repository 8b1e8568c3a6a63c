#!/usr/bin/env python3
"""
Geodistance - great-circle distance between coordinates.

Uses the haversine formula on a spherical Earth.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0  # mean radius


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in degrees."""
    lat: float
    lng: float


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance between two coordinates.

    Args:
        a: Origin coordinate
        b: Destination coordinate

    Returns:
        Distance in kilometres (symmetric, 0.0 when a == b)
    """
    d_lat = math.radians(abs(b.lat - a.lat))
    d_lng = math.radians(abs(b.lng - a.lng))

    lat_a = math.radians(a.lat)
    lat_b = math.radians(b.lat)

    h = (
        math.sin(d_lat / 2) ** 2 +
        math.cos(lat_a) * math.cos(lat_b) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))

    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def is_within_radius(origin: Coordinate, destination: Coordinate, max_distance_km: float) -> bool:
    """Check whether destination lies within max_distance_km of origin.

    Non-finite or non-positive radii never contain anything.
    """
    if not math.isfinite(max_distance_km) or max_distance_km <= 0:
        return False

    return distance_km(origin, destination) <= max_distance_km
