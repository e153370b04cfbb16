"""
Distance and geometric calculations on a spherical earth

None of the distance functions validate their inputs. NaN or out-of-range degrees go
straight through the trigonometry and come back out as NaN/inf rather than raising; the
only function here that raises on bad input is create_bounding_box.
"""

__all__ = [
    'cartesian_chord_distance_km', 'circumference_km', 'create_bounding_box',
    'distance_km', 'is_date_line_crossover', 'normalize_dist', 'normalized_dist',
]

import math

import numpy as np

from geokey._const import EARTH_CIRCUMFERENCE_KM, EARTH_RADIUS_KM
from geokey.coordinates import Coordinate
from geokey.structures import BoundingBox
from geokey.utils.logging import warn_once


def _haversine_term(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """The pre-arcsine haversine quantity `a` for two points, in degrees"""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    return (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )


def distance_km(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the great-circle distance in km between two points, using the Haversine
    formula.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        (float) the distance in kilometers
    """
    var1 = _haversine_term(
        coord1.latitude, coord1.longitude, coord2.latitude, coord2.longitude
    )
    return EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(var1))


def normalize_dist(dist_km: float) -> float:
    """
    Convert a distance into its normalized form, sin^2(d / 2R).

    The normalized value orders distances the same way the distances themselves are
    ordered, but only between 0 and half the circumference (pi * R). Past that the
    value folds back down, so it must not be used to compare longer distances.

    Args:
        dist_km:
            A distance, in kilometers

    Returns:
        (float) the normalized distance
    """
    tmp = math.sin(dist_km / 2 / EARTH_RADIUS_KM)
    return tmp * tmp


def normalized_dist(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the normalized distance between two points directly, skipping the
    arcsine and square root of the full haversine distance.

    Equal (up to float rounding) to normalize_dist(distance_km(...)). Use it when
    only the relative ordering of distances matters.

    Args:
        lat1: (float)
            Latitude of the first point, in degrees

        lon1: (float)
            Longitude of the first point, in degrees

        lat2: (float)
            Latitude of the second point, in degrees

        lon2: (float)
            Longitude of the second point, in degrees

    Returns:
        (float) the normalized distance
    """
    return _haversine_term(lat1, lon1, lat2, lon2)


def cartesian_chord_distance_km(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the straight-line (chord) distance in km between two points, through the
    earth rather than along its surface.

    Deprecated: slower than distance_km and kept only to compare against it.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        (float) the chord length in kilometers
    """
    warn_once(
        '%s is deprecated, use distance_km instead. (this warning will not repeat)',
        'cartesian_chord_distance_km'
    )
    diff = np.array(coord1.xyz) - np.array(coord2.xyz)
    return float(EARTH_RADIUS_KM * np.linalg.norm(diff))


def circumference_km(latitude: float) -> float:
    """
    Calculate the length of the circle of constant latitude, in km.

    Args:
        latitude:
            The latitude, in degrees

    Returns:
        (float) the circumference in kilometers
    """
    return EARTH_CIRCUMFERENCE_KM * math.cos(math.radians(latitude))


def is_date_line_crossover(lon1: float, lon2: float) -> bool:
    """
    Test whether the segment between two longitudes crosses the antimeridian.

    Longitudes are compared as given; callers holding values outside [-180, 180]
    must normalize them first.
    """
    return abs(lon1 - lon2) > 180.


def create_bounding_box(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Create a box around a point, extending radius_km to each side.

    The longitude extent is scaled by the circumference at the given latitude, which
    shrinks towards zero at the poles. Close to a pole the longitude edges therefore
    grow very large (or become inf/NaN); no clamping is performed.

    Args:
        lat:
            The latitude of the center point, in degrees

        lon:
            The longitude of the center point, in degrees

        radius_km:
            The distance from the center point to each edge, in kilometers

    Returns:
        BoundingBox

    Raises:
        ValueError: if radius_km is zero or negative
    """
    if radius_km <= 0:
        raise ValueError(
            f'Distance cannot be 0 or negative! {radius_km} lat,lon:{lat},{lon}'
        )

    d_lon = 360 / (circumference_km(lat) / radius_km)

    # Circles of constant longitude all have the same length
    d_lat = 360 / (EARTH_CIRCUMFERENCE_KM / radius_km)

    return BoundingBox(lat + d_lat, lon - d_lon, lat - d_lat, lon + d_lon)
