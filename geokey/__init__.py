from geokey._version import __version__  # noqa: F401
from geokey._const import (
    EARTH_CIRCUMFERENCE_KM, EARTH_RADIUS_EQUATOR_KM, EARTH_RADIUS_KM
)
from geokey.utils.logging import LOGGER
from geokey.coordinates import Coordinate
from geokey.structures import BoundingBox
from geokey.calc import (
    cartesian_chord_distance_km, circumference_km, create_bounding_box,
    distance_km, is_date_line_crossover, normalize_dist, normalized_dist
)
from geokey.spatial_key import (
    SpatialKeyResolver, bit_position_for, spatial_key_max_dist_km
)


__all__ = [
    'BoundingBox',
    'Coordinate',
    'EARTH_CIRCUMFERENCE_KM',
    'EARTH_RADIUS_EQUATOR_KM',
    'EARTH_RADIUS_KM',
    'SpatialKeyResolver',
    'bit_position_for',
    'cartesian_chord_distance_km',
    'circumference_km',
    'create_bounding_box',
    'distance_km',
    'is_date_line_crossover',
    'normalize_dist',
    'normalized_dist',
    'spatial_key_max_dist_km',
    'LOGGER',
]
