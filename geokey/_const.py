"""
Constants declarations for geokey
"""
import math

# Spherical Earth model (kilometers)
EARTH_RADIUS_KM = 6371.0  # Mean radius
EARTH_RADIUS_EQUATOR_KM = 6378.137  # Equatorial radius, not used by the spherical formulas
EARTH_CIRCUMFERENCE_KM = 2 * math.pi * EARTH_RADIUS_KM

# Spatial key resolution
# 2^16 km is the first power of two above the circumference, so distances scaled by
# this factor keep sub-meter resolution and the half circumference stays within int32
SPATIAL_KEY_PRECISION = 65536
SPATIAL_KEY_LEVELS = 64
