"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from functools import cached_property
import math
from typing import List, Tuple, Union


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in degrees.

    Values are stored as given. Unlike a map-facing coordinate type, nothing is wrapped
    or clamped: latitudes outside [-90, 90] and longitudes outside [-180, 180] are
    accepted and simply propagate through the trigonometry of whatever uses them.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    @cached_property
    def xyz(self) -> List[float]:
        """Converts lat/lon to unit sphere coordinates [x,y,z]"""
        r_lat = math.radians(self.latitude)
        r_lon = math.radians(self.longitude)
        return [
            math.cos(r_lat) * math.cos(r_lon),
            math.cos(r_lat) * math.sin(r_lon),
            math.sin(r_lat)
        ]

    def to_float(self) -> Tuple[float, float]:
        """Converts the coordinate to a tuple of (latitude, longitude)"""
        return self.latitude, self.longitude
