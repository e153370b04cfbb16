"""
Value types produced by the geometric calculations
"""

__all__ = ['BoundingBox']

from typing import Tuple

from geokey.coordinates import Coordinate


class BoundingBox:

    """
    A latitude/longitude rectangle, as expressed by its four edges.

    The box is immutable once created. Longitudes are not normalized, so a box built
    around a point near the antimeridian may carry a min_lon below -180 or a max_lon
    above 180.

    Args:
        max_lat: (float)
            The northern edge of the box

        min_lon: (float)
            The western edge of the box

        min_lat: (float)
            The southern edge of the box

        max_lon: (float)
            The eastern edge of the box

    """

    def __init__(
        self,
        max_lat: float,
        min_lon: float,
        min_lat: float,
        max_lon: float,
    ):
        self._max_lat = max_lat
        self._min_lon = min_lon
        self._min_lat = min_lat
        self._max_lon = max_lon

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return False

        return self.bounds == other.bounds

    def __hash__(self):
        return hash(self.bounds)

    def __repr__(self):
        return (
            f'<BoundingBox max_lat={self.max_lat}, min_lon={self.min_lon}, '
            f'min_lat={self.min_lat}, max_lon={self.max_lon}>'
        )

    @property
    def max_lat(self) -> float:
        return self._max_lat

    @property
    def min_lon(self) -> float:
        return self._min_lon

    @property
    def min_lat(self) -> float:
        return self._min_lat

    @property
    def max_lon(self) -> float:
        return self._max_lon

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """The box edges as (min_lon, min_lat, max_lon, max_lat)"""
        return self.min_lon, self.min_lat, self.max_lon, self.max_lat

    @property
    def nw_bound(self) -> Coordinate:
        """The Northwest corner of the box"""
        return Coordinate(self.max_lat, self.min_lon)

    @property
    def se_bound(self) -> Coordinate:
        """The Southeast corner of the box"""
        return Coordinate(self.min_lat, self.max_lon)

    def contains(self, coord: Coordinate) -> bool:
        """
        Test whether a coordinate lies inside the box (edges inclusive).

        This is a plain rectangle test on the stored edges; a box whose longitudes wrap
        past +/-180 will not match the wrapped-around portion.

        Args:
            coord:
                A Coordinate

        Returns:
            bool
        """
        return (
            self.min_lat <= coord.latitude <= self.max_lat
            and self.min_lon <= coord.longitude <= self.max_lon
        )
