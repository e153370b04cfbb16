"""
Resolution of distances to spatial key bit positions

A spatial key interleaves one latitude bit and one longitude bit per halving of the
globe. Each latitude halving shrinks the cell's latitude extent by half, so the deepest
level whose cell still spans a given distance can be read off a table of halving
distances.
"""

__all__ = [
    'DEFAULT_RESOLVER', 'SpatialKeyResolver',
    'bit_position_for', 'spatial_key_max_dist_km',
]

import numpy as np

from geokey._const import (
    EARTH_CIRCUMFERENCE_KM, SPATIAL_KEY_LEVELS, SPATIAL_KEY_PRECISION
)
from geokey.utils.functions import round_half_up_int
from geokey.utils.logging import LOGGER


class SpatialKeyResolver:

    """
    Maps distances to the bit position of a spatial key.

    Holds an ascending table of integer distance thresholds (kilometers scaled by
    `precision`), where each entry is half of the next and the last is half the
    circumference. The table is built on construction and is read-only afterwards,
    so a single resolver can be shared freely between threads.

    Args:
        circumference_km: (float)
            The circumference of the sphere, in kilometers

        precision: (int)
            The factor distances are multiplied by before being compared as integers

        levels: (int)
            The number of halvings held in the table

    """

    def __init__(
        self,
        circumference_km: float = EARTH_CIRCUMFERENCE_KM,
        precision: int = SPATIAL_KEY_PRECISION,
        levels: int = SPATIAL_KEY_LEVELS,
    ):
        if levels < 1:
            raise ValueError(f'A spatial key needs at least one level, got {levels}')

        self.circumference_km = circumference_km
        self.precision = precision
        self.levels = levels
        self._thresholds = self._build_thresholds()

    def __repr__(self):
        return (
            f'<SpatialKeyResolver circumference_km={self.circumference_km}, '
            f'precision={self.precision}, levels={self.levels}>'
        )

    def _build_thresholds(self) -> np.ndarray:
        """Builds the ascending threshold table, smallest distance first"""
        table = np.zeros(self.levels, dtype=np.int64)
        table[-1] = round_half_up_int(self.circumference_km * self.precision) // 2
        for i in range(self.levels - 1, 0, -1):
            table[i - 1] = table[i] // 2

        table.flags.writeable = False
        LOGGER.debug(
            'Built spatial key threshold table: %d levels, largest threshold %d',
            self.levels, table[-1]
        )
        return table

    @property
    def thresholds(self) -> np.ndarray:
        """The read-only threshold table, ascending"""
        return self._thresholds

    def rank(self, dist_int: int) -> int:
        """
        Count the thresholds strictly smaller than a scaled distance.

        Equivalently, the smallest index whose threshold is >= dist_int. An exact
        match resolves to the first matching index.

        Args:
            dist_int:
                A distance already scaled by `precision`

        Returns:
            int
        """
        return int(np.searchsorted(self._thresholds, dist_int, side='left'))

    def bit_position_for(self, dist_km: float) -> int:
        """
        Find the deepest spatial key bit position whose cell is still at least
        dist_km in latitude extent.

        The result counts both the latitude and longitude bit of each level, so it
        runs from 0 (the coarsest, hemisphere-wide cell) up to 2 * (levels - 1).

        Args:
            dist_km:
                A distance, in kilometers

        Returns:
            (int) the bit position. Distances beyond a quarter of the circumference
            resolve to 0; negative distances return -1. NaN also returns -1, rather
            than being rounded to 0 and resolving like a zero distance
        """
        if dist_km > self.circumference_km / 4:
            return 0

        if not dist_km >= 0:
            return -1

        dist_int = round_half_up_int(dist_km * self.precision)
        return (self.levels - 1 - self.rank(dist_int)) * 2

    def spatial_key_max_dist_km(self, bit: int) -> float:
        """
        Calculate the largest distance spanned by a spatial key cell at a given bit
        position, rounded down to the meter.

        Halving the bit truncates toward zero, so the -1 sentinel from
        bit_position_for resolves like bit 0 and -3 gives the full circumference.

        Args:
            bit:
                The bit position, as returned by bit_position_for

        Returns:
            (float) the distance in kilometers

        Raises:
            ValueError: if bit is below -3
        """
        shift = int(bit / 2) + 1
        if shift < 0:
            raise ValueError(f'Bit position cannot be below -3, got {bit}')

        return (int(self.circumference_km * 1000) >> shift) / 1000


DEFAULT_RESOLVER = SpatialKeyResolver()


def bit_position_for(dist_km: float) -> int:
    """Resolve a distance to a spatial key bit position on the default earth model"""
    return DEFAULT_RESOLVER.bit_position_for(dist_km)


def spatial_key_max_dist_km(bit: int) -> float:
    """The largest distance spanned at a spatial key bit position on the default earth model"""
    return DEFAULT_RESOLVER.spatial_key_max_dist_km(bit)
