import math
from typing import Tuple
import logging

logger = logging.getLogger(__name__)

class GridUtils:
    @staticmethod
    def normalize_longitude(lon: float) -> float:
        """Convert longitude to model grid range [0, 360)."""
        return lon % 360

    @staticmethod
    def adjust_longitude(lon: float) -> float:
        """Convert longitude to the +/- 180 degree range."""
        return lon - 360.0 if lon >= 180 else lon

    @staticmethod
    def to_radians(degrees: float) -> float:
        """Convert degrees to radians."""
        return degrees * math.pi / 180

    @staticmethod
    def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """
        Calculate the great circle distance between two points.

        Args:
            lat1: Latitude of first point
            lon1: Longitude of first point
            lat2: Latitude of second point
            lon2: Longitude of second point

        Returns:
            Distance in kilometers
        """
        R = 6371  # Earth's radius in km
        d_lat = GridUtils.to_radians(lat2 - lat1)
        d_lon = GridUtils.to_radians(lon2 - lon1)

        a = (math.sin(d_lat / 2) * math.sin(d_lat / 2) +
             math.cos(GridUtils.to_radians(lat1)) *
             math.cos(GridUtils.to_radians(lat2)) *
             math.sin(d_lon / 2) * math.sin(d_lon / 2))

        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return R * c

    @staticmethod
    def find_nearest_grid_point(
        lat: float,
        lon: float,
        bottom_left: Tuple[float, float],
        top_right: Tuple[float, float],
        resolution: float
    ) -> Tuple[float, float]:
        """Snap lat/lon to the nearest point of a regular model grid."""
        lon = GridUtils.normalize_longitude(lon)
        lat_start, lon_start = bottom_left
        lat_end, lon_end = top_right

        lat_points = int(round((lat_end - lat_start) / resolution)) + 1
        lon_points = int(round((lon_end - lon_start) / resolution)) + 1

        # Find nearest indices, clamped to the grid edges
        lat_idx = round((lat - lat_start) / resolution)
        lat_idx = max(0, min(lat_idx, lat_points - 1))

        lon_idx = round((lon - lon_start) / resolution)
        lon_idx = max(0, min(lon_idx, lon_points - 1))

        nearest_lat = lat_start + lat_idx * resolution
        nearest_lon = lon_start + lon_idx * resolution
        return nearest_lat, nearest_lon
