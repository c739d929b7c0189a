import math
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from utils.grid import GridUtils

class GeoPoint(BaseModel):
    """A named point on the globe. Elevation is in meters, negative below sea level."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Degrees N")
    longitude: float = Field(..., description="Degrees E, either 0-360 or +/-180")
    elevation: float = Field(0.0, description="Meters, negative values are water depth")
    name: str = ""

    @classmethod
    def for_lat_lon(cls, latitude: float, longitude: float) -> "GeoPoint":
        return cls(latitude=latitude, longitude=longitude)

    @property
    def adjusted_longitude(self) -> float:
        """Longitude in the +/- 180 degree range."""
        return GridUtils.adjust_longitude(self.longitude)

    @property
    def grid_longitude(self) -> float:
        """Longitude in the 0-360 range used by the wave model grids."""
        return GridUtils.normalize_longitude(self.longitude)

    def component_distance_to(self, other: "GeoPoint") -> Tuple[float, float]:
        """Absolute latitude and longitude deltas in degrees."""
        lat_dist = abs(self.latitude - other.latitude)
        lon_dist = abs(self.grid_longitude - other.grid_longitude)
        # Shortest way around the antimeridian
        lon_dist = min(lon_dist, 360.0 - lon_dist)
        return lat_dist, lon_dist

    def distance_to(self, other: "GeoPoint") -> float:
        """Planar distance in degrees, good enough for grid point comparisons."""
        lat_dist, lon_dist = self.component_distance_to(other)
        return math.hypot(lat_dist, lon_dist)

    def great_circle_distance_to(self, other: "GeoPoint") -> float:
        """Distance in kilometers."""
        return GridUtils.calculate_distance(
            self.latitude, self.adjusted_longitude,
            other.latitude, other.adjusted_longitude
        )

class ModelInfo(BaseModel):
    """Identifying metadata of the model run a forecast came from."""
    model_config = ConfigDict(protected_namespaces=())

    name: str
    description: str = ""
    model_run: Optional[str] = None  # e.g. "20261018 12z"
