from enum import Enum
from typing import Optional, Tuple

from features.common.models.location_types import GeoPoint, ModelInfo
from utils.grid import GridUtils

class WaveWatchModel(Enum):
    """WAVEWATCH III multi-grid models: (name, description, bottom left, top right, resolution deg, time resolution days)."""
    EAST_COAST = (
        "multi_1.at_10m",
        "Multi-grid wave model: US East Coast 10 arc-min grid",
        (0.00, 260.00), (55.00011, 310.00011), 0.167, 0.125
    )
    WEST_COAST = (
        "multi_1.wc_10m",
        "Multi-grid wave model: US West Coast 10 arc-min grid",
        (25.00, 210.00), (50.00005, 250.00008), 0.167, 0.125
    )
    PACIFIC_ISLANDS = (
        "multi_1.ep_10m",
        "Multi-grid wave model: Pacific Islands (including Hawaii) 10 arc-min grid",
        (-20.00, 130.00), (30.0001, 215.00017), 0.167, 0.125
    )
    ALASKA = (
        "multi_1.ak_10m",
        "Multi-grid wave model: Alaskan 10 arc-min grid",
        (44.00, 165.00), (75.00008, 234.00008), 0.167, 0.125
    )
    GLOBAL = (
        "multi_1.glo_30m",
        "Multi-grid wave model: Global 30 arc-min grid",
        (-77.5, 0.00), (77.5, 359.5), 0.5, 0.125
    )

    def __init__(
        self,
        model_name: str,
        description: str,
        bottom_left: Tuple[float, float],
        top_right: Tuple[float, float],
        location_resolution: float,
        time_resolution: float
    ):
        self.model_name = model_name
        self.description = description
        self.bottom_left = bottom_left
        self.top_right = top_right
        self.location_resolution = location_resolution
        self.time_resolution = time_resolution

    def contains_location(self, location: GeoPoint) -> bool:
        """True when the point lies strictly inside the model grid."""
        lat_min, lon_min = self.bottom_left
        lat_max, lon_max = self.top_right
        lon = location.grid_longitude
        return lat_min < location.latitude < lat_max and lon_min < lon < lon_max

    def nearest_grid_point(self, location: GeoPoint) -> GeoPoint:
        lat, lon = GridUtils.find_nearest_grid_point(
            location.latitude,
            location.longitude,
            self.bottom_left,
            self.top_right,
            self.location_resolution
        )
        return GeoPoint(latitude=lat, longitude=lon, elevation=location.elevation, name=location.name)

    def info(self, model_run: Optional[str] = None) -> ModelInfo:
        return ModelInfo(name=self.model_name, description=self.description, model_run=model_run)

    @classmethod
    def for_location(cls, location: GeoPoint) -> Optional["WaveWatchModel"]:
        """Highest resolution model covering the location."""
        for model in cls:
            if model is not cls.GLOBAL and model.contains_location(location):
                return model
        return cls.GLOBAL if cls.GLOBAL.contains_location(location) else None
