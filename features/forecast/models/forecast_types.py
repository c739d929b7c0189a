from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from features.common.models.location_types import GeoPoint, ModelInfo
from features.common.utils.conversions import UnitSystem, UnitConversions
from features.waves.models.wave_types import Swell, WaveForecast
from features.wind.models.wind_types import WindForecast

# Gust speed reported when only the wave model's surface wind is available
GUST_UNAVAILABLE = -1.0

class SurfForecastItem(BaseModel):
    """Wind and ranked swell for one forecast time step."""
    time: datetime
    wind_speed: float
    wind_gust_speed: float = Field(GUST_UNAVAILABLE, description="-1 when no gust data is available")
    wind_direction: float
    wind_compass_direction: str

    primary_swell_component: Swell
    secondary_swell_component: Swell
    tertiary_swell_component: Swell

    minimum_breaking_height: float
    maximum_breaking_height: float

    def change_units(self, old_units: UnitSystem, new_units: UnitSystem) -> None:
        if old_units == new_units:
            return

        self.wind_speed = UnitConversions.convert_speed(self.wind_speed, old_units, new_units)
        if self.wind_gust_speed != GUST_UNAVAILABLE:
            self.wind_gust_speed = UnitConversions.convert_speed(self.wind_gust_speed, old_units, new_units)

        for swell in (self.primary_swell_component, self.secondary_swell_component, self.tertiary_swell_component):
            swell.change_units(old_units, new_units)

        self.minimum_breaking_height = UnitConversions.convert_length(self.minimum_breaking_height, old_units, new_units)
        self.maximum_breaking_height = UnitConversions.convert_length(self.maximum_breaking_height, old_units, new_units)

class SurfForecast(BaseModel):
    """Human readable surf forecast for a beach."""
    location: GeoPoint
    beach_angle: float = Field(..., description="Direction the beach faces, degrees")
    beach_slope: float = Field(..., description="Nearshore gradient, rise over run")
    units: UnitSystem = UnitSystem.METRIC
    forecast_data: List[SurfForecastItem] = []

    wave_model: ModelInfo
    wave_model_location: GeoPoint
    wind_model: Optional[ModelInfo] = None
    wind_model_location: Optional[GeoPoint] = None

    def change_units(self, new_units: UnitSystem) -> None:
        """Convert every forecast item in place."""
        if self.units == new_units:
            return
        for item in self.forecast_data:
            item.change_units(self.units, new_units)
        self.units = new_units

    def to_json(self) -> str:
        return self.model_dump_json(indent=4)

    def export_as_json(self, filename: Union[str, Path]) -> None:
        Path(filename).write_text(self.to_json())

class SurfForecastRequest(BaseModel):
    """Payload for building a surf forecast from already fetched model data."""
    location: GeoPoint
    beach_angle: float
    beach_slope: float
    wave_forecast: WaveForecast
    wind_forecast: Optional[WindForecast] = None
    units: UnitSystem = UnitSystem.METRIC
