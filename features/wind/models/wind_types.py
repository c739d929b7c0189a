from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from features.common.models.location_types import GeoPoint, ModelInfo
from features.common.utils.conversions import UnitSystem, UnitConversions

class WindModelRecord(BaseModel):
    """Single time step of wind model output."""
    time: datetime
    wind_speed: float = Field(..., ge=0)
    wind_gust_speed: Optional[float] = Field(None, ge=0, description="None when the model has no gust output")
    wind_direction: float = Field(..., description="Degrees clockwise from true N")

    def change_units(self, old_units: UnitSystem, new_units: UnitSystem) -> None:
        self.wind_speed = UnitConversions.convert_speed(self.wind_speed, old_units, new_units)
        self.wind_gust_speed = UnitConversions.convert_speed(self.wind_gust_speed, old_units, new_units)

class WindForecast(BaseModel):
    """Wind model forecast at a single grid point."""
    location: GeoPoint
    model: ModelInfo
    units: UnitSystem = UnitSystem.METRIC
    forecast_data: List[WindModelRecord] = []

    def change_units(self, new_units: UnitSystem) -> None:
        if self.units == new_units:
            return
        for record in self.forecast_data:
            record.change_units(self.units, new_units)
        self.units = new_units
