from datetime import datetime
from typing import Optional, List, Tuple
from pydantic import BaseModel, Field, model_validator

from features.common.models.location_types import GeoPoint, ModelInfo
from features.common.utils.compass import degree_to_direction
from features.common.utils.conversions import UnitSystem, UnitConversions
from features.waves.services.breaking import estimate_breaking_heights

class Swell(BaseModel):
    """A single directional wave train."""
    wave_height: float = Field(0.0, ge=0, description="Significant height of the swell")
    period: float = Field(0.0, ge=0, description="Mean period in seconds")
    direction: float = Field(0.0, description="Degrees the swell is coming from")
    compass_direction: str = ""

    @model_validator(mode="after")
    def fill_compass_direction(self) -> "Swell":
        if not self.compass_direction:
            self.compass_direction = degree_to_direction(self.direction)
        return self

    def breaking_wave_heights(self, beach_angle: float, elevation: float, beach_slope: float) -> Tuple[float, float]:
        """Estimated (min, max) breaking height in meters. The swell must be metric."""
        return estimate_breaking_heights(
            self.wave_height,
            self.period,
            self.direction,
            beach_angle,
            elevation,
            beach_slope
        )

    def change_units(self, old_units: UnitSystem, new_units: UnitSystem) -> None:
        self.wave_height = UnitConversions.convert_length(self.wave_height, old_units, new_units)

class WaveModelRecord(BaseModel):
    """One time step of wave model output at a grid point."""
    time: datetime
    significant_wave_height: Optional[float] = Field(None, ge=0)

    primary_swell_wave_height: float = Field(0.0, ge=0)
    primary_swell_period: float = Field(0.0, ge=0)
    primary_swell_direction: float = 0.0

    secondary_swell_wave_height: float = Field(0.0, ge=0)
    secondary_swell_period: float = Field(0.0, ge=0)
    secondary_swell_direction: float = 0.0

    wind_swell_wave_height: float = Field(0.0, ge=0)
    wind_swell_period: float = Field(0.0, ge=0)
    wind_swell_direction: float = 0.0

    surface_wind_speed: float = Field(0.0, ge=0)
    surface_wind_direction: float = 0.0

    def swells(self) -> List[Swell]:
        """Primary, secondary and wind swell in declared order."""
        return [
            Swell(
                wave_height=self.primary_swell_wave_height,
                period=self.primary_swell_period,
                direction=self.primary_swell_direction
            ),
            Swell(
                wave_height=self.secondary_swell_wave_height,
                period=self.secondary_swell_period,
                direction=self.secondary_swell_direction
            ),
            Swell(
                wave_height=self.wind_swell_wave_height,
                period=self.wind_swell_period,
                direction=self.wind_swell_direction
            ),
        ]

    def change_units(self, old_units: UnitSystem, new_units: UnitSystem) -> None:
        def length(value):
            return UnitConversions.convert_length(value, old_units, new_units)

        self.significant_wave_height = length(self.significant_wave_height)
        self.primary_swell_wave_height = length(self.primary_swell_wave_height)
        self.secondary_swell_wave_height = length(self.secondary_swell_wave_height)
        self.wind_swell_wave_height = length(self.wind_swell_wave_height)
        self.surface_wind_speed = UnitConversions.convert_speed(self.surface_wind_speed, old_units, new_units)

class WaveForecast(BaseModel):
    """Wave model forecast at a single grid point."""
    location: GeoPoint = Field(..., description="Grid point, elevation is the signed water depth in meters")
    model: ModelInfo
    units: UnitSystem = UnitSystem.METRIC
    forecast_data: List[WaveModelRecord] = []

    def change_units(self, new_units: UnitSystem) -> None:
        """Convert every record in place."""
        if self.units == new_units:
            return
        for record in self.forecast_data:
            record.change_units(self.units, new_units)
        self.units = new_units
