from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from core.config import settings
from features.common.models.location_types import GeoPoint
from features.common.utils.conversions import UnitSystem, UnitConversions

class BuoyItem(BaseModel):
    """
    Everything a buoy can report in the latest observation, standard
    meteorological or detailed wave data reports. None means the field has
    not been reported, which is different from a reported zero.

    See https://www.ndbc.noaa.gov/measdes.shtml for field descriptions.
    """
    time: datetime

    # Wind
    wind_direction: Optional[float] = None  # degrees clockwise from true N
    wind_speed: Optional[float] = None
    wind_gust: Optional[float] = None

    # Waves
    significant_wave_height: Optional[float] = None
    dominant_wave_period: Optional[float] = None
    average_period: Optional[float] = None
    dominant_wave_direction: Optional[float] = None
    mean_wave_direction: Optional[float] = None
    swell_wave_height: Optional[float] = None
    swell_wave_period: Optional[float] = None
    swell_wave_direction: Optional[str] = None  # compass point, e.g. "SE"
    wind_swell_wave_height: Optional[float] = None
    wind_swell_wave_period: Optional[float] = None
    wind_swell_direction: Optional[str] = None
    steepness: Optional[str] = None  # SWELL, AVERAGE, STEEP, VERY_STEEP

    # Meteorology
    pressure: Optional[float] = None
    air_temperature: Optional[float] = None
    water_temperature: Optional[float] = None
    dewpoint_temperature: Optional[float] = None
    visibility: Optional[float] = None  # nautical miles
    pressure_tendency: Optional[float] = None
    water_level: Optional[float] = None  # feet above/below MLLW

    def change_units(self, old_units: UnitSystem, new_units: UnitSystem) -> None:
        if old_units == new_units:
            return

        for field in ("wind_speed", "wind_gust"):
            setattr(self, field, UnitConversions.convert_speed(getattr(self, field), old_units, new_units))

        for field in ("significant_wave_height", "swell_wave_height", "wind_swell_wave_height"):
            setattr(self, field, UnitConversions.convert_length(getattr(self, field), old_units, new_units))

        for field in ("air_temperature", "water_temperature", "dewpoint_temperature"):
            setattr(self, field, UnitConversions.convert_temperature(getattr(self, field), old_units, new_units))

        self.pressure = UnitConversions.convert_pressure(self.pressure, old_units, new_units)
        # Tendency is a difference, so no temperature style offsets apply
        self.pressure_tendency = UnitConversions.convert_pressure(self.pressure_tendency, old_units, new_units)

def _flag_set(value: str) -> bool:
    return value not in ("", "n")

class Buoy(BaseModel):
    """NDBC station metadata and its observations, newest first."""
    station_id: str
    location: Optional[GeoPoint] = None
    owner: str = ""
    pgm: str = ""
    type: str = "buoy"
    met: str = ""
    currents: str = ""
    water_quality: str = ""
    dart: str = ""

    units: UnitSystem = UnitSystem.METRIC
    buoy_data: List[BuoyItem] = []

    @property
    def is_active(self) -> bool:
        """Whether the buoy reported meteorological data in the last 8 hours."""
        return _flag_set(self.met)

    @property
    def has_water_current_data(self) -> bool:
        return _flag_set(self.currents)

    @property
    def has_water_quality_data(self) -> bool:
        return _flag_set(self.water_quality)

    @property
    def has_dart_data(self) -> bool:
        """Whether the station measures tsunami (DART) data."""
        return _flag_set(self.dart)

    @property
    def latest_reading_url(self) -> str:
        return f"{settings.ndbc_latest_obs_url}{self.station_id}.{settings.ndbc_data_types['latest']}"

    @property
    def standard_data_url(self) -> str:
        return f"{settings.ndbc_base_url}{self.station_id}.{settings.ndbc_data_types['std']}"

    @property
    def detailed_wave_data_url(self) -> str:
        return f"{settings.ndbc_base_url}{self.station_id}.{settings.ndbc_data_types['spec']}"

    @property
    def spectra_plot_url(self) -> str:
        return f"{settings.ndbc_spectra_plot_url}{self.station_id}"

    def change_units(self, new_units: UnitSystem) -> None:
        if self.units == new_units:
            return
        for item in self.buoy_data:
            item.change_units(self.units, new_units)
        self.units = new_units

    def to_json(self) -> str:
        return self.model_dump_json(indent=4)

    def export_as_json(self, filename: Union[str, Path]) -> None:
        Path(filename).write_text(self.to_json())

class NearestConditionsResponse(BaseModel):
    """Observation closest to a requested time."""
    station_id: str
    requested_time: datetime
    observation: Optional[BuoyItem] = None
    offset_seconds: Optional[float] = Field(None, description="Observation time minus requested time, negative when in the past")
