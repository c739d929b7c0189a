import logging
from typing import List, Optional, Tuple

from features.common.exceptions.forecast_exceptions import MissingWaveDataError
from features.common.models.location_types import GeoPoint
from features.common.utils.compass import degree_to_direction
from features.common.utils.conversions import UnitSystem
from features.forecast.models.forecast_types import GUST_UNAVAILABLE, SurfForecast, SurfForecastItem
from features.waves.models.wave_types import Swell, WaveForecast, WaveModelRecord
from features.wind.models.wind_types import WindForecast

logger = logging.getLogger(__name__)

RankedSwell = Tuple[Swell, float, float]

def rank_swell_components(swells: List[Swell], beach_angle: float, elevation: float, beach_slope: float) -> List[RankedSwell]:
    """
    Order swells by their maximum breaking height, biggest first.

    sorted() is stable, so swells with exactly equal maxima keep the order
    they were given in.
    """
    ranked = []
    for swell in swells:
        minimum, maximum = swell.breaking_wave_heights(beach_angle, elevation, beach_slope)
        ranked.append((swell, minimum, maximum))
    return sorted(ranked, key=lambda entry: entry[2], reverse=True)

def _metric_copy(forecast):
    copy = forecast.model_copy(deep=True)
    copy.change_units(UnitSystem.METRIC)
    return copy

def _build_forecast_item(
    index: int,
    wave_record: WaveModelRecord,
    wind_forecast: Optional[WindForecast],
    beach_angle: float,
    elevation: float,
    beach_slope: float
) -> SurfForecastItem:
    if wind_forecast is not None and index < len(wind_forecast.forecast_data):
        wind_record = wind_forecast.forecast_data[index]
        wind_speed = wind_record.wind_speed
        wind_gust_speed = wind_record.wind_gust_speed if wind_record.wind_gust_speed is not None else GUST_UNAVAILABLE
        wind_direction = wind_record.wind_direction
    else:
        logger.debug(f"No wind model data for step {index}, using wave model surface wind")
        wind_speed = wave_record.surface_wind_speed
        wind_gust_speed = GUST_UNAVAILABLE
        wind_direction = wave_record.surface_wind_direction

    ranked = rank_swell_components(wave_record.swells(), beach_angle, elevation, beach_slope)
    primary, minimum, maximum = ranked[0]

    return SurfForecastItem(
        time=wave_record.time,
        wind_speed=wind_speed,
        wind_gust_speed=wind_gust_speed,
        wind_direction=wind_direction,
        wind_compass_direction=degree_to_direction(wind_direction),
        primary_swell_component=primary,
        secondary_swell_component=ranked[1][0],
        tertiary_swell_component=ranked[2][0],
        minimum_breaking_height=minimum,
        maximum_breaking_height=maximum
    )

def build_surf_forecast(
    location: GeoPoint,
    beach_angle: float,
    beach_slope: float,
    wave_forecast: Optional[WaveForecast],
    wind_forecast: Optional[WindForecast] = None
) -> SurfForecast:
    """
    Combine a wave model forecast and an optional wind model forecast into a surf forecast.

    The model forecasts are copied and converted to metric before any
    breaking heights are computed, the callers' objects are left untouched.
    Wind records are matched to wave records by index; any step without a
    wind record falls back to the wave model's surface wind with no gust.

    Raises:
        MissingWaveDataError: the wave forecast is missing or has no records.
    """
    if wave_forecast is None or not wave_forecast.forecast_data:
        raise MissingWaveDataError(f"No wave model data available for {location.name or 'location'}")

    wave_forecast = _metric_copy(wave_forecast)
    if wind_forecast is not None:
        wind_forecast = _metric_copy(wind_forecast)

    # Breaking heights use the depth at the wave model grid point, not the beach
    elevation = wave_forecast.location.elevation

    forecast_data = [
        _build_forecast_item(index, record, wind_forecast, beach_angle, elevation, beach_slope)
        for index, record in enumerate(wave_forecast.forecast_data)
    ]

    wind_steps = len(wind_forecast.forecast_data) if wind_forecast is not None else 0
    logger.info(
        f"Built surf forecast for {location.name or (location.latitude, location.longitude)}: "
        f"{len(forecast_data)} steps, {min(wind_steps, len(forecast_data))} with wind model data"
    )

    return SurfForecast(
        location=location,
        beach_angle=beach_angle,
        beach_slope=beach_slope,
        units=UnitSystem.METRIC,
        forecast_data=forecast_data,
        wave_model=wave_forecast.model,
        wave_model_location=wave_forecast.location,
        wind_model=wind_forecast.model if wind_forecast is not None else None,
        wind_model_location=wind_forecast.location if wind_forecast is not None else None
    )
