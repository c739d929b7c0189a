from fastapi import APIRouter, HTTPException
import logging

from features.common.exceptions.forecast_exceptions import MissingWaveDataError
from features.forecast.models.forecast_types import SurfForecast, SurfForecastRequest
from features.forecast.services.surf_forecast_service import build_surf_forecast

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/forecasts",
    tags=["Forecasts"]
)

@router.post(
    "/surf",
    response_model=SurfForecast,
    summary="Build a surf forecast for a beach",
    description="Ranks the swell components of a wave model forecast by estimated breaking height at the beach and merges in wind model data"
)
async def create_surf_forecast(request: SurfForecastRequest):
    """Build a surf forecast from wave and wind model data."""
    try:
        forecast = build_surf_forecast(
            location=request.location,
            beach_angle=request.beach_angle,
            beach_slope=request.beach_slope,
            wave_forecast=request.wave_forecast,
            wind_forecast=request.wind_forecast
        )
    except MissingWaveDataError as e:
        logger.warning(f"Rejected surf forecast request: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))

    forecast.change_units(request.units)
    return forecast
