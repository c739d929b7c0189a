from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel
from typing import Tuple
import logging

from features.common.models.location_types import GeoPoint
from features.waves.models.wave_models import WaveWatchModel

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/waves",
    tags=["Waves"]
)

class WaveModelResponse(BaseModel):
    name: str
    description: str
    bottom_left: Tuple[float, float]
    top_right: Tuple[float, float]
    location_resolution: float
    time_resolution: float
    grid_point: GeoPoint

@router.get(
    "/models/lookup",
    response_model=WaveModelResponse,
    summary="Find the wave model covering a location",
    description="Returns the highest resolution WAVEWATCH III grid containing the location and its nearest grid point"
)
async def lookup_wave_model(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(...)
):
    """Get wave model grid metadata for a location."""
    location = GeoPoint.for_lat_lon(lat, lon)
    model = WaveWatchModel.for_location(location)
    if model is None:
        raise HTTPException(status_code=404, detail=f"No wave model covers {lat}, {lon}")

    return WaveModelResponse(
        name=model.model_name,
        description=model.description,
        bottom_left=model.bottom_left,
        top_right=model.top_right,
        location_resolution=model.location_resolution,
        time_resolution=model.time_resolution,
        grid_point=model.nearest_grid_point(location)
    )
