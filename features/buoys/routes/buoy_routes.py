from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
import logging

from features.buoys.models.buoy_types import Buoy, NearestConditionsResponse
from features.buoys.services.buoy_service import BuoyService
from features.common.exceptions.forecast_exceptions import BuoyFetchError, BuoyParseError
from features.common.utils.conversions import UnitSystem

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/buoys",
    tags=["Buoys"]
)

def get_service(request: Request) -> BuoyService:
    """Dependency to get the BuoyService instance."""
    return request.app.state.buoy_service

@router.get(
    "/{station_id}/observations",
    response_model=Buoy,
    summary="Get reconciled buoy observations",
    description="Merges the NDBC latest, standard meteorological and detailed wave reports for a station into one time series"
)
async def get_buoy_observations(
    station_id: str,
    limit: Optional[int] = Query(None, description="Rows to read from each report, all when omitted"),
    units: UnitSystem = UnitSystem.METRIC,
    service: BuoyService = Depends(get_service)
):
    """Get the merged observation series for a station."""
    try:
        buoy = await service.get_observations(station_id, limit)
    except BuoyFetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except BuoyParseError as e:
        raise HTTPException(status_code=502, detail=str(e))

    buoy.change_units(units)
    return buoy

@router.get(
    "/{station_id}/conditions",
    response_model=NearestConditionsResponse,
    summary="Get buoy conditions closest to a time",
    description="Returns the observation nearest to the requested time, or now when no time is given"
)
async def get_buoy_conditions(
    station_id: str,
    time: Optional[datetime] = None,
    service: BuoyService = Depends(get_service)
):
    """Get the observation closest to a time for a station."""
    when = time or datetime.now(timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    try:
        return await service.get_conditions_at(station_id, when)
    except BuoyFetchError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except BuoyParseError as e:
        raise HTTPException(status_code=502, detail=str(e))
