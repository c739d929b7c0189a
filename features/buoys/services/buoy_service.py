import logging
from datetime import datetime, timezone
from typing import Optional

from core.config import settings
from features.buoys.models.buoy_types import Buoy, NearestConditionsResponse
from features.buoys.services.buoy_merge import (
    apply_detailed_wave_data,
    apply_latest_reading,
    apply_standard_data,
    find_nearest_conditions
)
from features.buoys.services.ndbc_buoy_client import NDBCBuoyClient
from features.buoys.services.ndbc_parser import (
    parse_detailed_wave_data,
    parse_latest_report,
    parse_standard_data
)

logger = logging.getLogger(__name__)

class BuoyService:
    """Fetches the NDBC reports for a station and reconciles them into one series."""

    def __init__(self, buoy_client: NDBCBuoyClient):
        self.buoy_client = buoy_client

    async def fetch_latest_reading(self, buoy: Buoy) -> Buoy:
        raw_data = await self.buoy_client.fetch_text(buoy.latest_reading_url)
        item = parse_latest_report(raw_data)
        return buoy.model_copy(update={"buoy_data": apply_latest_reading(buoy.buoy_data, item)})

    async def fetch_standard_data(self, buoy: Buoy, data_count_limit: int = settings.ndbc_data_count_limit) -> Buoy:
        raw_data = await self.buoy_client.fetch_text(buoy.standard_data_url)
        items = parse_standard_data(raw_data, data_count_limit)
        return buoy.model_copy(update={"buoy_data": apply_standard_data(buoy.buoy_data, items)})

    async def fetch_detailed_wave_data(self, buoy: Buoy, data_count_limit: int = settings.ndbc_data_count_limit) -> Buoy:
        raw_data = await self.buoy_client.fetch_text(buoy.detailed_wave_data_url)
        items = parse_detailed_wave_data(raw_data, data_count_limit)
        return buoy.model_copy(update={"buoy_data": apply_detailed_wave_data(buoy.buoy_data, items)})

    async def get_observations(self, station_id: str, data_count_limit: Optional[int] = None) -> Buoy:
        """Standard, detailed and latest reports for a station merged into one series."""
        limit = settings.ndbc_data_count_limit if data_count_limit is None else data_count_limit

        buoy = Buoy(station_id=station_id)
        buoy = await self.fetch_standard_data(buoy, limit)
        buoy = await self.fetch_detailed_wave_data(buoy, limit)
        buoy = await self.fetch_latest_reading(buoy)

        logger.info(f"Reconciled {len(buoy.buoy_data)} observations for station {station_id}")
        return buoy

    async def get_conditions_at(self, station_id: str, when: datetime) -> NearestConditionsResponse:
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)

        buoy = await self.get_observations(station_id)
        observation, offset = find_nearest_conditions(buoy.buoy_data, when)
        if observation is None:
            logger.warning(f"No observations available for station {station_id}")

        return NearestConditionsResponse(
            station_id=station_id,
            requested_time=when,
            observation=observation,
            offset_seconds=offset.total_seconds() if offset is not None else None
        )
