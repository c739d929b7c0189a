import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from features.buoys.models.buoy_types import BuoyItem

logger = logging.getLogger(__name__)

class ReportShape(str, Enum):
    """NDBC report formats that contribute to a buoy observation."""
    LATEST = "latest"      # latest_obs snapshot
    STANDARD = "standard"  # realtime2 .txt
    DETAILED = "detailed"  # realtime2 .spec

LATEST_FIELDS = (
    "wind_direction", "wind_speed", "wind_gust",
    "significant_wave_height", "dominant_wave_period", "average_period",
    "dominant_wave_direction", "mean_wave_direction",
    "swell_wave_height", "swell_wave_period", "swell_wave_direction",
    "wind_swell_wave_height", "wind_swell_wave_period", "wind_swell_direction",
    "pressure", "air_temperature", "water_temperature", "dewpoint_temperature",
)

STANDARD_FIELDS = (
    "wind_direction", "wind_speed", "wind_gust",
    "significant_wave_height", "dominant_wave_period", "average_period",
    "mean_wave_direction", "pressure", "air_temperature", "water_temperature",
    "dewpoint_temperature", "visibility", "pressure_tendency", "water_level",
)

DETAILED_FIELDS = (
    "significant_wave_height", "swell_wave_height", "swell_wave_period",
    "wind_swell_wave_height", "wind_swell_wave_period", "swell_wave_direction",
    "wind_swell_direction", "steepness", "average_period", "mean_wave_direction",
    "dominant_wave_direction",
)

def _replace_fields(existing: BuoyItem, incoming: BuoyItem, fields: Iterable[str]) -> BuoyItem:
    """Copy of existing with every reported field of incoming written over it."""
    updates = {
        field: getattr(incoming, field)
        for field in fields
        if getattr(incoming, field) is not None
    }
    return existing.model_copy(update=updates, deep=True)

def _fill_fields(existing: BuoyItem, incoming: BuoyItem, fields: Iterable[str]) -> BuoyItem:
    """Copy of existing with only its unreported fields filled from incoming."""
    updates = {
        field: getattr(incoming, field)
        for field in fields
        if getattr(existing, field) is None and getattr(incoming, field) is not None
    }
    return existing.model_copy(update=updates, deep=True)

def merge_latest_reading(existing: BuoyItem, incoming: BuoyItem) -> BuoyItem:
    """
    Merge a latest observation snapshot into an observation.

    The snapshot is the freshest data available, so every field it reports
    replaces the existing value, including the timestamp. Fields the snapshot
    never carries (visibility, tide, steepness...) are left alone.
    """
    merged = _replace_fields(existing, incoming, LATEST_FIELDS)
    merged.time = incoming.time
    return merged

def merge_standard_reading(existing: BuoyItem, incoming: BuoyItem) -> BuoyItem:
    """Fill unreported fields of an observation from a standard meteorological row."""
    return _fill_fields(existing, incoming, STANDARD_FIELDS)

def merge_detailed_reading(existing: BuoyItem, incoming: BuoyItem) -> BuoyItem:
    """Fill unreported fields of an observation from a detailed wave data row."""
    return _fill_fields(existing, incoming, DETAILED_FIELDS)

MERGE_FUNCTIONS = {
    ReportShape.LATEST: merge_latest_reading,
    ReportShape.STANDARD: merge_standard_reading,
    ReportShape.DETAILED: merge_detailed_reading,
}

def merge_reading(existing: Optional[BuoyItem], incoming: BuoyItem, shape: ReportShape) -> BuoyItem:
    """Merge a parsed report of the given shape into an observation, None meaning no observation yet."""
    if existing is None:
        return incoming.model_copy(deep=True)
    return MERGE_FUNCTIONS[shape](existing, incoming)

def apply_latest_reading(series: List[BuoyItem], incoming: BuoyItem) -> List[BuoyItem]:
    """New series with the latest snapshot merged into the most recent slot."""
    if not series:
        return [incoming.model_copy(deep=True)]
    return [merge_latest_reading(series[0], incoming)] + list(series[1:])

def _apply_series(
    series: List[BuoyItem],
    incoming_items: List[BuoyItem],
    shape: ReportShape,
    other_shape_contributed: Callable[[BuoyItem], bool]
) -> List[BuoyItem]:
    merged = list(series)
    for incoming in incoming_items:
        index = next((i for i, item in enumerate(merged) if item.time == incoming.time), None)

        if index is None:
            # Keep newest first
            position = next((i for i, item in enumerate(merged) if item.time < incoming.time), len(merged))
            merged.insert(position, incoming.model_copy(deep=True))
        elif other_shape_contributed(merged[index]):
            merged[index] = merge_reading(merged[index], incoming, shape)
        else:
            # A repeat of the same report shape, the newer copy wins
            merged[index] = incoming.model_copy(deep=True)

    logger.debug(f"Applied {len(incoming_items)} {shape.value} readings, series now has {len(merged)} observations")
    return merged

def apply_standard_data(series: List[BuoyItem], incoming_items: List[BuoyItem]) -> List[BuoyItem]:
    """
    New series with standard meteorological rows reconciled by timestamp.

    A slot the detailed wave data already contributed to (steepness is only
    in that report) is merged into, any other slot at the same time is
    overwritten.
    """
    return _apply_series(series, incoming_items, ReportShape.STANDARD, lambda item: item.steepness is not None)

def apply_detailed_wave_data(series: List[BuoyItem], incoming_items: List[BuoyItem]) -> List[BuoyItem]:
    """
    New series with detailed wave data rows reconciled by timestamp.

    A slot that already has a dominant wave period (only in the standard and
    latest reports) is merged into, any other slot is overwritten.
    """
    return _apply_series(series, incoming_items, ReportShape.DETAILED, lambda item: item.dominant_wave_period is not None)

def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value

def find_nearest_conditions(series: List[BuoyItem], when: datetime) -> Tuple[Optional[BuoyItem], Optional[timedelta]]:
    """
    Find the observation closest in time to when.

    Returns the observation and its offset (observation time minus when, so
    negative means the observation is in the past). An empty series gives
    (None, None). On equal distances the earlier entry in the series wins.
    Naive times are taken as UTC.
    """
    if not series:
        return None, None

    when = _as_utc(when)
    nearest = series[0]
    offset = _as_utc(nearest.time) - when
    for item in series[1:]:
        candidate = _as_utc(item.time) - when
        if abs(candidate) < abs(offset):
            nearest = item
            offset = candidate

    return nearest, offset
