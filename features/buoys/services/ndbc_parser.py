import logging
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from features.buoys.models.buoy_types import BuoyItem
from features.common.exceptions.forecast_exceptions import BuoyParseError
from features.common.utils.compass import direction_to_degree
from features.common.utils.conversions import UnitConversions

logger = logging.getLogger(__name__)

LATEST_DATE_FORMAT = "%H%M GMT %m/%d/%y"
LATEST_DATE_LINE = 4
LATEST_MIN_LINES = 6

STANDARD_COLUMNS = [
    "#YY", "MM", "DD", "hh", "mm", "WDIR", "WSPD", "GST", "WVHT", "DPD",
    "APD", "MWD", "PRES", "ATMP", "WTMP", "DEWP", "VIS", "PTDY", "TIDE"
]
DETAILED_COLUMNS = [
    "#YY", "MM", "DD", "hh", "mm", "WVHT", "SwH", "SwP", "WWH", "WWP",
    "SwD", "WWD", "STEEPNESS", "APD", "MWD"
]

MISSING_VALUES = ("MM", "missing", "N/A")

# The latest observation feed is in english units, observations are stored metric
LATEST_UNIT_CONVERSIONS = {
    "ft": UnitConversions.feet_to_meters,
    "kt": UnitConversions.knots_to_ms,
    "mph": UnitConversions.mph_to_ms,
    "°F": UnitConversions.fahrenheit_to_celsius,
    "F": UnitConversions.fahrenheit_to_celsius,
    "in": UnitConversions.inhg_to_hpa,
}

WIND_DIRECTION_PATTERN = re.compile(r"\((\d+(?:\.\d+)?)\s*°?\)")
WIND_SPEED_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(kt|mph|m/s)")

def _parse_value(value: Optional[str]) -> Optional[float]:
    """Parse NDBC value, handling missing value indicators."""
    if value is None or value in MISSING_VALUES:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None

def _parse_text(value: Optional[str]) -> Optional[str]:
    if value is None or value in MISSING_VALUES:
        return None
    return value

def _parse_measurement(raw: str, default_unit: str = "") -> Optional[float]:
    """Parse '5.9 ft' style values from the latest observation feed into metric."""
    tokens = raw.split()
    if not tokens:
        return None
    value = _parse_value(tokens[0])
    if value is None:
        return None
    unit = tokens[1] if len(tokens) > 1 else default_unit
    convert = LATEST_UNIT_CONVERSIONS.get(unit)
    return convert(value) if convert else value

def _parse_row_time(row: Dict[str, str]) -> datetime:
    return datetime(
        int(row["#YY"]), int(row["MM"]), int(row["DD"]),
        int(row["hh"]), int(row["mm"]),
        tzinfo=timezone.utc
    )

def interpolate_dominant_wave_direction(item: BuoyItem) -> Optional[float]:
    """Direction of the bigger of swell and wind swell, falling back to the mean wave direction."""
    swell = item.swell_wave_height or 0.0
    wind_swell = item.wind_swell_wave_height or 0.0
    if swell >= wind_swell:
        candidates = (item.swell_wave_direction, item.wind_swell_direction)
    else:
        candidates = (item.wind_swell_direction, item.swell_wave_direction)

    for compass in candidates:
        degrees = direction_to_degree(compass)
        if degrees is not None:
            return degrees
    return item.mean_wave_direction

def parse_latest_report(raw_data: str) -> BuoyItem:
    """Parse the NDBC latest observation text report for a station."""
    lines = raw_data.split("\n")
    if len(lines) < LATEST_MIN_LINES:
        raise BuoyParseError("Could not parse latest buoy data: report is too short")

    try:
        obs_time = datetime.strptime(lines[LATEST_DATE_LINE].strip(), LATEST_DATE_FORMAT)
    except ValueError as e:
        raise BuoyParseError(f"Could not parse latest buoy data timestamp: {str(e)}")

    values = {"time": obs_time.replace(tzinfo=timezone.utc)}

    # The feed labels both the swell and the wind wave period/direction the same
    # way, so the first occurrence is the swell and the second the wind swell.
    # This depends on NDBC keeping the Swell block ahead of the Wind Wave block.
    swell_period_read = False
    swell_direction_read = False

    for line in lines[LATEST_DATE_LINE + 1:]:
        variable, separator, raw_value = line.partition(":")
        if not separator:
            continue
        variable = variable.strip()
        raw_value = raw_value.strip()

        if variable == "Wind":
            direction = WIND_DIRECTION_PATTERN.search(raw_value)
            speed = WIND_SPEED_PATTERN.search(raw_value)
            if direction:
                values["wind_direction"] = float(direction.group(1))
            if speed:
                values["wind_speed"] = _parse_measurement(f"{speed.group(1)} {speed.group(2)}")
        elif variable == "Gust":
            values["wind_gust"] = _parse_measurement(raw_value)
        elif variable == "Seas":
            values["significant_wave_height"] = _parse_measurement(raw_value)
        elif variable == "Peak Period":
            values["dominant_wave_period"] = _parse_value(raw_value.split(" ")[0])
        elif variable == "Pres":
            # Followed by the tendency word rather than a unit
            values["pressure"] = _parse_measurement(raw_value.split(" ")[0], default_unit="in")
        elif variable == "Air Temp":
            values["air_temperature"] = _parse_measurement(raw_value)
        elif variable == "Water Temp":
            values["water_temperature"] = _parse_measurement(raw_value)
        elif variable == "Dew Point":
            values["dewpoint_temperature"] = _parse_measurement(raw_value)
        elif variable == "Swell":
            values["swell_wave_height"] = _parse_measurement(raw_value)
        elif variable == "Wind Wave":
            values["wind_swell_wave_height"] = _parse_measurement(raw_value)
        elif variable == "Period":
            period = _parse_value(raw_value.split(" ")[0])
            if not swell_period_read:
                values["swell_wave_period"] = period
                swell_period_read = True
            else:
                values["wind_swell_wave_period"] = period
        elif variable == "Direction":
            direction = _parse_text(raw_value.split(" ")[0])
            if not swell_direction_read:
                values["swell_wave_direction"] = direction
                swell_direction_read = True
            else:
                values["wind_swell_direction"] = direction

    item = BuoyItem(**values)
    item.dominant_wave_direction = interpolate_dominant_wave_direction(item)
    return item

def _data_rows(raw_data: str, columns: List[str], data_count_limit: int) -> List[Tuple[int, Dict[str, str]]]:
    """Split a realtime2 report into rows keyed by column name, skipping the header lines."""
    rows = []
    for line_number, line in enumerate(raw_data.strip().split("\n")):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < len(columns):
            logger.debug(f"Skipping short data line {line_number}: {line}")
            continue
        rows.append((line_number, dict(zip(columns, fields))))
        if 0 < data_count_limit <= len(rows):
            break
    return rows

def parse_standard_data(raw_data: str, data_count_limit: int = -1) -> List[BuoyItem]:
    """
    Parse a realtime2 standard meteorological (.txt) report, newest first.

    data_count_limit of zero or less keeps every row.
    """
    items = []
    for line_number, row in _data_rows(raw_data, STANDARD_COLUMNS, data_count_limit):
        try:
            obs_time = _parse_row_time(row)
        except (KeyError, ValueError) as e:
            logger.debug(f"Skipping standard data line {line_number}: {str(e)}")
            continue

        items.append(BuoyItem(
            time=obs_time,
            wind_direction=_parse_value(row["WDIR"]),
            wind_speed=_parse_value(row["WSPD"]),
            wind_gust=_parse_value(row["GST"]),
            significant_wave_height=_parse_value(row["WVHT"]),
            dominant_wave_period=_parse_value(row["DPD"]),
            average_period=_parse_value(row["APD"]),
            mean_wave_direction=_parse_value(row["MWD"]),
            pressure=_parse_value(row["PRES"]),
            air_temperature=_parse_value(row["ATMP"]),
            water_temperature=_parse_value(row["WTMP"]),
            dewpoint_temperature=_parse_value(row["DEWP"]),
            visibility=_parse_value(row["VIS"]),
            pressure_tendency=_parse_value(row["PTDY"]),
            water_level=_parse_value(row["TIDE"])
        ))

    logger.debug(f"Parsed {len(items)} standard meteorological observations")
    return items

def parse_detailed_wave_data(raw_data: str, data_count_limit: int = -1) -> List[BuoyItem]:
    """Parse a realtime2 detailed wave summary (.spec) report, newest first."""
    items = []
    for line_number, row in _data_rows(raw_data, DETAILED_COLUMNS, data_count_limit):
        try:
            obs_time = _parse_row_time(row)
        except (KeyError, ValueError) as e:
            logger.debug(f"Skipping detailed wave data line {line_number}: {str(e)}")
            continue

        item = BuoyItem(
            time=obs_time,
            significant_wave_height=_parse_value(row["WVHT"]),
            swell_wave_height=_parse_value(row["SwH"]),
            swell_wave_period=_parse_value(row["SwP"]),
            wind_swell_wave_height=_parse_value(row["WWH"]),
            wind_swell_wave_period=_parse_value(row["WWP"]),
            swell_wave_direction=_parse_text(row["SwD"]),
            wind_swell_direction=_parse_text(row["WWD"]),
            steepness=_parse_text(row["STEEPNESS"]),
            average_period=_parse_value(row["APD"]),
            mean_wave_direction=_parse_value(row["MWD"])
        )
        item.dominant_wave_direction = interpolate_dominant_wave_direction(item)
        items.append(item)

    logger.debug(f"Parsed {len(items)} detailed wave observations")
    return items
