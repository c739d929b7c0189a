"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add the project root to sys.path so the flat packages import without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from features.common.models.location_types import GeoPoint, ModelInfo
from features.common.utils.conversions import UnitSystem
from features.waves.models.wave_types import WaveForecast, WaveModelRecord
from features.wind.models.wind_types import WindForecast, WindModelRecord

START_TIME = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

LATEST_REPORT = """Station 44097
40.967 N 71.126 W

2:50 pm EDT
1850 GMT 10/17/26

Wind: NW (310°), 13.6 kt
Gust: 17.5 kt
Seas: 5.9 ft
Peak Period: 10 sec
Pres: 30.04 falling
Air Temp: 57.0 °F
Water Temp: 61.2 °F
Dew Point: 50.0 °F

Wave Summary
2:00 pm EDT
1800 GMT 10/17/26

Swell: 4.9 ft
Period: 10.0 sec
Direction: NW
Wind Wave: 3.3 ft
Period: 5.6 sec
Direction: W
"""

STANDARD_REPORT = """#YY  MM DD hh mm WDIR WSPD GST  WVHT   DPD   APD MWD   PRES  ATMP  WTMP  DEWP  VIS PTDY  TIDE
#yr  mo dy hr mn degT m/s  m/s     m   sec   sec degT   hPa  degC  degC  degC  nmi  hPa    ft
2026 10 17 18 50 310  7.0  9.0   1.8    10   6.5 300 1017.2  13.9  16.2  10.0   MM -1.2    MM
2026 10 17 18 00 300  6.0  8.0   1.7     9   6.3 295 1017.9  14.1  16.2  10.2   MM -0.9    MM
2026 10 17 17 00 290  5.0   MM    MM    MM    MM  MM 1018.4  14.3  16.3  10.3   MM -0.5    MM
2026 10 17 16
"""

DETAILED_REPORT = """#YY  MM DD hh mm WVHT  SwH  SwP  WWH  WWP SwD WWD  STEEPNESS  APD MWD
#yr  mo dy hr mn    m    m  sec    m  sec  -  degT     -      sec degT
2026 10 17 18 00  1.7  1.5 10.0  0.8  5.6  NW   W    AVERAGE  6.3 295
2026 10 17 17 00  1.6  0.6  9.1  1.4  5.3  NW   W      STEEP  6.1 290
"""

@pytest.fixture
def beach():
    """A south facing beach."""
    return GeoPoint(latitude=41.35, longitude=-71.64, elevation=3.0, name="Matunuck")

@pytest.fixture
def grid_point():
    return GeoPoint(latitude=41.33, longitude=288.33, elevation=-5.0, name="grid")

def make_wave_record(offset_hours=0, **overrides):
    values = dict(
        time=START_TIME + timedelta(hours=offset_hours),
        primary_swell_wave_height=2.0,
        primary_swell_period=10.0,
        primary_swell_direction=200.0,
        secondary_swell_wave_height=1.0,
        secondary_swell_period=6.0,
        secondary_swell_direction=120.0,
        wind_swell_wave_height=0.3,
        wind_swell_period=3.0,
        wind_swell_direction=200.0,
        surface_wind_speed=5.1,
        surface_wind_direction=190.0,
    )
    values.update(overrides)
    return WaveModelRecord(**values)

@pytest.fixture
def wave_forecast(grid_point):
    return WaveForecast(
        location=grid_point,
        model=ModelInfo(name="multi_1.at_10m", description="East coast", model_run="20261017 12z"),
        units=UnitSystem.METRIC,
        forecast_data=[make_wave_record(hour) for hour in range(0, 9, 3)]
    )

@pytest.fixture
def wind_forecast(grid_point):
    return WindForecast(
        location=grid_point,
        model=ModelInfo(name="gfs_0p25", description="GFS 0.25 degree", model_run="20261017 12z"),
        units=UnitSystem.METRIC,
        forecast_data=[
            WindModelRecord(
                time=START_TIME + timedelta(hours=hour),
                wind_speed=4.0 + hour,
                wind_gust_speed=6.0 + hour,
                wind_direction=270.0
            )
            for hour in range(0, 9, 3)
        ]
    )

@pytest.fixture
def latest_report():
    return LATEST_REPORT

@pytest.fixture
def standard_report():
    return STANDARD_REPORT

@pytest.fixture
def detailed_report():
    return DETAILED_REPORT

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
