"""
Tests for parsing the NDBC latest, standard and detailed wave reports.
"""

from datetime import datetime, timezone

import pytest

from features.buoys.models.buoy_types import BuoyItem
from features.buoys.services.ndbc_parser import (
    interpolate_dominant_wave_direction,
    parse_detailed_wave_data,
    parse_latest_report,
    parse_standard_data,
)
from features.common.exceptions.forecast_exceptions import BuoyParseError

@pytest.mark.unit
class TestParseLatestReport:
    def test_reads_timestamp(self, latest_report):
        item = parse_latest_report(latest_report)
        assert item.time == datetime(2026, 10, 17, 18, 50, tzinfo=timezone.utc)

    def test_converts_to_metric(self, latest_report):
        item = parse_latest_report(latest_report)

        assert item.wind_direction == 310.0
        assert item.wind_speed == pytest.approx(13.6 * 0.514444)
        assert item.wind_gust == pytest.approx(17.5 * 0.514444)
        assert item.significant_wave_height == pytest.approx(5.9 / 3.28084)
        assert item.dominant_wave_period == 10.0
        assert item.pressure == pytest.approx(1017.27, abs=0.01)
        assert item.air_temperature == pytest.approx(13.889, abs=0.001)
        assert item.water_temperature == pytest.approx(16.222, abs=0.001)
        assert item.dewpoint_temperature == pytest.approx(10.0)

    def test_swell_and_wind_wave_blocks(self, latest_report):
        item = parse_latest_report(latest_report)

        assert item.swell_wave_height == pytest.approx(4.9 / 3.28084)
        assert item.swell_wave_period == 10.0
        assert item.swell_wave_direction == "NW"
        assert item.wind_swell_wave_height == pytest.approx(3.3 / 3.28084)
        assert item.wind_swell_wave_period == 5.6
        assert item.wind_swell_direction == "W"
        # Swell is the bigger component
        assert item.dominant_wave_direction == 315.0

    def test_fields_not_in_report_are_unset(self, latest_report):
        item = parse_latest_report(latest_report)
        assert item.visibility is None
        assert item.water_level is None
        assert item.steepness is None

    def test_missing_values(self):
        report = "\n".join([
            "Station 41002",
            "31.760 N 74.840 W",
            "",
            "2:50 pm EDT",
            "1850 GMT 10/17/26",
            "Seas: MM",
            "Gust: missing",
        ])
        item = parse_latest_report(report)
        assert item.significant_wave_height is None
        assert item.wind_gust is None
        assert item.dominant_wave_direction is None

    def test_too_short(self):
        with pytest.raises(BuoyParseError):
            parse_latest_report("Station 44097\n")

    def test_bad_timestamp(self, latest_report):
        with pytest.raises(BuoyParseError):
            parse_latest_report(latest_report.replace("1850 GMT 10/17/26", "not a time", 1))

@pytest.mark.unit
class TestParseStandardData:
    def test_rows_newest_first(self, standard_report):
        items = parse_standard_data(standard_report)

        assert [item.time.hour for item in items] == [18, 18, 17]
        assert items[0].time == datetime(2026, 10, 17, 18, 50, tzinfo=timezone.utc)

    def test_values(self, standard_report):
        item = parse_standard_data(standard_report)[0]

        assert item.wind_direction == 310.0
        assert item.wind_speed == 7.0
        assert item.wind_gust == 9.0
        assert item.significant_wave_height == 1.8
        assert item.dominant_wave_period == 10.0
        assert item.average_period == 6.5
        assert item.mean_wave_direction == 300.0
        assert item.pressure == 1017.2
        assert item.pressure_tendency == -1.2
        assert item.visibility is None
        assert item.water_level is None
        assert item.steepness is None

    def test_missing_values_are_none(self, standard_report):
        item = parse_standard_data(standard_report)[2]
        assert item.wind_gust is None
        assert item.significant_wave_height is None
        assert item.dominant_wave_period is None
        assert item.wind_speed == 5.0

    def test_data_count_limit(self, standard_report):
        assert len(parse_standard_data(standard_report, 2)) == 2
        assert len(parse_standard_data(standard_report, 0)) == 3

    def test_header_only(self, standard_report):
        header = "\n".join(standard_report.splitlines()[:2])
        assert parse_standard_data(header) == []

@pytest.mark.unit
class TestParseDetailedWaveData:
    def test_values(self, detailed_report):
        items = parse_detailed_wave_data(detailed_report)
        assert len(items) == 2

        item = items[0]
        assert item.time == datetime(2026, 10, 17, 18, 0, tzinfo=timezone.utc)
        assert item.significant_wave_height == 1.7
        assert item.swell_wave_height == 1.5
        assert item.swell_wave_period == 10.0
        assert item.wind_swell_wave_height == 0.8
        assert item.swell_wave_direction == "NW"
        assert item.wind_swell_direction == "W"
        assert item.steepness == "AVERAGE"
        assert item.dominant_wave_period is None

    def test_dominant_direction_follows_bigger_component(self, detailed_report):
        swell_dominant, wind_dominant = parse_detailed_wave_data(detailed_report)
        assert swell_dominant.dominant_wave_direction == 315.0
        assert wind_dominant.dominant_wave_direction == 270.0

@pytest.mark.unit
def test_dominant_direction_falls_back_to_mean_direction():
    item = BuoyItem(time=datetime(2026, 10, 17, tzinfo=timezone.utc), mean_wave_direction=123.0)
    assert interpolate_dominant_wave_direction(item) == 123.0
