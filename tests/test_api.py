"""
Tests for the HTTP routes.
"""

import pytest
from fastapi.testclient import TestClient

from features.buoys.models.buoy_types import Buoy, BuoyItem, NearestConditionsResponse
from features.buoys.routes.buoy_routes import get_service
from features.common.exceptions.forecast_exceptions import BuoyFetchError, BuoyParseError
from main import app

class FakeBuoyService:
    def __init__(self, buoy=None, error=None):
        self.buoy = buoy
        self.error = error
        self.calls = []

    async def get_observations(self, station_id, data_count_limit=None):
        self.calls.append((station_id, data_count_limit))
        if self.error:
            raise self.error
        return self.buoy.model_copy(deep=True)

    async def get_conditions_at(self, station_id, when):
        self.calls.append((station_id, when))
        if self.error:
            raise self.error
        return NearestConditionsResponse(
            station_id=station_id,
            requested_time=when,
            observation=self.buoy.buoy_data[0],
            offset_seconds=(self.buoy.buoy_data[0].time - when).total_seconds()
        )

@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def buoy():
    return Buoy(
        station_id="44097",
        buoy_data=[BuoyItem(time="2026-10-17T18:50:00Z", wind_speed=10.0, significant_wave_height=2.0, wind_gust=None)]
    )

def forecast_request(wave_forecast, **overrides):
    payload = {
        "location": {"latitude": 41.35, "longitude": -71.64, "name": "Matunuck"},
        "beach_angle": 180.0,
        "beach_slope": 0.02,
        "wave_forecast": wave_forecast.model_dump(mode="json"),
    }
    payload.update(overrides)
    return payload

@pytest.mark.unit
class TestForecastRoutes:
    def test_create_surf_forecast(self, client, wave_forecast):
        response = client.post("/forecasts/surf", json=forecast_request(wave_forecast))
        assert response.status_code == 200

        body = response.json()
        assert body["units"] == "metric"
        assert body["wind_model"] is None
        item = body["forecast_data"][0]
        assert item["primary_swell_component"]["wave_height"] == 2.0
        assert item["wind_gust_speed"] == -1.0
        assert item["wind_compass_direction"] == "S"

    def test_english_response(self, client, wave_forecast):
        metric = client.post("/forecasts/surf", json=forecast_request(wave_forecast)).json()
        english = client.post("/forecasts/surf", json=forecast_request(wave_forecast, units="english")).json()

        assert english["units"] == "english"
        assert english["forecast_data"][0]["maximum_breaking_height"] == pytest.approx(
            metric["forecast_data"][0]["maximum_breaking_height"] * 3.28084
        )
        assert english["forecast_data"][0]["wind_gust_speed"] == -1.0

    def test_with_wind_forecast(self, client, wave_forecast, wind_forecast):
        payload = forecast_request(wave_forecast, wind_forecast=wind_forecast.model_dump(mode="json"))
        body = client.post("/forecasts/surf", json=payload).json()

        assert body["wind_model"]["name"] == "gfs_0p25"
        assert body["forecast_data"][0]["wind_gust_speed"] == 6.0

    def test_missing_wave_data(self, client, wave_forecast):
        wave_forecast.forecast_data = []
        response = client.post("/forecasts/surf", json=forecast_request(wave_forecast))
        assert response.status_code == 422
        assert "No wave model data" in response.json()["detail"]

    def test_negative_swell_height_is_rejected(self, client, wave_forecast):
        payload = forecast_request(wave_forecast)
        payload["wave_forecast"]["forecast_data"][0]["primary_swell_wave_height"] = -2.0
        response = client.post("/forecasts/surf", json=payload)
        assert response.status_code == 422

@pytest.mark.unit
class TestBuoyRoutes:
    def test_observations(self, client, buoy):
        service = FakeBuoyService(buoy=buoy)
        app.dependency_overrides[get_service] = lambda: service

        response = client.get("/buoys/44097/observations", params={"limit": 5})
        assert response.status_code == 200
        body = response.json()
        assert body["station_id"] == "44097"
        assert body["buoy_data"][0]["wind_speed"] == 10.0
        assert body["buoy_data"][0]["wind_gust"] is None
        assert service.calls == [("44097", 5)]

    def test_observations_in_english_units(self, client, buoy):
        app.dependency_overrides[get_service] = lambda: FakeBuoyService(buoy=buoy)

        body = client.get("/buoys/44097/observations", params={"units": "english"}).json()
        assert body["units"] == "english"
        assert body["buoy_data"][0]["wind_speed"] == pytest.approx(22.3694)
        assert body["buoy_data"][0]["significant_wave_height"] == pytest.approx(6.56168)

    def test_conditions(self, client, buoy):
        app.dependency_overrides[get_service] = lambda: FakeBuoyService(buoy=buoy)

        response = client.get("/buoys/44097/conditions", params={"time": "2026-10-17T19:00:00"})
        assert response.status_code == 200
        body = response.json()
        assert body["offset_seconds"] == -600.0
        assert body["observation"]["wind_speed"] == 10.0

    @pytest.mark.parametrize("error,status", [
        (BuoyFetchError("NDBC unavailable"), 503),
        (BuoyParseError("bad report"), 502),
    ])
    def test_errors(self, client, error, status):
        app.dependency_overrides[get_service] = lambda: FakeBuoyService(error=error)

        assert client.get("/buoys/44097/observations").status_code == status
        assert client.get("/buoys/44097/conditions").status_code == status

@pytest.mark.unit
class TestWaveRoutes:
    def test_lookup(self, client):
        response = client.get("/waves/models/lookup", params={"lat": 37.746555, "lon": -122.550588})
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "multi_1.wc_10m"
        assert body["location_resolution"] == 0.167

    def test_lookup_outside_every_grid(self, client):
        response = client.get("/waves/models/lookup", params={"lat": 80.0, "lon": 10.0})
        assert response.status_code == 404

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
