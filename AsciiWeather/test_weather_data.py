"""Tests for weather_data module."""
import pytest
from weather_data import Location, WeatherReading, validate_coordinates


def test_weather_reading_creation():
    """Test creating WeatherReading with required fields."""
    reading = WeatherReading(
        temperature=19.29,
        temp_min=20.21,
        temp_max=0.0,
        wind_speed=17.27,
        condition_code=800,
        location_label="Schenectady",
    )

    assert reading.temperature == 19.29
    assert reading.temp_min == 20.21
    assert reading.temp_max == 0.0
    assert reading.wind_speed == 17.27
    assert reading.condition_code == 800
    assert reading.location_label == "Schenectady"
    assert reading.condition_label == ""


def test_location_accepts_range_edges():
    location = Location(latitude=-90.0, longitude=180.0, label="Edge")
    assert location.latitude == -90.0
    assert location.longitude == 180.0


@pytest.mark.parametrize("lat,lon", [(90.01, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)])
def test_location_rejects_out_of_range(lat, lon):
    with pytest.raises(ValueError):
        Location(latitude=lat, longitude=lon)


def test_validate_coordinates_message_names_field():
    with pytest.raises(ValueError) as exc_info:
        validate_coordinates(0.0, 200.0)
    assert "longitude" in str(exc_info.value)
