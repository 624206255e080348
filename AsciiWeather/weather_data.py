"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise ValueError unless latitude/longitude are within valid ranges."""
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"latitude {latitude} outside [-90, 90]")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude {longitude} outside [-180, 180]")


@dataclass(frozen=True)
class Location:
    """A resolved place: coordinates plus a human readable label."""
    latitude: float
    longitude: float
    label: str = ""

    def __post_init__(self):
        validate_coordinates(self.latitude, self.longitude)


@dataclass
class WeatherReading:
    """Current conditions for one place, built fresh on every run."""
    temperature: float  # °C
    temp_min: float
    temp_max: float
    wind_speed: float  # m/s
    condition_code: int  # OpenWeather condition id, e.g. 800
    location_label: str = ""
    condition_label: str = ""  # e.g. "broken clouds"
