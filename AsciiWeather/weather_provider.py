"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from weather_data import WeatherReading


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def fetch(self, latitude: float, longitude: float, api_key: str) -> WeatherReading:
        """
        Fetch current weather for a coordinate pair.

        Returns:
            WeatherReading: Current weather information

        Raises:
            FetchError: If the provider answers but gives no usable reading
            NetworkError: If the provider cannot be reached
            RateLimited: If the provider throttles the request
        """
        pass
