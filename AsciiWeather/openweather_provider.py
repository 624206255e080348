"""OpenWeather Current Weather API provider implementation."""
import logging
import requests
from weather_provider import WeatherProviderBase
from weather_data import WeatherReading
from weather_errors import (
    AuthError,
    NetworkError,
    ParseError,
    RateLimited,
    UpstreamError,
)


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    Readings are always requested in metric units (°C, m/s) so the output
    does not depend on the account's default unit system.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
    UNITS = "metric"

    def __init__(self, lang: str = "en", timeout: int = 10):
        """
        Initialize OpenWeather provider.

        Args:
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds
        """
        self.lang = lang
        self.timeout = timeout

    def fetch(self, latitude: float, longitude: float, api_key: str) -> WeatherReading:
        """
        Fetch current weather from OpenWeather Current Weather API.

        Args:
            latitude: Latitude (-90 to 90)
            longitude: Longitude (-180 to 180)
            api_key: OpenWeather API key

        Returns:
            WeatherReading: Current weather information

        Raises:
            AuthError: Missing or rejected API key (HTTP 401)
            RateLimited: HTTP 429
            UpstreamError: HTTP 5xx or any other unexpected status
            NetworkError: Connection failure or timeout
            ParseError: Response is missing required fields
        """
        if not api_key:
            raise AuthError("No OpenWeather API key configured")

        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": api_key,
            "units": self.UNITS,
            "lang": self.lang,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.BASE_URL}")
            logging.debug(f"Request parameters: lat={latitude}, lon={longitude}, units={self.UNITS}, lang={self.lang}")
            response = requests.get(self.BASE_URL, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise NetworkError(f"Weather service unreachable: {e}") from e

        logging.info(f"API response status: {response.status_code}")

        if not response.ok:
            logging.error(f"API request failed with status {response.status_code}")
            self._handle_error_response(response)

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Non-JSON response body: {response.text[:500]}")
            raise ParseError("Weather response is not valid JSON") from e

        return self._parse(data)

    def _parse(self, data: dict) -> WeatherReading:
        """Map the API payload onto a WeatherReading."""
        try:
            logging.debug(f"API response data keys: {list(data.keys())}")
            logging.debug(f"API response (truncated): {str(data)[:500]}...")

            # Current Weather API returns data directly (not nested in "current")
            weather_array = data.get("weather") or []
            if not weather_array:
                raise ParseError("Response missing 'weather' array")
            weather = weather_array[0]
            logging.debug(f"Weather condition: {weather.get('id')} - {weather.get('description')}")

            main_data = data.get("main") or {}
            if not main_data:
                raise ParseError("Response missing 'main' block")

            wind_data = data.get("wind") or {}
            if "speed" not in wind_data:
                raise ParseError("Response missing 'wind.speed'")

            reading = WeatherReading(
                temperature=float(main_data["temp"]),
                temp_min=float(main_data["temp_min"]),
                temp_max=float(main_data["temp_max"]),
                wind_speed=float(wind_data["speed"]),
                condition_code=int(weather["id"]),
                location_label=data.get("name") or "",
                condition_label=weather.get("description") or "",
            )
        except ParseError:
            raise
        except KeyError as e:
            logging.error(f"Failed to parse API response: missing {e}")
            raise ParseError(f"Response missing required field {e}") from e
        except (AttributeError, ValueError, TypeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise ParseError(f"Failed to parse response: {e}") from e

        logging.info(f"Successfully parsed weather data: {reading.temperature}°C, condition {reading.condition_code}")
        return reading

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise the error matching an OpenWeather error response."""
        status = response.status_code
        try:
            error_data = response.json()
            cod = error_data.get("cod", status)
            message = error_data.get("message", "Unknown error")
            logging.error(f"OpenWeather API error response: {error_data}")
            error_msg = f"OpenWeather API error {cod}: {message}"
        except (ValueError, AttributeError):
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {status}, body: {response.text[:500]}")
            error_msg = f"HTTP {status}: {response.text[:200]}"

        if status == 401:
            raise AuthError(error_msg)
        if status == 429:
            raise RateLimited(error_msg)
        raise UpstreamError(error_msg)
