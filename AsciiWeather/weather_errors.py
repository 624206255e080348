"""Exception hierarchy shared by every stage of the weather pipeline."""

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_INVALID_INPUT = 2
EXIT_NOT_CONFIGURED = 3
EXIT_REMOTE_FAILURE = 4
EXIT_AUTH = 5
EXIT_WRITE_FAILED = 6
EXIT_INTERRUPTED = 130


class WeatherError(Exception):
    """Base class for errors the command line reports to the user."""
    exit_code = EXIT_INTERNAL


class ConfigError(WeatherError):
    """The saved configuration could not be used."""
    exit_code = EXIT_NOT_CONFIGURED


class ConfigMissing(ConfigError):
    """No configuration file exists yet."""


class ConfigCorrupt(ConfigError):
    """The configuration file exists but does not match the expected schema."""


class ConfigWriteError(ConfigError):
    """The configuration file could not be written."""
    exit_code = EXIT_WRITE_FAILED


class InvalidInput(WeatherError):
    """Malformed user input, caught before any network call."""
    exit_code = EXIT_INVALID_INPUT


class NetworkError(WeatherError):
    """Connection failure or timeout talking to a remote service."""
    exit_code = EXIT_REMOTE_FAILURE


class RateLimited(WeatherError):
    """A remote service asked us to slow down (HTTP 429)."""
    exit_code = EXIT_REMOTE_FAILURE


class ResolutionError(WeatherError):
    """The geocoding service could not turn a postal code into coordinates."""
    exit_code = EXIT_REMOTE_FAILURE


class LocationNotFound(ResolutionError):
    """The geocoding service returned no match for the postal code."""


class FetchError(WeatherError):
    """The weather service did not return a usable reading."""
    exit_code = EXIT_REMOTE_FAILURE


class AuthError(FetchError):
    """The API key is missing or was rejected (HTTP 401)."""
    exit_code = EXIT_AUTH


class UpstreamError(FetchError):
    """The weather service failed on its side (HTTP 5xx) or answered unexpectedly."""


class ParseError(FetchError):
    """The weather response is missing required fields."""
