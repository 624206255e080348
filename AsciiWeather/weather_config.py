"""Persisted user configuration: API key and default location."""
import logging
import os
import tempfile
from dataclasses import dataclass

from dotenv import dotenv_values, set_key

from weather_data import validate_coordinates
from weather_errors import ConfigCorrupt, ConfigMissing, ConfigWriteError

CONFIG_ENV_VAR = "ASCII_WEATHER_CONFIG"
CONFIG_DIR_NAME = "ascii-weather"
CONFIG_FILE_NAME = "config.env"

KEY_API_KEY = "api_key"
KEY_LATITUDE = "latitude"
KEY_LONGITUDE = "longitude"
KEY_LABEL = "location_label"


def default_config_path() -> str:
    """
    Resolve where the config file lives.

    $ASCII_WEATHER_CONFIG wins, then $XDG_CONFIG_HOME/ascii-weather/config.env,
    then ~/.config/ascii-weather/config.env.
    """
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return os.path.expanduser(override)
    base = os.getenv("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, CONFIG_DIR_NAME, CONFIG_FILE_NAME)


@dataclass(frozen=True)
class Config:
    """Saved defaults: the OpenWeather credential and the home location."""
    api_key: str
    latitude: float
    longitude: float
    location_label: str = ""

    def validate(self) -> None:
        """Raise ValueError if the key is blank or the coordinates are out of range."""
        if not self.api_key or not self.api_key.strip():
            raise ValueError("api_key is empty")
        validate_coordinates(self.latitude, self.longitude)


class ConfigStore:
    """
    Loads and saves a Config as a dotenv-style file.

    The file holds one KEY='value' line per field and is only ever written
    by the setup flow.
    """

    def __init__(self, path: str = None):
        self.path = path or default_config_path()

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def _read_values(self) -> dict:
        if not self.exists():
            raise ConfigMissing(f"No configuration found at {self.path}")
        try:
            with open(self.path, encoding="utf-8") as stream:
                values = dotenv_values(stream=stream, interpolate=False)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigCorrupt(f"Cannot read configuration {self.path}: {e}") from e
        logging.debug(f"Config keys read from {self.path}: {sorted(values)}")
        return values

    def load(self) -> Config:
        """
        Read the full configuration.

        Raises:
            ConfigMissing: If the file does not exist
            ConfigCorrupt: If a field is missing, empty, non-numeric or out of range
        """
        values = self._read_values()
        try:
            config = Config(
                api_key=(values.get(KEY_API_KEY) or "").strip(),
                latitude=float(values[KEY_LATITUDE]),
                longitude=float(values[KEY_LONGITUDE]),
                location_label=values.get(KEY_LABEL) or "",
            )
            config.validate()
        except KeyError as e:
            raise ConfigCorrupt(f"Configuration {self.path} is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigCorrupt(f"Configuration {self.path} is invalid: {e}") from e
        logging.info(f"Configuration loaded: lat={config.latitude} lon={config.longitude}")
        return config

    def load_api_key(self) -> str:
        """Read only the credential, ignoring the stored location."""
        api_key = (self._read_values().get(KEY_API_KEY) or "").strip()
        if not api_key:
            raise ConfigCorrupt(f"Configuration {self.path} has no {KEY_API_KEY}")
        return api_key

    def save(self, config: Config) -> None:
        """
        Write the configuration, replacing any existing file.

        The new content is written to a temporary file next to the target
        and moved into place, so a failure leaves the old file intact.

        Raises:
            ConfigWriteError: On permission or disk failure
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".config-", suffix=".tmp", dir=directory)
            os.close(fd)
            set_key(tmp_path, KEY_API_KEY, config.api_key)
            set_key(tmp_path, KEY_LATITUDE, repr(float(config.latitude)))
            set_key(tmp_path, KEY_LONGITUDE, repr(float(config.longitude)))
            set_key(tmp_path, KEY_LABEL, config.location_label or "")
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logging.error(f"Failed to write configuration {self.path}: {e}")
            raise ConfigWriteError(f"Cannot write configuration {self.path}: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        try:
            os.chmod(self.path, 0o600)
        except OSError as e:
            logging.warning(f"Could not restrict permissions on {self.path}: {e}")
        logging.info(f"Configuration saved to {self.path}")
