"""Postal code to coordinates lookup using the Zippopotam.us API."""
import logging
import re

import requests

from weather_data import Location
from weather_errors import (
    InvalidInput,
    LocationNotFound,
    NetworkError,
    RateLimited,
    ResolutionError,
)

ZIP_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 \-]{1,9}$")
COUNTRY_PATTERN = re.compile(r"^[A-Za-z]{2}$")


def normalize_zip(zip_code: str) -> str:
    """Return the stripped postal code, or raise InvalidInput if it cannot be one."""
    candidate = (zip_code or "").strip()
    if not ZIP_PATTERN.match(candidate):
        raise InvalidInput(f"'{zip_code}' is not a valid postal code")
    return candidate


def normalize_country(country_hint: str) -> str:
    """Return the lower-cased two-letter country code, or raise InvalidInput."""
    candidate = (country_hint or "").strip().lower()
    if not COUNTRY_PATTERN.match(candidate):
        raise InvalidInput(f"'{country_hint}' is not a two-letter country code")
    return candidate


class LocationResolver:
    """
    Resolve a postal code to a Location.

    Uses Zippopotam.us (http://www.zippopotam.us/), which needs no API key.
    When a code maps to several places the first one returned wins.
    """

    BASE_URL = "http://api.zippopotam.us"
    DEFAULT_COUNTRY = "us"

    def __init__(self, timeout: int = 10):
        """
        Initialize the resolver.

        Args:
            timeout: HTTP request timeout in seconds
        """
        self.timeout = timeout

    def resolve(self, zip_code: str, country_hint: str = None) -> Location:
        """
        Look up the coordinates for a postal code.

        Args:
            zip_code: Postal code, e.g. "12345"
            country_hint: Two-letter country code, defaults to "us"

        Returns:
            Location: Coordinates and "<place>, <state>" label

        Raises:
            InvalidInput: If the code or country is malformed (no request is made)
            NetworkError: On connection failure or timeout
            LocationNotFound: If the service knows no place for the code
            RateLimited: If the service answers HTTP 429
            ResolutionError: For any other unexpected answer
        """
        zip_code = normalize_zip(zip_code)
        country = normalize_country(country_hint or self.DEFAULT_COUNTRY)
        url = f"{self.BASE_URL}/{country}/{requests.utils.quote(zip_code)}"

        try:
            logging.info(f"Making geocoding request: {url}")
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during geocoding request: {e}")
            raise NetworkError(f"Geocoding service unreachable: {e}") from e

        logging.info(f"Geocoding response status: {response.status_code}")
        if response.status_code == 404:
            raise LocationNotFound(f"No location found for postal code {zip_code} ({country.upper()})")
        if response.status_code == 429:
            raise RateLimited("Geocoding service rate limit reached, try again later")
        if not response.ok:
            raise ResolutionError(f"Geocoding service returned HTTP {response.status_code}")

        try:
            places = response.json().get("places") or []
            if not places:
                raise LocationNotFound(f"No location found for postal code {zip_code} ({country.upper()})")
            if len(places) > 1:
                logging.debug(f"{len(places)} places match {zip_code}, using the first")
            place = places[0]
            name = place.get("place name", "")
            state = place.get("state abbreviation", "")
            label = f"{name}, {state}" if name and state else name
            location = Location(
                latitude=float(place["latitude"]),
                longitude=float(place["longitude"]),
                label=label,
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse geocoding response: {e}", exc_info=True)
            raise ResolutionError(f"Unexpected geocoding response: {e}") from e

        logging.info(f"Resolved {zip_code} to {location.label} ({location.latitude}, {location.longitude})")
        return location
