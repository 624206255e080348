"""Terminal weather: current conditions next to a small ASCII-art glyph."""
import argparse
import dataclasses
import getpass
import logging
import os
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv

from art_renderer import render
from location_resolver import LocationResolver, normalize_country, normalize_zip
from openweather_provider import OpenWeatherProvider
from weather_config import Config, ConfigStore
from weather_errors import (
    EXIT_INTERNAL,
    EXIT_INTERRUPTED,
    EXIT_OK,
    ConfigMissing,
    InvalidInput,
    LocationNotFound,
    WeatherError,
)
from weather_provider import WeatherProviderBase

API_KEY_ENV_VAR = "WEATHER_API_KEY"
PROG = "ascii-weather"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Show current weather with a little ASCII art.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--setup", action="store_true", help="Save an API key and default location")
    mode.add_argument("--zip", metavar="CODE", help="Show weather for this postal code instead of the default")
    parser.add_argument("--country", metavar="CC", help="Two-letter country code for postal codes (default: us)")
    parser.add_argument("--config", metavar="PATH", help="Config file to use instead of the default location")
    parser.add_argument("--timeout", type=positive_int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def positive_int(value: str) -> int:
    """argparse type for whole numbers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a whole number")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {number}")
    return number


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # stdout carries the weather block; diagnostics only appear on request.
    handlers = []
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        handlers.append(file_handler)
    if not handlers:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )
    # urllib3 logs full request URLs at DEBUG, including the appid query parameter.
    logging.getLogger("urllib3").setLevel(logging.INFO)


def prompt_until_valid(prompt: str, validate: Callable[[str], str], read: Callable[[str], str]) -> str:
    """Ask until validate() accepts the answer; InvalidInput means ask again."""
    while True:
        try:
            return validate(read(prompt))
        except InvalidInput as err:
            print(f"  {err}", file=sys.stderr)


def validate_api_key(value: str) -> str:
    value = (value or "").strip()
    if not value or any(ch.isspace() for ch in value):
        raise InvalidInput("API key must be a single non-empty word")
    return value


def run_setup(
    store: ConfigStore,
    resolver: LocationResolver,
    country: Optional[str] = None,
    read: Optional[Callable[[str], str]] = None,
    read_secret: Optional[Callable[[str], str]] = None,
) -> Config:
    """
    Interactive setup: collect a key and postal code, resolve, save.

    Nothing is written until every answer is collected and the location
    resolves, so an interrupted run leaves any existing config untouched.
    """
    read = read or input
    read_secret = read_secret or getpass.getpass
    env_key = os.getenv(API_KEY_ENV_VAR)
    try:
        if env_key:
            key_prompt = "OpenWeather API key [from $WEATHER_API_KEY]: "
            api_key = prompt_until_valid(key_prompt, lambda v: validate_api_key(v or env_key), read_secret)
        else:
            api_key = prompt_until_valid("OpenWeather API key: ", validate_api_key, read_secret)

        if country is None:
            country = prompt_until_valid(
                f"Country code [{resolver.DEFAULT_COUNTRY}]: ",
                lambda v: normalize_country(v or resolver.DEFAULT_COUNTRY),
                read,
            )
        else:
            country = normalize_country(country)

        while True:
            zip_code = prompt_until_valid("Postal code: ", normalize_zip, read)
            try:
                location = resolver.resolve(zip_code, country)
                break
            except LocationNotFound as err:
                print(f"  {err}", file=sys.stderr)
    except EOFError as e:
        raise InvalidInput("Setup needs interactive input; nothing was saved") from e

    config = Config(
        api_key=api_key,
        latitude=location.latitude,
        longitude=location.longitude,
        location_label=location.label,
    )
    store.save(config)
    return config


def resolve_api_key(store: ConfigStore) -> str:
    """The environment key wins over the saved one."""
    env_key = (os.getenv(API_KEY_ENV_VAR) or "").strip()
    if env_key:
        logging.debug(f"Using API key from ${API_KEY_ENV_VAR}")
        return env_key
    return store.load_api_key()


def display_default(store: ConfigStore, provider: WeatherProviderBase) -> str:
    """Weather for the saved location."""
    config = store.load()
    api_key = (os.getenv(API_KEY_ENV_VAR) or "").strip() or config.api_key
    reading = provider.fetch(config.latitude, config.longitude, api_key)
    if config.location_label:
        reading = dataclasses.replace(reading, location_label=config.location_label)
    return render(reading)


def display_ad_hoc(
    zip_code: str,
    country: Optional[str],
    store: ConfigStore,
    resolver: LocationResolver,
    provider: WeatherProviderBase,
) -> str:
    """Weather for a one-off postal code; only the saved credential is used."""
    api_key = resolve_api_key(store)
    location = resolver.resolve(zip_code, country)
    reading = provider.fetch(location.latitude, location.longitude, api_key)
    if location.label:
        reading = dataclasses.replace(reading, location_label=location.label)
    return render(reading)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    load_dotenv()

    store = ConfigStore(args.config)
    resolver = LocationResolver(timeout=args.timeout)
    provider = OpenWeatherProvider(timeout=args.timeout)
    logging.info("Mode: %s, config: %s", "setup" if args.setup else ("zip" if args.zip else "default"), store.path)

    try:
        if args.setup:
            config = run_setup(store, resolver, args.country)
            where = config.location_label or f"{config.latitude}, {config.longitude}"
            print(f"Saved configuration to {store.path} (default location: {where})")
        elif args.zip is not None:
            print(display_ad_hoc(args.zip, args.country, store, resolver, provider))
        else:
            print(display_default(store, provider))
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        print("\nAborted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except ConfigMissing as err:
        logging.info("No configuration: %s", err)
        print(f"{err}. Run '{PROG} --setup' first.", file=sys.stderr)
        return err.exit_code
    except WeatherError as err:
        logging.error("%s: %s", type(err).__name__, err)
        print(f"Error: {err}", file=sys.stderr)
        return err.exit_code
    except Exception as exc:
        logging.exception("Unexpected error: %s", exc)
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return EXIT_INTERNAL

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
