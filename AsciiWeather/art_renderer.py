"""ASCII art selection and text layout - pure functions for testability."""
from enum import Enum
from typing import List, Tuple

from weather_data import WeatherReading


class ArtCategory(Enum):
    THUNDERSTORM = "Thunderstorm"
    DRIZZLE = "Drizzle"
    RAIN = "Rain"
    SNOW = "Snow"
    MIST = "Mist/Fog"
    CLEAR = "Clear"
    CLOUDS = "Clouds"
    UNKNOWN = "Unknown"


# OpenWeather condition id groups: https://openweathermap.org/weather-conditions
# Inclusive (low, high) ranges, checked in order.
CONDITION_RANGES: Tuple[Tuple[int, int, ArtCategory], ...] = (
    (200, 299, ArtCategory.THUNDERSTORM),
    (300, 399, ArtCategory.DRIZZLE),
    (500, 599, ArtCategory.RAIN),
    (600, 699, ArtCategory.SNOW),
    (700, 799, ArtCategory.MIST),
    (800, 800, ArtCategory.CLEAR),
    (801, 804, ArtCategory.CLOUDS),
)

ART_TEMPLATES = {
    ArtCategory.CLEAR: (
        r"    \   /    ",
        r"     .-.     ",
        r"  - (   ) -  ",
        r"     `-'     ",
        r"    /   \    ",
    ),
    ArtCategory.CLOUDS: (
        r"             ",
        r"     .--.    ",
        r"  .-(    ).  ",
        r" (___.__)__) ",
        r"             ",
    ),
    ArtCategory.DRIZZLE: (
        r"     .-.     ",
        r"    (   ).   ",
        r"   (___(__)  ",
        r"     ' ' '   ",
        r"    ' ' '    ",
    ),
    ArtCategory.RAIN: (
        r"     .-.     ",
        r"    (   ).   ",
        r"   (___(__)  ",
        r"    ,',',',  ",
        r"   ,',',',   ",
    ),
    ArtCategory.SNOW: (
        r"     .-.     ",
        r"    (   ).   ",
        r"   (___(__)  ",
        r"    *  *  *  ",
        r"   *  *  *   ",
    ),
    ArtCategory.THUNDERSTORM: (
        r"     .-.     ",
        r"    (   ).   ",
        r"   (___(__)  ",
        r"    /_  /_   ",
        r"     /   /   ",
    ),
    ArtCategory.MIST: (
        r"             ",
        r" _ - _ - _ - ",
        r"  _ - _ - _  ",
        r" _ - _ - _ - ",
        r"             ",
    ),
    ArtCategory.UNKNOWN: (
        r"    .-.      ",
        r"     __)     ",
        r"    (        ",
        r"     `-'     ",
        r"      *      ",
    ),
}

ART_WIDTH = max(len(line) for art in ART_TEMPLATES.values() for line in art) + 1
SEPARATOR = "| "
DECIMALS = 2


def categorize(condition_code: int) -> ArtCategory:
    """
    Map an OpenWeather condition id to an art category.

    Codes outside every known group fall back to ArtCategory.UNKNOWN.
    """
    for low, high, category in CONDITION_RANGES:
        if low <= condition_code <= high:
            return category
    return ArtCategory.UNKNOWN


def art_for(category: ArtCategory) -> List[str]:
    """Return the template lines for a category."""
    return list(ART_TEMPLATES.get(category, ART_TEMPLATES[ArtCategory.UNKNOWN]))


def format_number(value: float) -> str:
    return f"{value:.{DECIMALS}f}"


def format_readings(reading: WeatherReading) -> List[str]:
    """Labeled values for the right-hand column."""
    lines = [
        f"Temperature: {format_number(reading.temperature)} °C",
        f"Min: {format_number(reading.temp_min)} °C",
        f"Max: {format_number(reading.temp_max)} °C",
        f"Wind Speed: {format_number(reading.wind_speed)} m/s",
    ]
    if reading.condition_label:
        lines.append(f"Condition: {reading.condition_label}")
    return lines


def render(reading: WeatherReading) -> str:
    """
    Build the display block: art on the left, readings on the right.

    Every row carries the separator so the right-hand column lines up, and
    the location label goes on the line under the art.

    Args:
        reading: Weather reading to display

    Returns:
        Multi-line string, no trailing newline
    """
    art = art_for(categorize(reading.condition_code))
    readings = format_readings(reading)

    rows = []
    for index in range(max(len(art), len(readings))):
        left = art[index] if index < len(art) else ""
        right = readings[index] if index < len(readings) else ""
        rows.append(f"{left.ljust(ART_WIDTH)}{SEPARATOR}{right}".rstrip())

    if reading.location_label:
        rows.append(reading.location_label)
    return "\n".join(rows)
