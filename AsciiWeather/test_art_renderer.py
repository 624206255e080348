"""Tests for art selection and text layout."""
import pytest
from weather_data import WeatherReading
from art_renderer import (
    ART_TEMPLATES,
    ART_WIDTH,
    ArtCategory,
    art_for,
    categorize,
    format_readings,
    render,
)


@pytest.fixture
def schenectady_reading():
    """Reading with a clear sky condition."""
    return WeatherReading(
        temperature=19.29,
        temp_min=20.21,
        temp_max=0,
        wind_speed=17.27,
        condition_code=800,
        location_label="Schenectady",
    )


@pytest.mark.parametrize("codes,expected", [
    (range(200, 300), ArtCategory.THUNDERSTORM),
    (range(300, 400), ArtCategory.DRIZZLE),
    (range(500, 600), ArtCategory.RAIN),
    (range(600, 700), ArtCategory.SNOW),
    (range(700, 800), ArtCategory.MIST),
    ([800], ArtCategory.CLEAR),
    (range(801, 805), ArtCategory.CLOUDS),
])
def test_categorize_known_ranges(codes, expected):
    for code in codes:
        assert categorize(code) == expected, code


@pytest.mark.parametrize("code", [-1, 0, 199, 400, 450, 499, 805, 900, 1000])
def test_categorize_unknown(code):
    assert categorize(code) == ArtCategory.UNKNOWN


def test_every_category_has_art():
    for category in ArtCategory:
        art = art_for(category)
        assert art
        assert all(len(line) < ART_WIDTH for line in art)


def test_render_never_fails():
    for code in range(-5, 1010):
        reading = WeatherReading(1.0, 0.0, 2.0, 3.0, condition_code=code)
        output = render(reading)
        assert output.strip()


def test_render_right_column(schenectady_reading):
    output = render(schenectady_reading)

    assert "Temperature: 19.29" in output
    assert "Min: 20.21" in output
    assert "Max: 0" in output
    assert "Wind Speed: 17.27" in output


def test_render_uses_clear_art(schenectady_reading):
    lines = render(schenectady_reading).splitlines()
    clear = ART_TEMPLATES[ArtCategory.CLEAR]

    for line, art_line in zip(lines, clear):
        assert line[:ART_WIDTH].rstrip() == art_line.rstrip()


def test_render_columns_line_up(schenectady_reading):
    lines = render(schenectady_reading).splitlines()
    art_rows = lines[:-1]

    assert all(line[ART_WIDTH] == "|" for line in art_rows)


def test_render_location_beneath_art(schenectady_reading):
    lines = render(schenectady_reading).splitlines()

    assert lines[-1] == "Schenectady"
    assert len(lines) == len(ART_TEMPLATES[ArtCategory.CLEAR]) + 1


def test_render_two_decimal_places():
    reading = WeatherReading(-3.456, -10, 5.5, 0.004, condition_code=601)
    readings = format_readings(reading)

    assert readings[0] == "Temperature: -3.46 °C"
    assert readings[1] == "Min: -10.00 °C"
    assert readings[2] == "Max: 5.50 °C"
    assert readings[3] == "Wind Speed: 0.00 m/s"


def test_render_includes_condition_label():
    reading = WeatherReading(5.0, 4.0, 6.0, 1.0, condition_code=500, condition_label="light rain")
    output = render(reading)

    assert "Condition: light rain" in output


def test_render_more_readings_than_art_rows():
    reading = WeatherReading(5.0, 4.0, 6.0, 1.0, condition_code=500, condition_label="light rain")
    reading_lines = format_readings(reading)
    art_lines = art_for(ArtCategory.RAIN)

    output = render(reading).splitlines()

    assert len(output) == max(len(reading_lines), len(art_lines))
    assert all("|" in line for line in output)
