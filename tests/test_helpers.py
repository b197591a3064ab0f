from datetime import datetime

import pytest

from toolbox_mcp import helpers
from toolbox_mcp.helpers import (
    SystemStatus,
    WeatherReading,
    evaluate_expression,
    get_current_system_status,
    get_weather_data,
)
from toolbox_mcp.toolbox_descriptions import CALCULATION_ERROR_MESSAGE


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2+3", "5.0"),
        ("10-4", "6.0"),
        ("3*4", "12.0"),
        ("10/4", "2.5"),
        ("1.5 + 1", "2.5"),
        ("  7 *  6 ", "42.0"),
        ("1.5e2*2", "300.0"),
    ],
)
def test_evaluate_two_operand_expressions(expression, expected):
    assert evaluate_expression(expression) == expected


@pytest.mark.parametrize(
    "expression",
    [
        "4/0",
        "4/0.0",
        "abc",
        "",
        "1+2+3",
        "2*3*4",
        "-5",
        "1+",
        "x+1",
        "1_000+1",
        "١+٢",
        "１+２",
    ],
)
def test_evaluate_invalid_expressions_return_error_string(expression):
    assert evaluate_expression(expression) == CALCULATION_ERROR_MESSAGE


def test_plus_is_checked_before_minus():
    # "-5+3" splits on "+" first, so the leading sign is kept on the operand
    assert evaluate_expression("-5+3") == "-2.0"
    assert evaluate_expression("3-5") == "-2.0"


def test_only_first_present_operator_is_tried():
    # "+" wins over "*", and "2*3" is not a number
    assert evaluate_expression("2*3+1") == CALCULATION_ERROR_MESSAGE
    # "-" wins over "/", leaving "8/2" unparsed
    assert evaluate_expression("8/2-1") == CALCULATION_ERROR_MESSAGE


def test_whitespace_of_any_kind_is_stripped():
    assert evaluate_expression("1\t+\n2") == "3.0"


def test_weather_imperial():
    reading = get_weather_data("Boston", "imperial")
    assert reading == WeatherReading(temperature=75.0, conditions="Sunny", humidity=65, wind_speed=10.0)


@pytest.mark.parametrize("units", ["metric", "kelvin", ""])
def test_weather_non_imperial_units_use_metric_values(units):
    reading = get_weather_data("Tokyo", units)
    assert reading.temperature == 24.0
    assert reading.wind_speed == 16.0
    assert reading.humidity == 65


def test_system_status_snapshot(monkeypatch):
    monkeypatch.setattr(helpers, "_now", lambda: datetime(2024, 3, 5, 14, 7, 9))

    status = get_current_system_status()

    assert status == SystemStatus(
        overall="normal",
        database="running",
        api="running",
        model="running",
        timestamp="2024-03-05 14:07:09",
    )


def test_system_status_timestamp_uses_wall_clock():
    timestamp = get_current_system_status().timestamp
    parsed = datetime.strptime(timestamp, "%Y-%m-%d %H:%M:%S")
    assert abs((datetime.now() - parsed).total_seconds()) < 60
