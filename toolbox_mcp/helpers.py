"""
Domain helpers for the toolbox server.

Everything in here is pure and I/O free. The weather lookup returns mock
data, and the status snapshot only reads the wall clock.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

from toolbox_mcp.config import STATUS_TIMESTAMP_FORMAT, Units
from toolbox_mcp.toolbox_descriptions import (
    CALCULATION_ERROR_MESSAGE,
    STATUS_OK,
    STATUS_RUNNING,
    WEATHER_CONDITIONS,
)


@dataclass(frozen=True)
class WeatherReading:
    temperature: float
    conditions: str
    humidity: int
    wind_speed: float


@dataclass(frozen=True)
class SystemStatus:
    overall: str
    database: str
    api: str
    model: str
    timestamp: str


# ------------------------------------------------------------------
# Weather
# ------------------------------------------------------------------
def get_weather_data(location: str, units: str) -> WeatherReading:
    """
    Return the current weather for a location.

    This is mock data: the location is not consulted and only the unit
    flag changes the numbers. "imperial" gives Fahrenheit and mph, any other
    value gives Celsius and km/h.
    """
    imperial = units == Units.IMPERIAL
    return WeatherReading(
        temperature=75.0 if imperial else 24.0,
        conditions=WEATHER_CONDITIONS,
        humidity=65,
        wind_speed=10.0 if imperial else 16.0,
    )


# ------------------------------------------------------------------
# Calculator
# ------------------------------------------------------------------
# Plain decimal literal: optional sign, digits with optional fraction,
# optional exponent, or inf/nan. Rejects "1_000" and other Python-only forms.
_DECIMAL_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": lambda left, right: left / right,
}


def _parse_number(text: str) -> Optional[float]:
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return float(text)


def evaluate_expression(expression: str) -> str:
    """
    Evaluate a single two-operand expression such as "12 * 3".

    Operators are looked up by presence in the order + - * / and only the
    first one found is tried, so "-5+3" is addition and "2*3+1" fails.
    Never raises: every failure returns CALCULATION_ERROR_MESSAGE.
    """
    clean = "".join(expression.split())

    for operator, apply in _OPERATIONS.items():
        if operator not in clean:
            continue

        parts = clean.split(operator)
        if len(parts) != 2:
            break
        left, right = _parse_number(parts[0]), _parse_number(parts[1])
        if left is None or right is None:
            break
        if operator == "/" and right == 0:
            break
        return str(apply(left, right))

    return CALCULATION_ERROR_MESSAGE


# ------------------------------------------------------------------
# System status
# ------------------------------------------------------------------
def _now() -> datetime:
    return datetime.now()


def get_current_system_status() -> SystemStatus:
    return SystemStatus(
        overall=STATUS_OK,
        database=STATUS_RUNNING,
        api=STATUS_RUNNING,
        model=STATUS_RUNNING,
        timestamp=_now().strftime(STATUS_TIMESTAMP_FORMAT),
    )
