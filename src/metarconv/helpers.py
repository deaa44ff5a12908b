"""Function-style entry points for the converters.

Each function delegates to the matching converter class method, for callers
that prefer plain functions.
"""

from __future__ import annotations

from datetime import time
from typing import Optional

from metarconv.common.enums import CompassKey
from metarconv.converters import (
    DirectionConverter,
    DistanceConverter,
    PrecipitationConverter,
    PressureConverter,
    TemperatureConverter,
    TimeConverter,
    VisibilityConverter,
)


def degrees_to_direction(text: str) -> CompassKey:
    """Convert a bearing token to a 16-point compass key, or VRB."""
    return DirectionConverter.degrees_to_direction(text)


def convert_visibility(text: str) -> str:
    """Convert a metre visibility token to display text."""
    return VisibilityConverter.convert_visibility(text)


def convert_visibility_to_km(text: str) -> Optional[float]:
    """Convert a visibility with a unit suffix to kilometres."""
    return VisibilityConverter.convert_visibility_to_km(text)


def convert_temperature_code(text: str) -> int:
    """Convert a main-group temperature token such as "M08"."""
    return TemperatureConverter.convert_temperature_code(text)


def convert_temperature_remark(sign: str, magnitude: str) -> float:
    """Convert a remark temperature given in tenths of a degree."""
    return TemperatureConverter.convert_temperature_remark(sign, magnitude)


def inches_mercury_to_hpascal(inches_mercury: float) -> float:
    """Convert inches of mercury to hectopascals."""
    return PressureConverter.inches_mercury_to_hpascal(inches_mercury)


def string_to_time(text: str) -> time:
    """Convert an HHMM token to a time of day."""
    return TimeConverter.string_to_time(text)


def convert_precipitation_amount(text: str) -> float:
    """Convert hundredths of an inch to inches."""
    return PrecipitationConverter.convert_precipitation_amount(text)


def km_to_sm(km: float) -> float:
    """Convert kilometres to statute miles."""
    return DistanceConverter.km_to_sm(km)


def sm_to_km(sm: float) -> float:
    """Convert statute miles to kilometres."""
    return DistanceConverter.sm_to_km(sm)
