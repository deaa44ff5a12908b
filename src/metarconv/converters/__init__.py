"""Report token converters, one class per kind of token."""

from metarconv.converters.clock import TimeConverter
from metarconv.converters.direction import DirectionConverter
from metarconv.converters.distance import Distance, DistanceConverter
from metarconv.converters.precipitation import PrecipitationConverter
from metarconv.converters.pressure import PressureConverter
from metarconv.converters.temperature import TemperatureConverter
from metarconv.converters.visibility import VisibilityConverter

__all__ = [
    "DirectionConverter",
    "Distance",
    "DistanceConverter",
    "PrecipitationConverter",
    "PressureConverter",
    "TemperatureConverter",
    "TimeConverter",
    "VisibilityConverter",
]
