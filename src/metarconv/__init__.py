"""metarconv - conversion of encoded weather report tokens."""

__version__ = "0.1.0"

from .common.enums import CompassKey, DistanceUnit
from .constants import DIRECTIONS, SM_TO_KM
from .errors import ConversionError, ParseError
from .helpers import (
    convert_precipitation_amount,
    convert_temperature_code,
    convert_temperature_remark,
    convert_visibility,
    convert_visibility_to_km,
    degrees_to_direction,
    inches_mercury_to_hpascal,
    km_to_sm,
    sm_to_km,
    string_to_time,
)
from .i18n import Messages

# Define what gets imported with: from metarconv import *
__all__ = [
    "DIRECTIONS",
    "SM_TO_KM",
    "CompassKey",
    "ConversionError",
    "DistanceUnit",
    "Messages",
    "ParseError",
    "convert_precipitation_amount",
    "convert_temperature_code",
    "convert_temperature_remark",
    "convert_visibility",
    "convert_visibility_to_km",
    "degrees_to_direction",
    "inches_mercury_to_hpascal",
    "km_to_sm",
    "sm_to_km",
    "string_to_time",
]
