from enum import Enum


class CompassKey(Enum):
    """Symbolic wind direction keys.

    The 16 compass points in clockwise order, plus ``VRB`` for a direction
    that cannot be determined (variable or calm). Display text is resolved
    separately through a message catalog.
    """

    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"
    VRB = "VRB"

    @property
    def message_key(self) -> str:
        """Catalog key for this direction (e.g. ``Converter.NNE``)."""
        return f"Converter.{self.value}"


class DistanceUnit(Enum):
    """Distance units found in visibility groups."""

    KILOMETERS = "KM"
    STATUTE_MILES = "SM"
    METERS = "M"
