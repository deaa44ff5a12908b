"""Enumerations shared across the converters."""

from metarconv.common.enums import CompassKey, DistanceUnit

__all__ = ["CompassKey", "DistanceUnit"]
