"""Shared conversion constants."""

from __future__ import annotations

from typing import Final

# 16-point compass, clockwise from north
DIRECTIONS: Final[tuple[str, ...]] = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)

# Width of one compass sector and the offset used to centre sectors on each point
SECTOR_DEGREES: Final = 22.5
SECTOR_OFFSET: Final = 11.5

# Statute miles to kilometres ratio
SM_TO_KM: Final = 1.609344

# Inches of mercury to hectopascals
INHG_TO_HPA: Final = 33.8639

# Visibility of 10 km or more
VISIBILITY_MAX_TOKEN: Final = "9999"
VISIBILITY_MAX_LABEL: Final = ">10km"
VISIBILITY_GREATER_THAN: Final = ">"

# Primary temperature encoding uses "M" for minus
TEMPERATURE_MINUS: Final = "M"
