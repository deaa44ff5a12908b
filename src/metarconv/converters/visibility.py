"""Visibility token conversion."""

from __future__ import annotations

import logging
from typing import Final, Optional

from metarconv.common.enums import DistanceUnit
from metarconv.constants import (
    VISIBILITY_GREATER_THAN,
    VISIBILITY_MAX_LABEL,
    VISIBILITY_MAX_TOKEN,
)
from metarconv.converters.distance import Distance
from metarconv.converters.parsing import parse_int

logger: Final = logging.getLogger(__name__)


def _split_magnitude_unit(text: str) -> Optional[tuple[str, str]]:
    """Find the first digit run directly followed by letters.

    Commas count as part of the unit, so "10KM," yields an unknown unit.

    Returns:
        ``(digits, letters)`` or None when no such pair exists
    """
    i = 0
    n = len(text)
    while i < n:
        if not ("0" <= text[i] <= "9"):
            i += 1
            continue
        start = i
        while i < n and "0" <= text[i] <= "9":
            i += 1
        end = i
        while i < n and (text[i] == "," or (text[i].isascii() and text[i].isalpha())):
            i += 1
        if i > end:
            return text[start:end], text[end:i]
    return None


class VisibilityConverter:
    """Normalize prevailing visibility tokens."""

    @staticmethod
    def convert_visibility(text: str) -> str:
        """Convert a metre visibility token to display text.

        Args:
            text: Four digit visibility in metres (e.g. "0800")

        Returns:
            ">10km" for "9999", otherwise the metres with an "m" suffix

        Raises:
            ParseError: If the token is not an integer
        """
        if text == VISIBILITY_MAX_TOKEN:
            return VISIBILITY_MAX_LABEL
        return f"{parse_int(text)}m"

    @staticmethod
    def convert_visibility_to_km(text: str) -> Optional[float]:
        """Convert a visibility with a unit suffix to kilometres.

        Args:
            text: Visibility such as "15SM", "10KM", "800M" or ">10KM"

        Returns:
            The distance in kilometres, or None when the token has no unit
            suffix or the unit is not SM, KM or M
        """
        parts = _split_magnitude_unit(text.replace(VISIBILITY_GREATER_THAN, ""))
        if parts is None:
            logger.debug("Visibility %r has no unit suffix", text)
            return None

        digits, suffix = parts
        value = parse_int(digits)
        try:
            unit = DistanceUnit(suffix.upper())
        except ValueError:
            logger.debug("Visibility %r has unknown unit %r", text, suffix)
            return None

        return Distance(value=value, unit=unit).to_km()
