"""Temperature token conversion.

Reports encode temperature two ways. The main temperature/dew point group
uses an ``M`` prefix for negative whole degrees (``M08``), while the remarks
section carries a separate sign flag and tenths of a degree (``1`` +
``023`` = -2.3°). The two are unrelated and have separate entry points.
"""

from __future__ import annotations

from metarconv.constants import TEMPERATURE_MINUS
from metarconv.converters.parsing import parse_int, parse_real
from metarconv.errors import ParseError


class TemperatureConverter:
    """Decode temperature tokens to degrees Celsius."""

    @staticmethod
    def convert_temperature_code(text: str) -> int:
        """Convert a main-group temperature token.

        Args:
            text: Token such as "15" or "M08"

        Returns:
            Whole degrees Celsius

        Raises:
            ParseError: If the digits are malformed or missing after "M"
        """
        if text.startswith(TEMPERATURE_MINUS):
            digits = text[1:3]
            if len(digits) < 2:
                raise ParseError("Truncated negative temperature", text)
            return -parse_int(digits)
        return parse_int(text)

    @staticmethod
    def convert_temperature_remark(sign: str, magnitude: str) -> float:
        """Convert a remark temperature in tenths of a degree.

        Args:
            sign: "0" for zero or above, anything else for below zero
            magnitude: Three digit value in tenths of a degree (e.g. "023")

        Returns:
            Degrees Celsius

        Raises:
            ParseError: If the magnitude is not a number
        """
        temperature = parse_real(magnitude) / 10
        return temperature if sign == "0" else -temperature

    @staticmethod
    def celsius_to_fahrenheit(celsius: float) -> float:
        """Convert °C to °F."""
        return celsius * 9 / 5 + 32
