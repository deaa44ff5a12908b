"""Precipitation amount conversion."""

from __future__ import annotations

from metarconv.converters.parsing import parse_real


class PrecipitationConverter:
    """Decode precipitation groups reported in hundredths of an inch."""

    @staticmethod
    def convert_precipitation_amount(text: str) -> float:
        """Convert a precipitation token to inches.

        Args:
            text: Amount in hundredths of an inch (e.g. "0125")

        Returns:
            Amount in inches (e.g. 1.25)

        Raises:
            ParseError: If the text is not a number
        """
        return parse_real(text) / 100
