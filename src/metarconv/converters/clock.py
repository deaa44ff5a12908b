"""Report time token conversion."""

from __future__ import annotations

from datetime import time

from metarconv.converters.parsing import parse_int
from metarconv.errors import ParseError


class TimeConverter:
    """Decode ``HHMM`` time tokens."""

    @staticmethod
    def string_to_time(text: str) -> time:
        """Convert a time token to a time of day.

        Args:
            text: Token such as "0830"; the first two characters are the
                hour and the rest the minute

        Returns:
            The time of day (e.g. 08:30)

        Raises:
            ParseError: If either part is not an integer or the values are
                outside 0-23 / 0-59
        """
        hours = parse_int(text[:2])
        minutes = parse_int(text[2:])
        try:
            return time(hours, minutes)
        except ValueError as exc:
            raise ParseError("Invalid time of day", text, exc) from exc
