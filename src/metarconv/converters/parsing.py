"""Strict parsing of numeric report text."""

from __future__ import annotations

import math

from metarconv.errors import ParseError


def parse_int(text: str) -> int:
    """Parse a signed decimal integer made of ASCII digits only.

    Args:
        text: Token substring to parse

    Returns:
        Parsed integer

    Raises:
        ParseError: If the text is empty or holds anything but an optional
            sign followed by digits
    """
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError("Not an integer", text)
    return int(text)


def parse_real(text: str) -> float:
    """Parse a decimal real number.

    Args:
        text: Token substring to parse

    Returns:
        Parsed value

    Raises:
        ParseError: If the text is not a finite number
    """
    if "_" in text:
        raise ParseError("Not a number", text)
    try:
        value = float(text)
    except ValueError as exc:
        raise ParseError("Not a number", text, exc) from exc
    if not math.isfinite(value):
        raise ParseError("Not a finite number", text)
    return value
