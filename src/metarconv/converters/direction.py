"""Wind bearing to compass direction conversion."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import ClassVar, Final

from metarconv.common.enums import CompassKey
from metarconv.constants import DIRECTIONS, SECTOR_DEGREES, SECTOR_OFFSET
from metarconv.converters.parsing import parse_real
from metarconv.errors import ParseError

logger: Final = logging.getLogger(__name__)


class DirectionConverter:
    """Resolve degree bearings to 16-point compass keys.

    Each point owns a 22.5° sector. Bearings that are not numbers map to
    ``CompassKey.VRB`` instead of raising, since a report uses non-numeric
    direction text for variable or calm wind.
    """

    KEYS: ClassVar[tuple[CompassKey, ...]] = tuple(CompassKey(d) for d in DIRECTIONS)

    @classmethod
    def degrees_to_direction(cls, text: str) -> CompassKey:
        """Convert a bearing token to a compass key.

        Args:
            text: Bearing in degrees, as text (e.g. "230")

        Returns:
            The compass key of the sector holding the bearing, or
            ``CompassKey.VRB`` if the text is not a finite number
        """
        try:
            degrees = parse_real(text)
        except ParseError:
            logger.debug("Bearing %r is not numeric, using VRB", text)
            return CompassKey.VRB

        index = math.floor((degrees + SECTOR_OFFSET) / SECTOR_DEGREES) % len(cls.KEYS)
        return cls.KEYS[index]

    @classmethod
    def describe(cls, text: str, messages: Mapping[str, str]) -> str:
        """Convert a bearing token to a display label.

        Args:
            text: Bearing in degrees, as text
            messages: Catalog mapping ``Converter.<KEY>`` to labels

        Returns:
            The label for the resolved direction, or the bare key when the
            catalog has no entry for it
        """
        key = cls.degrees_to_direction(text)
        return messages.get(key.message_key, key.value)
