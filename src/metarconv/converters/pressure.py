"""Altimeter pressure conversion."""

from __future__ import annotations

from metarconv.constants import INHG_TO_HPA


class PressureConverter:
    """Pressure unit conversion."""

    @staticmethod
    def inches_mercury_to_hpascal(inches_mercury: float) -> float:
        """Convert inches of mercury to hectopascals."""
        return INHG_TO_HPA * inches_mercury
