"""Statute mile and kilometre conversion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from metarconv.common.enums import DistanceUnit
from metarconv.constants import SM_TO_KM


class DistanceConverter:
    """Convert between kilometres and statute miles."""

    @staticmethod
    def km_to_sm(km: float) -> float:
        """Convert kilometres to statute miles."""
        return km / SM_TO_KM

    @staticmethod
    def sm_to_km(sm: float) -> float:
        """Convert statute miles to kilometres."""
        return sm * SM_TO_KM


class Distance(BaseModel):
    """A distance tagged with its unit."""

    model_config = ConfigDict(frozen=True)

    value: float
    unit: DistanceUnit

    def to_km(self) -> float:
        """Distance in kilometres."""
        if self.unit is DistanceUnit.KILOMETERS:
            return self.value
        if self.unit is DistanceUnit.METERS:
            return self.value / 1000
        return DistanceConverter.sm_to_km(self.value)

    def to_sm(self) -> float:
        """Distance in statute miles."""
        if self.unit is DistanceUnit.STATUTE_MILES:
            return self.value
        return DistanceConverter.km_to_sm(self.to_km())
