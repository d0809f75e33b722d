"""
Accelerometer data model for the eSense earable.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class RawSample:
    """
    One raw accelerometer reading in device units (~1000 per g).

    Produced once per sensor tick by the connectivity layer and consumed
    immediately by the orientation estimator.
    """

    x: int
    y: int
    z: int

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> 'RawSample':
        """
        Build a sample from a 3-element sequence such as a sensor event payload.

        Raises:
            ValueError: If the sequence does not hold exactly three values
        """
        if values is None or len(values) != 3:
            raise ValueError(f"Accelerometer reading must have 3 axes, got {values!r}")
        return cls(int(values[0]), int(values[1]), int(values[2]))

    def as_tuple(self):
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class SensorReading:
    """Floating-point accelerometer triplet (smoothed and scaled)."""

    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, vector: np.ndarray) -> 'SensorReading':
        if len(vector) != 3:
            raise ValueError("Sensor reading vector must have 3 elements")
        return cls(float(vector[0]), float(vector[1]), float(vector[2]))

    @property
    def vector(self) -> np.ndarray:
        """Get reading as numpy array."""
        return np.array([self.x, self.y, self.z])

    def scaled(self, divisor: float) -> 'SensorReading':
        """Return a copy with every axis divided by ``divisor``."""
        return SensorReading(self.x / divisor, self.y / divisor, self.z / divisor)
