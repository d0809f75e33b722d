"""
Yaw-correction rotation for aligning the earable frame with the head frame.
"""

import numpy as np

from ..math.utils import rotation_matrix_x
from ..sensors.accel import SensorReading


class RotationTransform:
    """
    Rotates acceleration vectors about the sensor X axis.

    The yaw correction is a fixed mounting angle of the earable relative to
    the head's pitch rotation plane, not a measured yaw. The transform holds
    no state; every call is a pure function of its arguments.
    """

    @staticmethod
    def apply_vector(vector: np.ndarray, yaw_correction: float) -> np.ndarray:
        """
        Rotate a 3-vector.

        Args:
            vector: Acceleration [x, y, z] in any scale
            yaw_correction: Correction angle in degrees

        Returns:
            Rotated [x', y', z']
        """
        vector = np.asarray(vector, dtype=float)
        if vector.shape != (3,):
            raise ValueError("Rotation input must be a 3-vector")
        return rotation_matrix_x(yaw_correction) @ vector

    @classmethod
    def apply(cls, reading: SensorReading, yaw_correction: float) -> SensorReading:
        """Rotate a sensor reading into the head frame."""
        return SensorReading.from_array(cls.apply_vector(reading.vector, yaw_correction))
