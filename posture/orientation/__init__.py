"""
Orientation estimation from accelerometer data.
"""

from .rotation import RotationTransform
from .estimator import OrientationEstimator, Orientation, CalibrationState

__all__ = ["RotationTransform", "OrientationEstimator", "Orientation", "CalibrationState"]
