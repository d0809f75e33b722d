"""
Posture orientation pipeline.

This package provides platform-independent implementations of:
- Sliding-window smoothing of accelerometer axes
- Yaw-correction rotation and pitch/roll extraction
- Calibration against a user-chosen neutral pose
- Posture indicator normalisation for visual feedback
"""

__version__ = "1.0.0"
__author__ = "PosturePal Team"

from .sensors import RawSample, SensorReading, SlidingWindow
from .orientation import OrientationEstimator, Orientation, CalibrationState, RotationTransform
from .feedback import PostureIndicator

__all__ = [
    "RawSample",
    "SensorReading",
    "SlidingWindow",
    "OrientationEstimator",
    "Orientation",
    "CalibrationState",
    "RotationTransform",
    "PostureIndicator",
]
