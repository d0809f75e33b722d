"""
Sensor data model and smoothing.
"""

from .accel import RawSample, SensorReading
from .sliding_window import SlidingWindow

__all__ = ["RawSample", "SensorReading", "SlidingWindow"]
