"""
Accelerometer sample sources for the desktop platform.
"""

from .replay import ReplaySource, parse_sample_line
from .simulated import SimulatedEarable

__all__ = ["ReplaySource", "SimulatedEarable", "parse_sample_line"]
