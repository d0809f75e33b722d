"""
Mathematical utilities for orientation estimation.
"""

from .utils import (
    round_to_places,
    apply_deadband,
    rotation_matrix_x,
    tilt_angle,
    clamp,
)
from .constants import *

__all__ = [
    "round_to_places",
    "apply_deadband",
    "rotation_matrix_x",
    "tilt_angle",
    "clamp",
]
