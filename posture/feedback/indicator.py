"""
Normalised posture indicator derived from display limits.
"""

import math
from typing import Tuple

from ..math.constants import DEFAULT_MAX_PITCH, DEFAULT_MAX_ROLL
from ..math.utils import clamp
from ..orientation.estimator import Orientation

GOOD_COLOR = (0, 200, 0)
BAD_COLOR = (220, 0, 0)


class PostureIndicator:
    """
    Maps an orientation onto a unit disc for visual feedback.

    Roll drives the horizontal axis and pitch the vertical one, each divided
    by its display limit and clamped to [-1, 1]. The resulting point is
    pulled back onto the unit circle when it falls outside it.
    """

    def __init__(self, max_pitch: int = DEFAULT_MAX_PITCH,
                 max_roll: int = DEFAULT_MAX_ROLL):
        self.set_limits(max_pitch, max_roll)

    def set_limits(self, max_pitch: int, max_roll: int):
        """
        Set display limits in degrees.

        Raises:
            ValueError: If either limit is not positive
        """
        if max_pitch <= 0 or max_roll <= 0:
            raise ValueError(f"Display limits must be positive, got pitch={max_pitch}, roll={max_roll}")
        self.max_pitch = max_pitch
        self.max_roll = max_roll

    def normalize(self, orientation: Orientation) -> Tuple[float, float]:
        """
        Position of the indicator inside the unit disc.

        Returns:
            (x, y) where x follows roll and y follows pitch
        """
        x = clamp(orientation.roll / self.max_roll, -1.0, 1.0)
        y = clamp(orientation.pitch / self.max_pitch, -1.0, 1.0)

        length = math.hypot(x, y)
        if length > 1.0:
            x, y = x / length, y / length
        return x, y

    def severity(self, orientation: Orientation) -> float:
        """Distance from the neutral centre, 0 (upright) to 1 (at the limit)."""
        x, y = self.normalize(orientation)
        return clamp(math.hypot(x, y), 0.0, 1.0)

    def color(self, orientation: Orientation) -> Tuple[int, int, int]:
        """Green to red RGB colour by severity."""
        t = self.severity(orientation)
        return tuple(
            int(round(good + (bad - good) * t))
            for good, bad in zip(GOOD_COLOR, BAD_COLOR)
        )
