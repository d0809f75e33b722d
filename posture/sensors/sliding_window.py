"""
Fixed-capacity moving average over one accelerometer axis.
"""

import logging
from collections import deque
from typing import Callable, Deque, Optional, Tuple, Union

from ..math.constants import ACCEL_UNITS_PER_G, DEFAULT_WINDOW_SIZE, SCALE_DECIMAL_PLACES
from ..math.utils import apply_deadband, round_to_places

logger = logging.getLogger(__name__)

AverageCallback = Callable[[float], None]


class SlidingWindow:
    """
    Rolling window of scaled readings for a single axis.

    Every raw value is scaled to g, rounded to two decimals and passed
    through the deadband before it enters the window. The average is only
    defined once the window holds exactly ``size`` values; before that
    ``average`` is ``None``.

    An optional observer is notified with each new full-window average. It
    can be a plain callable or an object exposing ``on_average_ready(value)``.
    """

    def __init__(self, size: int = DEFAULT_WINDOW_SIZE,
                 on_average=None):
        """
        Initialize sliding window.

        Args:
            size: Number of readings averaged (must be a positive integer)
            on_average: Optional observer for new averages

        Raises:
            ValueError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Sliding window size must be a positive integer, got {size!r}")

        self._size = size
        self._values: Deque[float] = deque()
        self._sum = 0.0
        self._average: Optional[float] = None
        self._observer = self._resolve_observer(on_average)

    @staticmethod
    def _resolve_observer(observer) -> Optional[AverageCallback]:
        if observer is None:
            return None
        if hasattr(observer, "on_average_ready"):
            return observer.on_average_ready
        if callable(observer):
            return observer
        raise ValueError("Average observer must be callable or define on_average_ready()")

    @property
    def size(self) -> int:
        return self._size

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def is_ready(self) -> bool:
        return len(self._values) == self._size

    @property
    def average(self) -> Optional[float]:
        """Current full-window average in g, or None during warm-up."""
        return self._average

    @property
    def values(self) -> Tuple[float, ...]:
        return tuple(self._values)

    @staticmethod
    def scale(raw_value: int) -> float:
        """Convert a raw device value to g, rounded and deadbanded."""
        scaled = round_to_places(raw_value / ACCEL_UNITS_PER_G, SCALE_DECIMAL_PLACES)
        return apply_deadband(scaled)

    def add(self, raw_value: int) -> Optional[float]:
        """
        Add a raw reading to the window.

        Args:
            raw_value: Raw accelerometer value in device units

        Returns:
            The new average, or None while the window is filling
        """
        value = self.scale(raw_value)
        self._values.append(value)
        self._sum += value

        if len(self._values) > self._size:
            self._sum -= self._values.popleft()

        if len(self._values) == self._size:
            was_ready = self._average is not None
            self._average = apply_deadband(self._sum / self._size)
            if not was_ready:
                logger.debug("Sliding window filled (%d samples)", self._size)
            if self._observer is not None:
                self._observer(self._average)
        else:
            self._average = None

        return self._average

    def reset(self):
        """Discard all readings."""
        self._values.clear()
        self._sum = 0.0
        self._average = None

    def __repr__(self) -> str:
        return (f"SlidingWindow(size={self._size}, count={self.count}, "
                f"average={self._average})")
