"""
Pitch/roll estimation from smoothed accelerometer data.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..math.constants import DEFAULT_WINDOW_SIZE, SECOND_STAGE_DIVISOR
from ..math.utils import tilt_angle
from ..sensors.accel import RawSample, SensorReading
from ..sensors.sliding_window import SlidingWindow
from .rotation import RotationTransform

logger = logging.getLogger(__name__)

OrientationListener = Callable[['Orientation'], None]


@dataclass(frozen=True)
class Orientation:
    """
    Head orientation in degrees.

    - pitch: forward/backward tilt, positive is upward
    - roll: sideways tilt, positive is to the right
    """

    pitch: float = 0.0
    roll: float = 0.0

    def __str__(self) -> str:
        return f"Orientation(pitch={self.pitch:+.1f}°, roll={self.roll:+.1f}°)"


@dataclass
class CalibrationState:
    """Raw orientation snapshot treated as the neutral pose."""

    pitch_target: float = 0.0
    roll_target: float = 0.0

    def copy(self) -> 'CalibrationState':
        return CalibrationState(self.pitch_target, self.roll_target)


class OrientationEstimator:
    """
    Converts a stream of raw accelerometer samples into calibrated pitch/roll.

    Pipeline per sample: per-axis sliding window, second scale-down,
    yaw-correction rotation, tilt extraction, calibration offset and the
    optional pitch inversion.

    No output is produced until all three windows are full; ``process_sample``
    returns None during warm-up and the raw orientation keeps its previous
    value. Sample processing, calibration and configuration changes share one
    lock, so calibration never observes a half-updated raw orientation.
    """

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE,
                 yaw_correction: int = 0,
                 invert_y_axis: bool = False):
        """
        Initialize orientation estimator.

        Args:
            window_size: Samples averaged per axis
            yaw_correction: Mounting angle of the earable in degrees
            invert_y_axis: Flip the sign of the output pitch
        """
        self._lock = threading.RLock()

        self._acc_x = SlidingWindow(size=window_size)
        self._acc_y = SlidingWindow(size=window_size)
        self._acc_z = SlidingWindow(size=window_size)

        self._yaw_correction = int(yaw_correction)
        self._pitch_sign = -1 if invert_y_axis else 1

        self._raw_orientation = Orientation()
        self._calibration = CalibrationState()

        self._listeners: List[OrientationListener] = []

        # Statistics
        self.sample_count = 0
        self.output_count = 0
        self.calibration_count = 0

    # -- configuration ---------------------------------------------------------

    @property
    def window_size(self) -> int:
        return self._acc_x.size

    @property
    def yaw_correction(self) -> int:
        with self._lock:
            return self._yaw_correction

    @property
    def invert_y_axis(self) -> bool:
        with self._lock:
            return self._pitch_sign < 0

    @property
    def pitch_sign(self) -> int:
        with self._lock:
            return self._pitch_sign

    def set_yaw_correction(self, yaw_correction: int):
        """Set the mounting angle in degrees; applies from the next sample."""
        yaw_correction = int(yaw_correction)
        with self._lock:
            self._yaw_correction = yaw_correction
        logger.info("Yaw correction set to %d°", yaw_correction)

    def set_invert_y_axis(self, invert_y_axis: bool):
        """Invert the output pitch sign; applies from the next sample."""
        with self._lock:
            self._pitch_sign = -1 if invert_y_axis else 1
        logger.info("Invert Y axis: %s", bool(invert_y_axis))

    # -- state -----------------------------------------------------------------

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._acc_x.is_ready and self._acc_y.is_ready and self._acc_z.is_ready

    @property
    def raw_orientation(self) -> Orientation:
        with self._lock:
            return self._raw_orientation

    @property
    def calibration(self) -> CalibrationState:
        with self._lock:
            return self._calibration.copy()

    # -- listeners -------------------------------------------------------------

    def add_listener(self, listener: OrientationListener):
        """Register a callable notified with every calibrated orientation."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: OrientationListener):
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # -- processing ------------------------------------------------------------

    def _smoothed_reading(self) -> SensorReading:
        reading = SensorReading(
            self._acc_x.average,
            self._acc_y.average,
            self._acc_z.average,
        )
        return reading.scaled(SECOND_STAGE_DIVISOR)

    @staticmethod
    def compute_raw_orientation(reading: SensorReading) -> Orientation:
        """
        Pitch and roll of a head-frame acceleration vector.

        A zero denominator resolves to +/-90° (or 0° for a zero vector)
        instead of NaN.
        """
        roll = tilt_angle(reading.z, reading.x, reading.y)
        pitch = -tilt_angle(reading.y, reading.x, reading.z)
        return Orientation(pitch=pitch, roll=roll)

    def process_sample(self, sample: RawSample) -> Optional[Orientation]:
        """
        Feed one raw sample through the pipeline.

        Args:
            sample: Raw accelerometer reading

        Returns:
            Calibrated orientation, or None while the windows are filling
        """
        with self._lock:
            was_ready = self.is_ready

            self._acc_x.add(sample.x)
            self._acc_y.add(sample.y)
            self._acc_z.add(sample.z)
            self.sample_count += 1

            if not self.is_ready:
                return None
            if not was_ready:
                logger.info("Orientation estimator warmed up after %d samples", self.sample_count)

            aligned = RotationTransform.apply(self._smoothed_reading(), self._yaw_correction)
            raw = self.compute_raw_orientation(aligned)
            self._raw_orientation = raw

            orientation = Orientation(
                pitch=self._pitch_sign * (raw.pitch - self._calibration.pitch_target),
                roll=raw.roll - self._calibration.roll_target,
            )
            self.output_count += 1
            listeners = list(self._listeners)

        for listener in listeners:
            listener(orientation)

        return orientation

    # -- calibration -----------------------------------------------------------

    def calibrate(self):
        """Take the latest raw orientation as the neutral pose."""
        with self._lock:
            self._calibration = CalibrationState(
                pitch_target=self._raw_orientation.pitch,
                roll_target=self._raw_orientation.roll,
            )
            self.calibration_count += 1
            target = self._calibration.copy()
        logger.info("Calibrated: pitch target %.2f°, roll target %.2f°",
                    target.pitch_target, target.roll_target)

    def reset_calibration(self):
        """Drop the stored neutral pose."""
        with self._lock:
            self._calibration = CalibrationState()
        logger.info("Calibration reset")

    def reset(self):
        """Clear windows, orientation, calibration and counters; keep configuration."""
        with self._lock:
            for window in (self._acc_x, self._acc_y, self._acc_z):
                window.reset()
            self._raw_orientation = Orientation()
            self._calibration = CalibrationState()
            self.sample_count = 0
            self.output_count = 0
            self.calibration_count = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get estimator statistics."""
        with self._lock:
            return {
                'samples': self.sample_count,
                'outputs': self.output_count,
                'calibrations': self.calibration_count,
                'is_ready': self.is_ready,
                'yaw_correction': self._yaw_correction,
                'invert_y_axis': self._pitch_sign < 0,
                'pitch_target': self._calibration.pitch_target,
                'roll_target': self._calibration.roll_target,
            }
