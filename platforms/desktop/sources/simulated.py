"""
Simulated earable producing raw accelerometer readings for a given head pose.

The gravity vector for the commanded pitch/roll is built in the head frame
and rotated back into the earable frame by the mounting angle, so that an
estimator configured with the same yaw correction recovers the pose.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from posture.math import ACCEL_UNITS_PER_G, rotation_matrix_x
from posture.sensors import RawSample


@dataclass
class SimulatedEarable:
    """Simulate eSense accelerometer output for a head pose.

    Parameters:
        pitch (float): Head pitch in degrees, positive is upward.
        roll (float): Head roll in degrees, positive is to the right.
        yaw_mount (float): Mounting angle of the earable about its X axis (degrees).
        noise_std (float): Standard deviation of white noise in device units.
        units_per_g (float): Device units for 1 g.
        random_state (Optional[np.random.Generator]): Generator for reproducibility.
    """
    pitch: float = 0.0
    roll: float = 0.0
    yaw_mount: float = 0.0
    noise_std: float = 20.0
    units_per_g: float = ACCEL_UNITS_PER_G
    random_state: Optional[np.random.Generator] = field(default=None)

    def __post_init__(self):
        self.rng = self.random_state if self.random_state is not None else np.random.default_rng()
        self.initialized = False
        self.sample_count = 0

    def initialize(self) -> bool:
        self.initialized = True
        return True

    def set_pose(self, pitch: float, roll: float):
        self.pitch = pitch
        self.roll = roll

    def head_frame_gravity(self) -> np.ndarray:
        """Unit gravity vector in the head frame for the current pose."""
        gy = -math.sin(math.radians(self.pitch))
        gz = math.sin(math.radians(self.roll))
        gx = math.sqrt(max(0.0, 1.0 - gy * gy - gz * gz))
        return np.array([gx, gy, gz])

    def sensor_frame_gravity(self) -> np.ndarray:
        """Gravity as seen by the tilted earable (g)."""
        return rotation_matrix_x(-self.yaw_mount) @ self.head_frame_gravity()

    def read_sample(self) -> RawSample:
        """Generate one noisy raw reading."""
        accel = self.sensor_frame_gravity() * self.units_per_g
        if self.noise_std > 0:
            accel = accel + self.rng.normal(0.0, self.noise_std, size=3)
        self.sample_count += 1
        return RawSample.from_sequence(np.rint(accel).astype(int).tolist())

    def __iter__(self) -> Iterator[RawSample]:
        while True:
            yield self.read_sample()

    def cleanup(self):
        self.initialized = False
