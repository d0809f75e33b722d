"""
Mathematical and device constants for the orientation pipeline.
"""

import math

# Conversion factors
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Accelerometer units (eSense earable reports roughly 1000 units per g)
ACCEL_UNITS_PER_G = 1000.0
SCALE_DECIMAL_PLACES = 2

# Second scale-down applied when the averaged axes are reassembled.
# Tilt angles are ratios, so this does not change pitch/roll values.
SECOND_STAGE_DIVISOR = 1000.0

# Values whose magnitude is below this are forced to zero (g)
DEADBAND_THRESHOLD = 0.1

# Smoothing
DEFAULT_WINDOW_SIZE = 10          # samples, ~100 ms at 100 Hz
DEFAULT_SAMPLING_RATE_HZ = 100

# Presentation defaults (degrees)
DEFAULT_MAX_PITCH = 35
DEFAULT_MAX_ROLL = 35

# Device
DEFAULT_DEVICE_NAME = "eSense-0338"
