"""
Mathematical utility functions for orientation estimation.
"""

import math

import numpy as np

from .constants import DEADBAND_THRESHOLD, DEG_TO_RAD, RAD_TO_DEG


def round_to_places(value, places):
    """
    Round a value to a number of decimal places, halves away from zero.

    Args:
        value (float): Value to round
        places (int): Number of decimal places

    Returns:
        float: Rounded value
    """
    mod = 10.0 ** places
    scaled = value * mod
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / mod


def apply_deadband(value, threshold=DEADBAND_THRESHOLD):
    """Force values with magnitude below ``threshold`` to exactly zero."""
    if abs(value) < threshold:
        return 0.0
    return value


def rotation_matrix_x(angle_deg):
    """
    Create a 3D rotation matrix about the X axis.

    Args:
        angle_deg (float): Angle in degrees

    Returns:
        np.ndarray: 3x3 rotation matrix
    """
    angle = angle_deg * DEG_TO_RAD
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)

    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, cos_a, -sin_a],
        [0.0, sin_a, cos_a]
    ])


def tilt_angle(numerator, a, b):
    """
    Angle in degrees of ``numerator`` against the plane spanned by ``a`` and ``b``.

    Equal to ``atan(numerator / sqrt(a**2 + b**2))`` whenever the denominator
    is positive. A zero denominator resolves to +/-90 degrees following the
    sign of the numerator, and to 0 when the numerator is zero as well.

    Args:
        numerator (float): Component along the tilt direction
        a (float): First in-plane component
        b (float): Second in-plane component

    Returns:
        float: Tilt angle in degrees
    """
    return math.atan2(numerator, math.sqrt(a * a + b * b)) * RAD_TO_DEG


def clamp(value, lower, upper):
    """Clamp a value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))
