#!/usr/bin/env python3
"""
Basic usage example of the orientation pipeline.

This example demonstrates how to use the core orientation algorithms
without an eSense device: a simulated head nods forward, gets calibrated
in a neutral pose and then tilts sideways.
"""

import sys
import os
import numpy as np

# Add core and platform modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'platforms', 'desktop'))

from posture import OrientationEstimator, PostureIndicator
from sources import SimulatedEarable


def main():
    """Run the orientation pipeline on simulated data."""
    print("Orientation Pipeline - Basic Usage Example")
    print("=" * 50)

    earable = SimulatedEarable(yaw_mount=20, noise_std=15.0,
                               random_state=np.random.default_rng(0))
    estimator = OrientationEstimator(window_size=10, yaw_correction=20)
    indicator = PostureIndicator(max_pitch=35, max_roll=35)

    updates = []
    estimator.add_listener(updates.append)

    phases = [
        ("Slouching forward", -25.0, 0.0),
        ("Neutral pose", -10.0, 0.0),
        ("Tilting right", -10.0, 20.0),
    ]

    for name, pitch, roll in phases:
        earable.set_pose(pitch, roll)
        orientation = None
        for _ in range(50):
            orientation = estimator.process_sample(earable.read_sample())

        print(f"\n{name}:")
        print(f"  {orientation}")
        print(f"  Indicator: {indicator.normalize(orientation)}, "
              f"severity {indicator.severity(orientation):.2f}")

        if name == "Neutral pose":
            estimator.calibrate()
            print("  -> calibrated")

    print(f"\nListener received {len(updates)} orientation updates")
    print("\nEstimator statistics:")
    for key, value in estimator.get_statistics().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
