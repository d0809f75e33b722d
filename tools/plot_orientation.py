#!/usr/bin/env python3
import os
import sys

import numpy as np
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'platforms', 'desktop'))

from posture.orientation import OrientationEstimator
from sources import ReplaySource

# ------------------------------------------
# Arguments
# ------------------------------------------
if len(sys.argv) < 2:
    print("Usage: plot_orientation.py <recording.csv> [yaw_correction] [calibrate_at]")
    sys.exit(1)

recording = sys.argv[1]
yaw_correction = int(sys.argv[2]) if len(sys.argv) > 2 else 0
calibrate_at = int(sys.argv[3]) if len(sys.argv) > 3 else None

source = ReplaySource(recording)
if not source.initialize():
    print(f"No samples in {recording}")
    sys.exit(1)

# ------------------------------------------
# Run the pipeline
# ------------------------------------------
estimator = OrientationEstimator(yaw_correction=yaw_correction)

index = []
pitch = []
roll = []

for i, sample in enumerate(source):
    orientation = estimator.process_sample(sample)
    if calibrate_at is not None and i == calibrate_at:
        estimator.calibrate()
    if orientation is None:
        continue
    index.append(i)
    pitch.append(orientation.pitch)
    roll.append(orientation.roll)

index = np.array(index)
pitch = np.array(pitch)
roll = np.array(roll)

# ------------------------------------------
# Plot
# ------------------------------------------
fig, (ax_t, ax_xy) = plt.subplots(1, 2, figsize=(12, 5))

ax_t.plot(index, pitch, 'b-', label="Pitch")
ax_t.plot(index, roll, 'r-', label="Roll")
if calibrate_at is not None:
    ax_t.axvline(calibrate_at, color='k', linestyle='--', label="Calibration")
ax_t.set_xlabel("Sample")
ax_t.set_ylabel("Angle (deg)")
ax_t.set_title(f"Head orientation (yaw correction {yaw_correction}°)")
ax_t.grid(True)
ax_t.legend()

ax_xy.plot(roll, pitch, 'g.', markersize=3)
ax_xy.set_xlabel("Roll (deg)")
ax_xy.set_ylabel("Pitch (deg)")
ax_xy.set_title("Posture trace")
ax_xy.grid(True)
ax_xy.axis('equal')

plt.tight_layout()
plt.show()


#Sample run command: python3 plot_orientation.py session.csv 20 150
