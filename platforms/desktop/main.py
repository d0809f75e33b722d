#!/usr/bin/env python3
"""
Posture monitor application for desktop platforms.
Feeds recorded or simulated eSense accelerometer data through the
orientation pipeline and reports calibrated head pitch/roll.
"""

import argparse
import logging
import os
import signal
import sys
import threading
import time
from typing import Optional

# Add core modules to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
sys.path.insert(0, os.path.dirname(__file__))

from posture.feedback import PostureIndicator
from posture.orientation import Orientation, OrientationEstimator
from posture.sensors import RawSample
from config import Config, parse_int_setting
from sources import ReplaySource, SimulatedEarable

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Configure root logging once for the application."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def create_source(config: Config, path: Optional[str] = None):
    """Build the sample source named in the configuration."""
    source_type = config.source_type
    if source_type == "replay":
        path = path or config.source_path
        if not path:
            raise ValueError("Replay source needs a recording path")
        return ReplaySource(path)
    if source_type == "simulated":
        return SimulatedEarable(yaw_mount=config.yaw_correction)
    raise ValueError(f"Unknown sample source type: {source_type!r}")


class PostureMonitor:
    """Main posture monitoring system."""

    def __init__(self, config: Config, source=None, realtime: bool = True):
        """
        Initialize the posture monitor.

        Args:
            config: Loaded configuration
            source: Sample source; built from the configuration when None
            realtime: Pace the sample loop at the configured sampling rate
        """
        self.config = config
        self.source = source if source is not None else create_source(config)
        self.realtime = realtime

        self.estimator = OrientationEstimator(
            window_size=config.window_size,
            yaw_correction=config.yaw_correction,
            invert_y_axis=config.invert_y_axis,
        )
        self.indicator = PostureIndicator(
            max_pitch=config.max_pitch,
            max_roll=config.max_roll,
        )

        # Threading control
        self.running = False
        self.source_open = False
        self.sample_thread = None
        self.output_thread = None
        self.max_samples = None
        self.calibrate_after = None

        # Data storage
        self.current_orientation: Optional[Orientation] = None
        self.last_sample_time = 0.0
        self.samples_received = 0
        self.samples_rejected = 0

        # Statistics
        self.start_time = time.time()

        logger.info("Posture monitor initialized for %s", config.device_name)

    # -- input contract ----------------------------------------------------------

    def handle_sample(self, sample) -> Optional[Orientation]:
        """
        Process one delivered sample.

        Accepts a RawSample or any 3-element sequence. Incomplete readings
        are logged and dropped.
        """
        if not isinstance(sample, RawSample):
            try:
                sample = RawSample.from_sequence(sample)
            except (TypeError, ValueError) as e:
                self.samples_rejected += 1
                logger.warning("Dropping incomplete reading: %s", e)
                return None

        orientation = self.estimator.process_sample(sample)
        self.samples_received += 1
        self.last_sample_time = time.time()
        if orientation is not None:
            self.current_orientation = orientation

        if self.calibrate_after is not None and self.samples_received == self.calibrate_after:
            self.calibrate()

        return orientation

    # -- user actions --------------------------------------------------------------

    def calibrate(self):
        """Use the current head pose as the neutral position."""
        self.estimator.calibrate()
        print("Calibrated to current posture")

    def set_yaw_correction(self, value):
        """Apply a yaw correction given as int or text."""
        value = parse_int_setting(value) if isinstance(value, str) else int(value)
        self.estimator.set_yaw_correction(value)
        self.config.set("yaw_correction", value)

    def set_invert_y_axis(self, invert: bool):
        self.estimator.set_invert_y_axis(invert)
        self.config.set("invert_y_axis", bool(invert))

    def set_display_limits(self, max_pitch, max_roll):
        """Apply pitch/roll display limits given as int or text."""
        if isinstance(max_pitch, str):
            max_pitch = parse_int_setting(max_pitch)
        if isinstance(max_roll, str):
            max_roll = parse_int_setting(max_roll)
        self.indicator.set_limits(max_pitch, max_roll)
        self.config.set("display.max_pitch", max_pitch)
        self.config.set("display.max_roll", max_roll)

    # -- lifecycle -----------------------------------------------------------------

    def start(self, max_samples: Optional[int] = None,
              calibrate_after: Optional[int] = None) -> bool:
        """Start the posture monitor."""
        if self.running:
            logger.warning("Posture monitor already running")
            return False

        if not self.source.initialize():
            logger.error("Failed to initialize sample source")
            return False

        self.source_open = True
        self.max_samples = max_samples
        self.calibrate_after = calibrate_after
        self.running = True
        self.start_time = time.time()

        self.sample_thread = threading.Thread(target=self._sample_loop, daemon=True)
        self.output_thread = threading.Thread(target=self._output_loop, daemon=True)
        self.sample_thread.start()
        self.output_thread.start()

        logger.info("Posture monitor started")
        return True

    def stop(self):
        """Stop the posture monitor."""
        if not self.source_open:
            return

        self.running = False

        current = threading.current_thread()
        for thread in (self.sample_thread, self.output_thread):
            if thread and thread.is_alive() and thread is not current:
                thread.join(timeout=2.0)

        self.source.cleanup()
        self.source_open = False
        logger.info("Posture monitor stopped")

    def wait(self, timeout: Optional[float] = None):
        """Block until the sample loop finishes."""
        if self.sample_thread:
            self.sample_thread.join(timeout)

    def _sample_loop(self):
        """Sample processing loop."""
        period = 1.0 / self.config.sampling_rate_hz

        while self.running:
            try:
                sample = self.source.read_sample()
                if sample is None:
                    logger.info("Sample source exhausted")
                    break

                self.handle_sample(sample)

                if self.max_samples is not None and self.samples_received >= self.max_samples:
                    break

            except Exception:
                logger.exception("Sample loop error")
                time.sleep(0.1)

            if self.realtime:
                time.sleep(period)

        self.running = False

    def _output_loop(self):
        """Status output loop."""
        interval = 1.0 / self.config.output_rate_hz
        last_output_time = time.time()

        while self.running:
            current_time = time.time()
            if current_time - last_output_time >= interval:
                self._print_status()
                last_output_time = current_time
            time.sleep(0.05)

    def _print_status(self):
        """Print current posture."""
        orientation = self.current_orientation
        if orientation is None:
            print(f"Warming up... ({self.samples_received} samples)")
            return

        x, y = self.indicator.normalize(orientation)
        severity = self.indicator.severity(orientation)
        print(f"Pitch {orientation.pitch:+6.1f}°  Roll {orientation.roll:+6.1f}°  "
              f"indicator=({x:+.2f}, {y:+.2f})  severity={severity:.2f}")

    def get_current_orientation(self) -> dict:
        """Get current orientation for external consumers."""
        orientation = self.current_orientation
        stats = self.estimator.get_statistics()

        result = {
            'timestamp': time.time(),
            'ready': orientation is not None,
            'orientation': None,
            'indicator': None,
            'samples': self.samples_received,
            'rejected': self.samples_rejected,
            'calibration': {
                'pitch_target': stats['pitch_target'],
                'roll_target': stats['roll_target'],
            },
        }
        if orientation is not None:
            x, y = self.indicator.normalize(orientation)
            result['orientation'] = {'pitch': orientation.pitch, 'roll': orientation.roll}
            result['indicator'] = {
                'x': x,
                'y': y,
                'severity': self.indicator.severity(orientation),
                'color': self.indicator.color(orientation),
            }
        return result


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Head posture monitor for eSense earables")
    parser.add_argument("--config", default="config.json", help="JSON configuration file")
    parser.add_argument("--source", choices=["simulated", "replay"], help="Sample source override")
    parser.add_argument("--file", help="Recording to replay")
    parser.add_argument("--calibrate-after", type=int, default=None,
                        help="Calibrate automatically after N samples")
    parser.add_argument("--max-samples", type=int, default=None,
                        help="Stop after N samples")
    parser.add_argument("--log-level", default=None, help="Override configured log level")
    parser.add_argument("--show-config", action="store_true",
                        help="Print the effective configuration and exit")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    config = Config(args.config)
    if args.source:
        config.set("source.type", args.source)
    if args.file:
        config.set("source.path", args.file)

    setup_logging(args.log_level or config.log_level, config.log_file)

    print("PosturePal head posture monitor")
    print("=" * 50)

    if args.show_config:
        config.print_config()
        return 0

    try:
        monitor = PostureMonitor(config)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    def _signal_handler(signum, frame):
        print("\nShutdown signal received, stopping monitor...")
        monitor.stop()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    if not monitor.start(max_samples=args.max_samples, calibrate_after=args.calibrate_after):
        print("Failed to start monitor")
        return 1

    try:
        while monitor.running:
            time.sleep(0.2)
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received")
    finally:
        monitor.stop()
        monitor._print_status()

    return 0


if __name__ == "__main__":
    sys.exit(main())
