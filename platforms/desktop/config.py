"""
Configuration manager for the desktop posture monitor.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from posture.math.constants import (
    DEFAULT_DEVICE_NAME,
    DEFAULT_MAX_PITCH,
    DEFAULT_MAX_ROLL,
    DEFAULT_SAMPLING_RATE_HZ,
    DEFAULT_WINDOW_SIZE,
)

logger = logging.getLogger(__name__)


def parse_int_setting(text: str) -> int:
    """
    Parse an integer setting entered as text.

    Raises:
        ValueError: If the text is not a valid integer
    """
    try:
        return int(str(text).strip())
    except ValueError:
        raise ValueError(f"Please enter a valid integer value, got {text!r}") from None


class Config:
    """Configuration manager for the posture monitor."""

    DEFAULT_CONFIG = {
        # Device
        "device_name": DEFAULT_DEVICE_NAME,
        "sampling_rate_hz": DEFAULT_SAMPLING_RATE_HZ,

        # Orientation pipeline
        "window_size": DEFAULT_WINDOW_SIZE,
        "yaw_correction": 0,
        "invert_y_axis": False,

        # Presentation limits (degrees)
        "display": {
            "max_pitch": DEFAULT_MAX_PITCH,
            "max_roll": DEFAULT_MAX_ROLL
        },

        # Sample source
        "source": {
            "type": "simulated",
            "path": None
        },

        # Logging
        "log_level": "INFO",
        "log_file": None,

        # Output configuration
        "output_rate_hz": 2.0
    }

    def __init__(self, config_file: Optional[str] = "config.json"):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file, or None for defaults only
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_config()
        elif config_file:
            logger.info("Config file %s not found, using defaults", config_file)

    def load_config(self) -> bool:
        """
        Load configuration from file.

        Returns:
            True if loaded successfully
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)

            # File config overrides defaults
            self._merge_config(self.config, file_config)

            logger.info("Configuration loaded from %s", self.config_file)
            return True

        except (OSError, ValueError) as e:
            logger.error("Failed to load config %s: %s", self.config_file, e)
            return False

    def save_config(self) -> bool:
        """
        Save current configuration to file.

        Returns:
            True if saved successfully
        """
        if not self.config_file:
            logger.error("No config file path set, cannot save")
            return False

        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)

            logger.info("Configuration saved to %s", self.config_file)
            return True

        except (OSError, TypeError) as e:
            logger.error("Failed to save config %s: %s", self.config_file, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default=None):
        """Get configuration value with optional default."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set configuration value."""
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    # Property accessors for common configuration values
    @property
    def device_name(self) -> str:
        return self.config["device_name"]

    @property
    def sampling_rate_hz(self) -> int:
        return self.config["sampling_rate_hz"]

    @property
    def window_size(self) -> int:
        return self.config["window_size"]

    @property
    def yaw_correction(self) -> int:
        return self.config["yaw_correction"]

    @property
    def invert_y_axis(self) -> bool:
        return bool(self.config["invert_y_axis"])

    @property
    def max_pitch(self) -> int:
        return self.config["display"]["max_pitch"]

    @property
    def max_roll(self) -> int:
        return self.config["display"]["max_roll"]

    @property
    def source_type(self) -> str:
        return self.config["source"]["type"]

    @property
    def source_path(self) -> Optional[str]:
        return self.config["source"]["path"]

    @property
    def log_level(self) -> str:
        return self.config["log_level"]

    @property
    def log_file(self) -> Optional[str]:
        return self.config["log_file"]

    @property
    def output_rate_hz(self) -> float:
        return self.config["output_rate_hz"]

    def print_config(self):
        """Print current configuration."""
        print("=== Posture Monitor Configuration ===")
        print(json.dumps(self.config, indent=2))
