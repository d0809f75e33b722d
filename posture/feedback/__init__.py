"""
Posture feedback helpers for the presentation layer.
"""

from .indicator import PostureIndicator

__all__ = ["PostureIndicator"]
