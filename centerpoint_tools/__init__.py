"""Helpers for CenterPoint lidar object detection: configuration, interpolation, timing, message conversion and node parameters."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "conversion",
    "interpolation",
    "messages",
    "node_params",
    "stopwatch",
]