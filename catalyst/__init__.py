"""Game engine building blocks: configuration, window state, frame timing, debug gizmos and utilities."""

__version__ = "0.1.0"

__all__ = [
    "callback",
    "config",
    "editor",
    "gizmos",
    "gizmos2d",
    "linq",
    "rings",
    "screen",
    "spheres",
    "strings",
    "timing",
]