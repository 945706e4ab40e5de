"""Core utilities for a small 2D game engine: events, input state, camera, math, UUIDs, resources and logging."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "converter",
    "events",
    "fzlog",
    "inputs",
    "mathutils",
    "randomness",
    "resources",
    "uuidgen",
    "uuids",
]