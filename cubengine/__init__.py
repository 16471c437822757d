"""Tile-map raycasting engine rendering into in-memory images, with minimap, hand animation and controls."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "controls",
    "display",
    "game",
    "image",
    "linereader",
    "minimap",
    "raycast",
    "state",
]