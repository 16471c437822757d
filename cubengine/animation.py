"""Sprite-sheet slicing, the minimap direction markers and the player's hand."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .image import Image
from .state import H_DELAY, H_X, H_Y

MARKER_SIZE = 32
MARKER_FRAMES = 24
MARKER_STEP = 15.0


def slice_sprite(sheet: Image, width: int, height: int, frames: int) -> list[Image]:
    """Cut ``frames`` width x height images from ``sheet``.

    Frames are taken left to right from the top-left corner, moving down a
    row whenever the next frame would start past the sheet's right edge.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid frame size {width}x{height}")
    if frames < 0:
        raise ValueError(f"invalid frame count {frames}")
    result = []
    x = y = 0
    for _ in range(frames):
        result.append(sheet.crop(x, y, width, height))
        x += width
        if x >= sheet.width:
            x = 0
            y += height
    return result


@dataclass
class Marker:
    """One arrow image of the position marker and the angle where its sector starts."""

    frame: Image
    min_angle: float


@dataclass
class MarkerRing:
    """The circular sequence of markers, one per 15-degree sector."""

    markers: list[Marker]
    current: int = 0

    def __post_init__(self) -> None:
        if not self.markers:
            raise ValueError("a marker ring needs at least one marker")

    def find(self, dir_x: float, dir_y: float) -> Marker:
        """Select and return the marker for the sector the direction points into."""
        degrees = math.degrees(math.atan2(dir_y, dir_x))
        if degrees < 0:
            degrees += 360
        degrees %= 360
        target = math.floor(degrees / MARKER_STEP) * MARKER_STEP + MARKER_STEP / 2
        count = len(self.markers)
        for offset in range(count):
            index = (self.current + offset) % count
            if self.markers[index].min_angle == target:
                self.current = index
                return self.markers[index]
        raise LookupError(f"no marker for angle {target}")


def build_marker_ring(sheet: Image) -> MarkerRing:
    """Slice the 24 marker arrows out of ``sheet`` and label their sectors."""
    frames = slice_sprite(sheet, MARKER_SIZE, MARKER_SIZE, MARKER_FRAMES)
    markers = []
    for index, frame in enumerate(frames):
        angle = index * MARKER_STEP - MARKER_STEP / 2
        if angle < 0:
            angle += 360
        markers.append(Marker(frame, angle))
    return MarkerRing(markers)


@dataclass
class HandAnimation:
    """A looping sequence of frames drawn at a fixed screen position."""

    frames: list[Image]
    x: int = H_X
    y: int = H_Y
    delay: int = H_DELAY
    tmp_delay: int = 0
    current: int = 0

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("an animation needs at least one frame")

    def step(self) -> None:
        """Move to the next frame, wrapping to the first, and restart the delay."""
        self.current = (self.current + 1) % len(self.frames)
        self.tmp_delay = 0


@dataclass
class HandPair:
    """The player's hand, plain and lit, animated in step with each other."""

    plain: HandAnimation
    light: HandAnimation

    def update(self, moving: bool) -> None:
        """Count one tick while moving and advance both hands once their delays run out."""
        if not moving:
            return
        self.plain.tmp_delay += 1
        if self.plain.tmp_delay < self.plain.delay:
            return
        self.light.tmp_delay += 1
        if self.light.tmp_delay < self.light.delay:
            return
        self.plain.step()
        self.light.step()
        if self.plain.current == 0:
            self.light.current = 0

    def frame(self, lit: bool) -> tuple[Image, int, int]:
        """Return the image to draw and its top-left screen position."""
        anim = self.light if lit else self.plain
        return anim.frames[anim.current], anim.x, anim.y