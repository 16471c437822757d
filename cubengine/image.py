"""In-memory raster images holding 0xAARRGGBB pixel values."""

from __future__ import annotations

from dataclasses import dataclass, field

TRANSPARENT = 0xFF000000


@dataclass
class Image:
    """A width x height grid of integer colours, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        """Return the colour at (x, y); raise IndexError outside the image."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def put(self, x: int, y: int, color: int) -> None:
        """Set the colour at (x, y); points outside the image are ignored."""
        if self._contains(x, y):
            self.pixels[y * self.width + x] = color

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a w x h rectangle whose top-left corner is (x, y)."""
        for row in range(y, min(y + h, self.height)):
            for col in range(x, min(x + w, self.width)):
                self.put(col, row, color)

    def blit(self, src: Image, x: int, y: int) -> None:
        """Draw src with its top-left corner at (x, y), skipping transparent pixels."""
        x, y = int(x), int(y)
        for sy in range(src.height):
            for sx in range(src.width):
                color = src.pixels[sy * src.width + sx]
                if color != TRANSPARENT:
                    self.put(x + sx, y + sy, color)

    def crop(self, x: int, y: int, w: int, h: int) -> Image:
        """Return a new w x h image copied from the region at (x, y).

        Pixels of the region that lie outside this image come out as 0.
        """
        out = Image(w, h)
        for dy in range(h):
            for dx in range(w):
                if self._contains(x + dx, y + dy):
                    out.pixels[dy * w + dx] = self.pixels[(y + dy) * self.width + x + dx]
        return out